from typing import Annotated

from fastapi import APIRouter, Depends

from ..config import Settings
from .dependencies import get_app_settings

router = APIRouter(tags=["health"])


@router.get("/health")
def health(settings: Annotated[Settings, Depends(get_app_settings)]):
    return {"status": "ok", "wikijs_api": str(settings.wikijs_api_url)}
