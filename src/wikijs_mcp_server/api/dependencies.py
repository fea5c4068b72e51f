from fastapi import Request

from ..config import Settings
from ..wiki.api_client import WikiJsClient


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_wiki_client(request: Request) -> WikiJsClient:
    # Built once in the app lifespan (see main.create_app).
    return request.app.state.wiki_client
