"""
Tool Routes

HTTP transport for the page tools. A host POSTs the tool's JSON arguments to
`/tools/{tool_name}` and receives the same envelope the MCP transport would
return. Tool failures are reported in the envelope with HTTP 200; only
authentication failures produce an error status.
"""

from __future__ import annotations

from typing import Annotated, Any, Dict, List, Optional

from fastapi import APIRouter, Body, Depends, status

from ..auth.security import require_api_key
from ..config import Settings
from ..tools.base import dispatch_tool_call
from ..tools.definitions import TOOL_DEFINITIONS
from ..wiki.api_client import WikiJsClient
from .dependencies import get_app_settings, get_wiki_client

router = APIRouter(
    prefix="/tools",
    tags=["tools"],
    dependencies=[Depends(require_api_key)],
)


@router.get(
    "",
    summary="List available tools",
    status_code=status.HTTP_200_OK,
)
async def list_tools() -> List[Dict[str, Any]]:
    return TOOL_DEFINITIONS


@router.post(
    "/{tool_name}",
    summary="Invoke a page tool",
    status_code=status.HTTP_200_OK,
)
async def call_tool(
    tool_name: str,
    client: Annotated[WikiJsClient, Depends(get_wiki_client)],
    settings: Annotated[Settings, Depends(get_app_settings)],
    arguments: Annotated[Optional[Dict[str, Any]], Body()] = None,
) -> Dict[str, Any]:
    """
    Invoke `tool_name` with the request body as its arguments.

    Returns
    -------
    Dict[str, Any]
        Success or failure envelope.
    """
    return await dispatch_tool_call(
        tool_name,
        arguments,
        client,
        character_limit=settings.character_limit,
    )
