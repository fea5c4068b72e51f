"""
Tool Dispatch Layer

The single entry point through which a host invokes a page tool. It:

- looks the tool up in an explicit allow-list,
- validates the raw argument mapping against the tool's input model,
- runs the handler with the injected client,
- wraps the outcome in a success or failure envelope.

Nothing raises past `dispatch_tool_call`; the host only ever sees an
envelope.
"""

from __future__ import annotations

import logging
from typing import Any, Awaitable, Callable, Dict, Mapping, NamedTuple, Optional, Type

from pydantic import BaseModel, ValidationError

from ..config import CHARACTER_LIMIT
from ..core.errors import WikiJsError
from ..wiki.api_client import WikiJsClient
from . import page_tools
from .definitions import (
    TOOL_CREATE_PAGE,
    TOOL_DELETE_PAGE,
    TOOL_GET_PAGE,
    TOOL_LIST_PAGES,
    TOOL_MOVE_PAGE,
    TOOL_SEARCH_PAGES,
    TOOL_UPDATE_PAGE,
)
from .envelope import error_response, success_response
from .schemas import (
    CreatePageInput,
    DeletePageInput,
    GetPageInput,
    ListPagesInput,
    MovePageInput,
    SearchPagesInput,
    UpdatePageInput,
)

logger = logging.getLogger("wikijs.tools")


# ---------------------------------------------------------------------
# Tool Type Definitions
# ---------------------------------------------------------------------

ToolHandler = Callable[[WikiJsClient, Any, int], Awaitable[Dict[str, Any]]]


class ToolSpec(NamedTuple):
    input_model: Type[BaseModel]
    handler: ToolHandler


# ---------------------------------------------------------------------
# Tool Registry (AUTHORITATIVE)
# ---------------------------------------------------------------------

async def _handle_create_page(client, params, character_limit):
    return await page_tools.tool_create_page(client, params)


async def _handle_get_page(client, params, character_limit):
    return await page_tools.tool_get_page(client, params, character_limit=character_limit)


async def _handle_update_page(client, params, character_limit):
    return await page_tools.tool_update_page(client, params)


async def _handle_delete_page(client, params, character_limit):
    return await page_tools.tool_delete_page(client, params)


async def _handle_list_pages(client, params, character_limit):
    return await page_tools.tool_list_pages(client, params)


async def _handle_search_pages(client, params, character_limit):
    return await page_tools.tool_search_pages(client, params)


async def _handle_move_page(client, params, character_limit):
    return await page_tools.tool_move_page(client, params)


TOOL_REGISTRY: Dict[str, ToolSpec] = {
    TOOL_CREATE_PAGE: ToolSpec(CreatePageInput, _handle_create_page),
    TOOL_GET_PAGE: ToolSpec(GetPageInput, _handle_get_page),
    TOOL_UPDATE_PAGE: ToolSpec(UpdatePageInput, _handle_update_page),
    TOOL_DELETE_PAGE: ToolSpec(DeletePageInput, _handle_delete_page),
    TOOL_LIST_PAGES: ToolSpec(ListPagesInput, _handle_list_pages),
    TOOL_SEARCH_PAGES: ToolSpec(SearchPagesInput, _handle_search_pages),
    TOOL_MOVE_PAGE: ToolSpec(MovePageInput, _handle_move_page),
}


def _unexpected_failure(exc: Exception) -> WikiJsError:
    """
    Describe a failure raised after the arguments were accepted.

    A `ValidationError` here comes from parsing the Wiki.js response, not
    from the caller, so it is not rendered as an input validation error.
    """
    if isinstance(exc, ValidationError):
        detail = "; ".join(
            f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}"
            for err in exc.errors()
        )
    else:
        detail = str(exc) or type(exc).__name__
    return WikiJsError(f"Unexpected response from Wiki.js: {detail}")


# ---------------------------------------------------------------------
# Public Dispatch API
# ---------------------------------------------------------------------

async def dispatch_tool_call(
    tool_name: str,
    args: Optional[Mapping[str, Any]],
    client: WikiJsClient,
    character_limit: int = CHARACTER_LIMIT,
) -> Dict[str, Any]:
    """
    Run a tool call requested by the host.

    Parameters
    ----------
    tool_name : str
        Tool name as advertised in TOOL_DEFINITIONS.

    args : Optional[Mapping[str, Any]]
        Raw JSON arguments. Keys the caller did not send must be absent;
        absence is meaningful for updates.

    client : WikiJsClient
        Injected Wiki.js client.

    character_limit : int
        Content truncation threshold for page reads.

    Returns
    -------
    Dict[str, Any]
        Success or failure envelope.
    """
    spec = TOOL_REGISTRY.get(tool_name)
    if spec is None:
        return error_response(
            WikiJsError(f"Unknown tool requested: {tool_name}"),
            tool_name,
        )

    try:
        params = spec.input_model.model_validate(dict(args or {}))
    except ValidationError as exc:
        return error_response(exc, tool_name)

    try:
        payload = await spec.handler(client, params, character_limit)
    except WikiJsError as exc:
        return error_response(exc, tool_name)
    except Exception as exc:  # noqa: BLE001
        # e.g. a remote payload that does not match the expected shape
        logger.exception("[%s] Unexpected failure", tool_name)
        return error_response(_unexpected_failure(exc), tool_name)

    return success_response(payload)
