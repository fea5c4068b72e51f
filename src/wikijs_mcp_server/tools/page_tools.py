"""
Page Tool Handlers

One coroutine per page tool. Each takes the injected `WikiJsClient` and an
already validated input model, and returns the operation-specific success
payload. Errors propagate as exceptions; `tools/base.py` turns them into
failure envelopes.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from ..config import CHARACTER_LIMIT
from ..core.errors import PageNotFoundError
from ..wiki.api_client import WikiJsClient
from ..wiki.models import CreatePageParams, WikiPage
from .reconciler import reconcile_update
from .resolver import require_identity, resolve_page
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


def truncate_content(content: Optional[str], limit: int = CHARACTER_LIMIT) -> Optional[str]:
    """
    Cut `content` to `limit` characters and append a notice with the
    original length. Content within the limit is returned unchanged.
    """
    if not content or len(content) <= limit:
        return content
    return (
        content[:limit]
        + f"\n\n[Content truncated. Original length: {len(content)} chars]"
    )


def _page_payload(page: WikiPage, character_limit: int) -> Dict[str, Any]:
    return {
        "id": page.id,
        "path": page.path,
        "title": page.title,
        "description": page.description,
        "content": truncate_content(page.content, character_limit),
        "contentType": page.content_type,
        "editor": page.editor,
        "isPublished": page.is_published,
        "isPrivate": page.is_private,
        "locale": page.locale,
        "tags": page.tags,
        "createdAt": page.created_at,
        "updatedAt": page.updated_at,
    }


# ---------------------------------------------------------------------
# Tools
# ---------------------------------------------------------------------

async def tool_create_page(
    client: WikiJsClient,
    params: CreatePageInput,
) -> Dict[str, Any]:
    """
    Create a page. Wiki.js rejects the call if (path, locale) is taken.
    """
    page = await client.create_page(
        CreatePageParams(**params.model_dump())
    )
    logger.info("Created page %s at /%s", page.id, page.path)

    return {
        "message": f"Page created successfully at /{params.path}",
        "page": {
            "id": page.id,
            "path": page.path,
            "title": page.title,
        },
    }


async def tool_get_page(
    client: WikiJsClient,
    params: GetPageInput,
    character_limit: int = CHARACTER_LIMIT,
) -> Dict[str, Any]:
    """
    Fetch a page by id or by (path, locale).

    Content longer than `character_limit` is truncated in the returned
    payload only.
    """
    require_identity(params.id, params.path)

    if params.id is not None:
        page = await client.get_page_by_id(params.id)
        if page is None:
            raise PageNotFoundError(page_id=params.id)
    else:
        page = await client.get_page_by_path(params.path, params.locale)
        if page is None:
            raise PageNotFoundError(path=params.path)

    return {"page": _page_payload(page, character_limit)}


async def tool_update_page(
    client: WikiJsClient,
    params: UpdatePageInput,
) -> Dict[str, Any]:
    """
    Apply a partial update; see `reconciler.reconcile_update` for how
    omitted content and tags are preserved.
    """
    update = await reconcile_update(client, params)
    result = await client.update_page(update)
    logger.info(
        "Updated page %s (fields: %s)",
        update.id,
        ", ".join(sorted(update.model_fields_set - {"id"})),
    )

    return {
        "message": f"Page {update.id} updated successfully",
        "result": result.model_dump(by_alias=True),
    }


async def tool_delete_page(
    client: WikiJsClient,
    params: DeletePageInput,
) -> Dict[str, Any]:
    """Permanently delete a page. There is no undo."""
    resolved = await resolve_page(client, params.id, params.path, params.locale)
    result = await client.delete_page(resolved.page_id)
    logger.info("Deleted page %s", resolved.page_id)

    return {
        "message": f"Page {resolved.page_id} deleted permanently",
        "result": result.model_dump(by_alias=True),
    }


async def tool_list_pages(
    client: WikiJsClient,
    params: ListPagesInput,
) -> Dict[str, Any]:
    """
    List pages with optional locale filter and offset pagination.

    The full listing is fetched on every call; filtering and slicing happen
    here. `total_count` is the count after locale filtering.
    """
    pages = await client.list_pages()
    if params.locale:
        pages = [p for p in pages if p.locale == params.locale]

    total = len(pages)
    window = pages[params.offset:params.offset + params.limit]
    has_more = params.offset + len(window) < total

    pagination: Dict[str, Any] = {
        "limit": params.limit,
        "offset": params.offset,
        "total_count": total,
        "has_more": has_more,
    }
    if has_more:
        pagination["next_offset"] = params.offset + len(window)

    return {
        "pages": [
            {
                "id": p.id,
                "path": p.path,
                "title": p.title,
                "description": p.description,
                "locale": p.locale,
                "isPublished": p.is_published,
                "tags": p.tags,
                "updatedAt": p.updated_at,
            }
            for p in window
        ],
        "pagination": pagination,
    }


async def tool_search_pages(
    client: WikiJsClient,
    params: SearchPagesInput,
) -> Dict[str, Any]:
    """
    Full-text search. With a locale, results are filtered here and
    `totalHits` reports the filtered count, not the engine's.
    """
    response = await client.search_pages(params.query)
    results = response.results
    total_hits = response.total_hits

    if params.locale:
        results = [r for r in results if r.locale == params.locale]
        total_hits = len(results)

    return {
        "totalHits": total_hits,
        "suggestions": response.suggestions,
        "results": [
            {
                "id": r.id,
                "title": r.title,
                "path": r.path,
                "description": r.description,
                "locale": r.locale,
            }
            for r in results
        ],
    }


async def tool_move_page(
    client: WikiJsClient,
    params: MovePageInput,
) -> Dict[str, Any]:
    resolved = await resolve_page(client, params.id, params.path, params.locale)
    result = await client.move_page(
        resolved.page_id,
        params.destination_path,
        params.destination_locale,
    )
    logger.info(
        "Moved page %s to %s/%s",
        resolved.page_id,
        params.destination_locale,
        params.destination_path,
    )

    return {
        "message": "Page moved successfully",
        "from": params.path or f"ID: {resolved.page_id}",
        "to": params.destination_path,
        "destinationLocale": params.destination_locale,
        "result": result.model_dump(by_alias=True),
    }
