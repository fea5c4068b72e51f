"""
Update Reconciliation

Wiki.js `pages.update` clears `content` and `tags` when they are left out of
the mutation, while `title`, `description` and `isPublished` keep their stored
values. A caller who only wants to flip `isPublished` would otherwise wipe the
page body.

`reconcile_update` closes that gap: for an update intent it backfills
`content` and `tags` from the page's current state whenever the caller did
not send them, and passes the other three fields through only when sent.

"Not sent" is decided by pydantic's `model_fields_set`, so an empty string or
an empty tag list from the caller is used verbatim (tags=[] clears all tags).
A page whose stored content is null leaves `content` out of the mutation.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List

from ..core.errors import PageNotFoundError
from ..wiki.api_client import WikiJsClient
from ..wiki.models import UpdatePageParams
from .resolver import resolve_page
from .schemas import UpdatePageInput

logger = logging.getLogger("wikijs.tools")

# Sent only when the caller supplied them; Wiki.js preserves them otherwise.
PASSTHROUGH_FIELDS = ("title", "description", "is_published")


async def _current_tags(client: WikiJsClient, page_id: int) -> List[str]:
    # Tags come from the page listing, matched by id.
    for item in await client.list_pages():
        if item.id == page_id:
            return list(item.tags)
    return []


async def reconcile_update(
    client: WikiJsClient,
    intent: UpdatePageInput,
) -> UpdatePageParams:
    """
    Build the full `UpdatePageParams` for an update intent.

    Remote fetches happen sequentially and only when needed: at most one page
    fetch for content (skipped when path resolution already fetched it) and
    one list fetch for tags.

    Raises
    ------
    InvalidArgumentError
        If the intent carries neither id nor path.
    PageNotFoundError
        If the page cannot be resolved or fetched.
    """
    resolved = await resolve_page(client, intent.id, intent.path, intent.locale)
    page_id = resolved.page_id
    current_page = resolved.page
    sent = intent.model_fields_set

    values: Dict[str, Any] = {"id": page_id}

    if "content" in sent:
        values["content"] = intent.content
    else:
        if current_page is None:
            current_page = await client.get_page_by_id(page_id)
            if current_page is None:
                raise PageNotFoundError(page_id=page_id)
        if current_page.content is not None:
            logger.debug("Preserving current content of page %s", page_id)
            values["content"] = current_page.content

    if "tags" in sent:
        values["tags"] = list(intent.tags)
    else:
        logger.debug("Preserving current tags of page %s", page_id)
        values["tags"] = await _current_tags(client, page_id)

    for name in PASSTHROUGH_FIELDS:
        if name in sent:
            values[name] = getattr(intent, name)

    return UpdatePageParams(**values)
