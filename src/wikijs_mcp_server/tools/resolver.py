"""
Page Identity Resolution

Turns a caller-supplied identity (numeric id, or path + locale) into a
canonical page id.
"""

from __future__ import annotations

from typing import NamedTuple, Optional

from ..config import DEFAULT_LOCALE
from ..core.errors import InvalidArgumentError, PageNotFoundError
from ..wiki.api_client import WikiJsClient
from ..wiki.models import WikiPage


class ResolvedPage(NamedTuple):
    page_id: int
    # Set only when resolution had to fetch the page (path lookup).
    page: Optional[WikiPage]


def require_identity(page_id: Optional[int], path: Optional[str]) -> None:
    """Raise InvalidArgumentError unless an id or a path was supplied."""
    if page_id is None and not path:
        raise InvalidArgumentError('Either "id" or "path" must be provided')


async def resolve_page(
    client: WikiJsClient,
    page_id: Optional[int],
    path: Optional[str],
    locale: str = DEFAULT_LOCALE,
) -> ResolvedPage:
    """
    Resolve a page identity.

    An explicit id wins and is returned without any remote call. Otherwise
    the page is fetched by (path, locale) and handed back alongside its id so
    callers can reuse it.

    Raises
    ------
    InvalidArgumentError
        If neither id nor path is given.
    PageNotFoundError
        If no page exists at (path, locale).
    """
    require_identity(page_id, path)

    if page_id is not None:
        return ResolvedPage(page_id, None)

    page = await client.get_page_by_path(path, locale)
    if page is None:
        raise PageNotFoundError(path=path)

    return ResolvedPage(page.id, page)
