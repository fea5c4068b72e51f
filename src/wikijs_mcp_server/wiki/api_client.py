"""
Wiki.js GraphQL API Client

Thin, stateless gateway to the Wiki.js GraphQL endpoint.

Every call opens its own HTTP client, attaches the static bearer token,
is bounded by the configured timeout, and normalizes all failures into a
single `RemoteError`. Typed page operations are built on `execute`.
"""

from __future__ import annotations

import asyncio
import json
import logging
from typing import Any, Dict, List, Optional

import httpx

from ..config import DEFAULT_LOCALE, DEFAULT_REQUEST_TIMEOUT, Settings
from ..core.errors import RemoteError, RemoteErrorKind
from . import queries
from .models import (
    ApiResponseResult,
    CreatePageParams,
    PageListItem,
    SearchResponse,
    UpdatePageParams,
    WikiPage,
)

logger = logging.getLogger("wikijs.client")


class WikiJsClient:
    """
    Wiki.js GraphQL API client.

    Parameters
    ----------
    api_url : str
        GraphQL endpoint, e.g. ``https://wiki.example.com/graphql``.
    api_token : str
        Static API key, sent as a bearer token.
    timeout : float
        Per-request bound in seconds.
    transport : Optional[httpx.AsyncBaseTransport]
        Testing override for the HTTP transport.
    """

    def __init__(
        self,
        api_url: str,
        api_token: str,
        timeout: float = DEFAULT_REQUEST_TIMEOUT,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.api_url = api_url
        self._api_token = api_token
        self.timeout = timeout
        self._transport = transport

    @classmethod
    def from_settings(cls, settings: Settings) -> "WikiJsClient":
        return cls(
            api_url=str(settings.wikijs_api_url),
            api_token=settings.wikijs_api_token.get_secret_value(),
            timeout=settings.request_timeout,
        )

    # ------------------------------------------------------------------
    # Core request primitive
    # ------------------------------------------------------------------

    async def execute(
        self,
        query: str,
        variables: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        """
        Execute a GraphQL query or mutation and return its `data` block.

        Raises
        ------
        RemoteError
            TIMEOUT when the request exceeds the timeout, TRANSPORT for
            connection failures and non-2xx statuses, REMOTE_REJECTED when
            the response carries `errors`, EMPTY_RESPONSE when it carries
            neither `data` nor `errors`.
        """
        headers = {
            "Authorization": f"Bearer {self._api_token}",
            "Content-Type": "application/json",
        }
        payload = {"query": query, "variables": variables or {}}

        try:
            # httpx bounds each phase; the whole call gets one deadline.
            resp = await asyncio.wait_for(self._post(payload, headers), self.timeout)
            body = resp.json()
        except (httpx.TimeoutException, asyncio.TimeoutError) as exc:
            logger.warning("Wiki.js request timed out after %ss", self.timeout)
            raise RemoteError(
                RemoteErrorKind.TIMEOUT,
                "Request timed out. Please try again.",
            ) from exc
        except httpx.HTTPStatusError as exc:
            status = exc.response.status_code
            logger.warning("Wiki.js request failed with HTTP %s", status)
            raise RemoteError(
                RemoteErrorKind.TRANSPORT,
                f"Wiki.js API request failed: HTTP error! status: {status}",
                status=status,
            ) from exc
        except httpx.HTTPError as exc:
            logger.warning("Wiki.js request failed: %s", type(exc).__name__)
            raise RemoteError(
                RemoteErrorKind.TRANSPORT,
                f"Wiki.js API request failed: {exc}",
            ) from exc
        except ValueError as exc:
            # Body was not JSON.
            raise RemoteError(
                RemoteErrorKind.TRANSPORT,
                f"Wiki.js API request failed: invalid JSON response ({exc})",
                status=resp.status_code,
            ) from exc

        errors = body.get("errors") if isinstance(body, dict) else None
        if errors:
            logger.warning("Wiki.js returned %d GraphQL error(s)", len(errors))
            raise RemoteError(
                RemoteErrorKind.REMOTE_REJECTED,
                f"Wiki.js API request failed: GraphQL Error: {json.dumps(errors)}",
                details=errors,
            )

        data = body.get("data") if isinstance(body, dict) else None
        if not data:
            raise RemoteError(
                RemoteErrorKind.EMPTY_RESPONSE,
                "Wiki.js API request failed: No data returned from GraphQL API",
            )

        return data

    async def _post(
        self,
        payload: Dict[str, Any],
        headers: Dict[str, str],
    ) -> httpx.Response:
        async with httpx.AsyncClient(
            timeout=self.timeout,
            transport=self._transport,
        ) as client:
            resp = await client.post(self.api_url, json=payload, headers=headers)
        resp.raise_for_status()
        return resp

    async def _mutate(
        self,
        operation: str,
        query: str,
        variables: Dict[str, Any],
    ) -> Dict[str, Any]:
        """
        Run a page mutation and unwrap `pages.<operation>`.

        Raises RemoteError(OPERATION_REJECTED) when `responseResult.succeeded`
        is false.
        """
        data = await self.execute(query, variables)
        block = data["pages"][operation]
        result = ApiResponseResult.model_validate(block["responseResult"])

        if not result.succeeded:
            logger.info("Wiki.js rejected %s: %s", operation, result.message)
            raise RemoteError(
                RemoteErrorKind.OPERATION_REJECTED,
                f"Failed to {operation} page: {result.message}",
                details=result.message,
            )

        return block

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    async def get_page_by_id(self, page_id: int) -> Optional[WikiPage]:
        data = await self.execute(queries.GET_PAGE_BY_ID, {"id": page_id})
        page = data["pages"]["single"]
        return WikiPage.model_validate(page) if page else None

    async def get_page_by_path(
        self,
        path: str,
        locale: str = DEFAULT_LOCALE,
    ) -> Optional[WikiPage]:
        data = await self.execute(
            queries.GET_PAGE_BY_PATH,
            {"path": path, "locale": locale},
        )
        page = data["pages"]["singleByPath"]
        return WikiPage.model_validate(page) if page else None

    async def list_pages(self) -> List[PageListItem]:
        """
        Return every page in the wiki.

        Wiki.js offers no server-side pagination for `pages.list`; callers
        filter and slice the full list themselves.
        """
        data = await self.execute(queries.LIST_PAGES)
        return [PageListItem.model_validate(p) for p in data["pages"]["list"] or []]

    async def search_pages(self, query: str) -> SearchResponse:
        data = await self.execute(queries.SEARCH_PAGES, {"query": query})
        return SearchResponse.model_validate(data["pages"]["search"] or {})

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    async def create_page(self, params: CreatePageParams) -> PageListItem:
        block = await self._mutate(
            "create",
            queries.CREATE_PAGE,
            params.model_dump(by_alias=True),
        )
        page = block.get("page") or {}
        # The create mutation only echoes id/path/title.
        return PageListItem.model_validate({"locale": params.locale, **page})

    async def update_page(self, params: UpdatePageParams) -> ApiResponseResult:
        """
        Update a page, sending only the fields set on `params`.

        Wiki.js treats an omitted `content` or `tags` as a request to clear
        them; callers wanting to keep those values must supply them.
        """
        fields = [f for f in queries.UPDATE_FIELDS if f.attr in params.model_fields_set]
        variables: Dict[str, Any] = {"id": params.id}
        for field in fields:
            variables[field.wire_name] = getattr(params, field.attr)

        block = await self._mutate(
            "update",
            queries.build_update_mutation(fields),
            variables,
        )
        return ApiResponseResult.model_validate(block["responseResult"])

    async def delete_page(self, page_id: int) -> ApiResponseResult:
        block = await self._mutate(
            "delete",
            queries.DELETE_PAGE,
            {"id": page_id},
        )
        return ApiResponseResult.model_validate(block["responseResult"])

    async def move_page(
        self,
        page_id: int,
        destination_path: str,
        destination_locale: str = DEFAULT_LOCALE,
    ) -> ApiResponseResult:
        block = await self._mutate(
            "move",
            queries.MOVE_PAGE,
            {
                "id": page_id,
                "destinationPath": destination_path,
                "destinationLocale": destination_locale,
            },
        )
        return ApiResponseResult.model_validate(block["responseResult"])
