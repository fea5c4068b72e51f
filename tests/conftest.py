from typing import Any, Dict, List
from unittest.mock import AsyncMock

import pytest

from wikijs_mcp_server.config import Settings
from wikijs_mcp_server.wiki.api_client import WikiJsClient
from wikijs_mcp_server.wiki.models import (
    ApiResponseResult,
    PageListItem,
    SearchResponse,
    WikiPage,
)

EXISTING_CONTENT = "# Existing Content\n\nThis is the existing content."


def make_page(**overrides: Any) -> WikiPage:
    data: Dict[str, Any] = {
        "id": 42,
        "path": "test/page",
        "title": "Test Page",
        "description": "A test page",
        "content": EXISTING_CONTENT,
        "contentType": "markdown",
        "editor": "markdown",
        "isPublished": False,
        "isPrivate": False,
        "locale": "en",
        "createdAt": "2024-01-01T00:00:00Z",
        "updatedAt": "2024-01-02T00:00:00Z",
        "tags": [{"tag": "existing-tag"}],
    }
    data.update(overrides)
    return WikiPage.model_validate(data)


def make_list_items(count: int, locale: str = "en", start: int = 1) -> List[PageListItem]:
    return [
        PageListItem.model_validate({
            "id": i,
            "path": f"pages/{i}",
            "title": f"Page {i}",
            "description": "",
            "isPublished": True,
            "locale": locale,
            "tags": ["bulk"],
        })
        for i in range(start, start + count)
    ]


@pytest.fixture
def settings() -> Settings:
    return Settings(
        wikijs_api_url="https://wiki.example.com/graphql",
        wikijs_api_token="test-token",
        _env_file=None,
    )


@pytest.fixture
def mock_client() -> AsyncMock:
    client = AsyncMock(spec=WikiJsClient)
    client.get_page_by_id.return_value = make_page()
    client.get_page_by_path.return_value = make_page()
    client.list_pages.return_value = [
        PageListItem.model_validate({
            "id": 42,
            "path": "test/page",
            "title": "Test Page",
            "locale": "en",
            "tags": ["existing-tag"],
        })
    ]
    client.update_page.return_value = ApiResponseResult(
        succeeded=True, errorCode=0, message="Page updated successfully"
    )
    client.delete_page.return_value = ApiResponseResult(
        succeeded=True, errorCode=0, message="Page deleted successfully"
    )
    client.move_page.return_value = ApiResponseResult(
        succeeded=True, errorCode=0, message="Page moved successfully"
    )
    client.search_pages.return_value = SearchResponse()
    return client
