"""
Page Tool Dispatch Tests

Exercises every tool through `dispatch_tool_call` against a mocked client.
"""

import pytest

from conftest import make_list_items, make_page
from wikijs_mcp_server.core.errors import RemoteError, RemoteErrorKind
from wikijs_mcp_server.tools.base import dispatch_tool_call
from wikijs_mcp_server.tools.page_tools import truncate_content
from wikijs_mcp_server.wiki.models import PageListItem, SearchResponse


# ---------------------------------------------------------------------
# create
# ---------------------------------------------------------------------

@pytest.mark.asyncio
async def test_create_page_applies_defaults(mock_client):
    mock_client.create_page.return_value = PageListItem(
        id=101, path="docs/api", title="API Reference", locale="en"
    )

    result = await dispatch_tool_call(
        "wikijs_create_page",
        {
            "path": "docs/api",
            "title": "API Reference",
            "content": "# API",
            "description": "API docs",
        },
        mock_client,
    )

    assert result == {
        "success": True,
        "message": "Page created successfully at /docs/api",
        "page": {"id": 101, "path": "docs/api", "title": "API Reference"},
    }
    params = mock_client.create_page.await_args.args[0]
    assert params.locale == "en"
    assert params.editor == "markdown"
    assert params.is_published is True
    assert params.is_private is False
    assert params.tags == []


@pytest.mark.asyncio
async def test_create_page_existing_path_is_rejected(mock_client):
    mock_client.create_page.side_effect = RemoteError(
        RemoteErrorKind.OPERATION_REJECTED,
        "Failed to create page: Cannot create this page because an entry already exists at the same path.",
    )

    result = await dispatch_tool_call(
        "wikijs_create_page",
        {"path": "home", "title": "Home", "content": "x", "description": "d"},
        mock_client,
    )

    assert result["success"] is False
    assert "already exists" in result["error"]
    assert result["tool"] == "wikijs_create_page"


@pytest.mark.asyncio
async def test_create_page_missing_fields_lists_each_field(mock_client):
    result = await dispatch_tool_call("wikijs_create_page", {"path": "x"}, mock_client)

    assert result["success"] is False
    for field in ("title", "content", "description"):
        assert f"  - {field}: Field required" in result["error"]
    mock_client.create_page.assert_not_awaited()


# ---------------------------------------------------------------------
# read
# ---------------------------------------------------------------------

@pytest.mark.asyncio
async def test_get_page_by_id(mock_client):
    result = await dispatch_tool_call("wikijs_get_page", {"id": 42}, mock_client)

    assert result["success"] is True
    page = result["page"]
    assert page["id"] == 42
    assert page["tags"] == ["existing-tag"]
    assert page["isPublished"] is False
    mock_client.get_page_by_id.assert_awaited_once_with(42)
    mock_client.get_page_by_path.assert_not_awaited()


@pytest.mark.asyncio
async def test_get_page_by_path_uses_locale(mock_client):
    await dispatch_tool_call("wikijs_get_page", {"path": "docs/a", "locale": "de"}, mock_client)

    mock_client.get_page_by_path.assert_awaited_once_with("docs/a", "de")


@pytest.mark.asyncio
async def test_get_page_not_found(mock_client):
    mock_client.get_page_by_id.return_value = None

    result = await dispatch_tool_call("wikijs_get_page", {"id": 5}, mock_client)

    assert result["error"] == "Page not found with ID: 5"


@pytest.mark.asyncio
async def test_get_page_truncates_long_content(mock_client):
    long_content = "x" * 1500
    stored = make_page(content=long_content)
    mock_client.get_page_by_id.return_value = stored

    result = await dispatch_tool_call(
        "wikijs_get_page", {"id": 42}, mock_client, character_limit=1000
    )

    content = result["page"]["content"]
    assert content.startswith("x" * 1000)
    assert content[1000:] == "\n\n[Content truncated. Original length: 1500 chars]"
    assert stored.content == long_content


def test_truncate_content_leaves_short_content_alone():
    assert truncate_content("short", limit=10) == "short"
    assert truncate_content(None, limit=10) is None


@pytest.mark.asyncio
async def test_get_page_requires_identity(mock_client):
    result = await dispatch_tool_call("wikijs_get_page", {}, mock_client)

    assert result["error"] == 'Either "id" or "path" must be provided'
    mock_client.get_page_by_id.assert_not_awaited()
    mock_client.get_page_by_path.assert_not_awaited()


# ---------------------------------------------------------------------
# delete
# ---------------------------------------------------------------------

@pytest.mark.asyncio
async def test_delete_page_by_path(mock_client):
    result = await dispatch_tool_call(
        "wikijs_delete_page", {"path": "old/page", "locale": "en"}, mock_client
    )

    assert result["success"] is True
    assert result["message"] == "Page 42 deleted permanently"
    assert result["result"]["succeeded"] is True
    mock_client.delete_page.assert_awaited_once_with(42)


@pytest.mark.asyncio
async def test_delete_missing_page_surfaces_remote_message(mock_client):
    mock_client.delete_page.side_effect = RemoteError(
        RemoteErrorKind.OPERATION_REJECTED,
        "Failed to delete page: This page does not exist.",
        details="This page does not exist.",
    )

    result = await dispatch_tool_call("wikijs_delete_page", {"id": 999}, mock_client)

    assert result == {
        "success": False,
        "error": "Failed to delete page: This page does not exist.",
        "tool": "wikijs_delete_page",
    }


# ---------------------------------------------------------------------
# list
# ---------------------------------------------------------------------

@pytest.mark.asyncio
async def test_list_pages_middle_window(mock_client):
    mock_client.list_pages.return_value = make_list_items(120)

    result = await dispatch_tool_call(
        "wikijs_list_pages", {"limit": 50, "offset": 50}, mock_client
    )

    assert len(result["pages"]) == 50
    assert result["pages"][0]["id"] == 51
    assert result["pagination"] == {
        "limit": 50,
        "offset": 50,
        "total_count": 120,
        "has_more": True,
        "next_offset": 100,
    }


@pytest.mark.asyncio
async def test_list_pages_last_window(mock_client):
    mock_client.list_pages.return_value = make_list_items(120)

    result = await dispatch_tool_call(
        "wikijs_list_pages", {"limit": 50, "offset": 100}, mock_client
    )

    assert len(result["pages"]) == 20
    assert result["pagination"]["has_more"] is False
    assert "next_offset" not in result["pagination"]


@pytest.mark.asyncio
async def test_list_pages_filters_by_locale(mock_client):
    mock_client.list_pages.return_value = (
        make_list_items(3, locale="en") + make_list_items(2, locale="de", start=10)
    )

    result = await dispatch_tool_call("wikijs_list_pages", {"locale": "de"}, mock_client)

    assert [p["id"] for p in result["pages"]] == [10, 11]
    assert result["pagination"]["total_count"] == 2
    assert result["pagination"]["has_more"] is False


@pytest.mark.asyncio
async def test_list_pages_rejects_limit_above_max(mock_client):
    result = await dispatch_tool_call("wikijs_list_pages", {"limit": 201}, mock_client)

    assert result["success"] is False
    assert "  - limit:" in result["error"]
    mock_client.list_pages.assert_not_awaited()


# ---------------------------------------------------------------------
# search
# ---------------------------------------------------------------------

@pytest.mark.asyncio
async def test_search_filters_by_locale_and_recounts(mock_client):
    mock_client.search_pages.return_value = SearchResponse.model_validate({
        "results": [
            {"id": "1", "title": "A", "path": "a", "description": "", "locale": "en"},
            {"id": "2", "title": "B", "path": "b", "description": "", "locale": "de"},
            {"id": "3", "title": "C", "path": "c", "description": "", "locale": "en"},
            {"id": "4", "title": "D", "path": "d", "description": "", "locale": "de"},
            {"id": "5", "title": "E", "path": "e", "description": "", "locale": "fr"},
        ],
        "suggestions": ["osticket"],
        "totalHits": 5,
    })

    result = await dispatch_tool_call(
        "wikijs_search_pages", {"query": "osTicket", "locale": "de"}, mock_client
    )

    assert result["totalHits"] == 2
    assert [r["id"] for r in result["results"]] == [2, 4]
    assert result["suggestions"] == ["osticket"]
    mock_client.search_pages.assert_awaited_once_with("osTicket")


@pytest.mark.asyncio
async def test_search_without_locale_keeps_remote_total(mock_client):
    mock_client.search_pages.return_value = SearchResponse.model_validate(
        {"results": [], "suggestions": [], "totalHits": 17}
    )

    result = await dispatch_tool_call("wikijs_search_pages", {"query": "plugin"}, mock_client)

    assert result["totalHits"] == 17


@pytest.mark.asyncio
async def test_search_query_too_short(mock_client):
    result = await dispatch_tool_call("wikijs_search_pages", {"query": "a"}, mock_client)

    assert result["success"] is False
    assert "  - query:" in result["error"]


# ---------------------------------------------------------------------
# move
# ---------------------------------------------------------------------

@pytest.mark.asyncio
async def test_move_page_by_path(mock_client):
    result = await dispatch_tool_call(
        "wikijs_move_page",
        {"path": "old/path", "destinationPath": "new/path"},
        mock_client,
    )

    assert result["from"] == "old/path"
    assert result["to"] == "new/path"
    assert result["destinationLocale"] == "en"
    mock_client.move_page.assert_awaited_once_with(42, "new/path", "en")


@pytest.mark.asyncio
async def test_move_page_by_id(mock_client):
    result = await dispatch_tool_call(
        "wikijs_move_page",
        {"id": 42, "destinationPath": "page-name", "destinationLocale": "de"},
        mock_client,
    )

    assert result["from"] == "ID: 42"
    mock_client.get_page_by_path.assert_not_awaited()
    mock_client.move_page.assert_awaited_once_with(42, "page-name", "de")


# ---------------------------------------------------------------------
# dispatch
# ---------------------------------------------------------------------

@pytest.mark.asyncio
async def test_unknown_tool(mock_client):
    result = await dispatch_tool_call("wikijs_format_disk", {}, mock_client)

    assert result == {
        "success": False,
        "error": "Unknown tool requested: wikijs_format_disk",
        "tool": "wikijs_format_disk",
    }


@pytest.mark.asyncio
async def test_unexpected_argument_is_rejected(mock_client):
    result = await dispatch_tool_call("wikijs_get_page", {"id": 1, "foo": "bar"}, mock_client)

    assert result["success"] is False
    assert "  - foo: Extra inputs are not permitted" in result["error"]


@pytest.mark.asyncio
async def test_timeout_becomes_failure_envelope(mock_client):
    mock_client.get_page_by_id.side_effect = RemoteError(
        RemoteErrorKind.TIMEOUT, "Request timed out. Please try again."
    )

    result = await dispatch_tool_call("wikijs_get_page", {"id": 1}, mock_client)

    assert result["error"] == "Request timed out. Please try again."
