"""
Tool Definitions

The authoritative list of tools advertised to the host. Input schemas are
generated from the pydantic models in `tools/schemas.py`; names must match
`TOOL_REGISTRY` in `tools/base.py`.
"""

from __future__ import annotations

from typing import Any, Dict, Final, List, Type

from pydantic import BaseModel

from .schemas import (
    CreatePageInput,
    DeletePageInput,
    GetPageInput,
    ListPagesInput,
    MovePageInput,
    SearchPagesInput,
    UpdatePageInput,
)


# ---------------------------------------------------------------------
# Tool Name Constants (Single Source of Truth)
# ---------------------------------------------------------------------

TOOL_CREATE_PAGE: Final[str] = "wikijs_create_page"
TOOL_GET_PAGE: Final[str] = "wikijs_get_page"
TOOL_UPDATE_PAGE: Final[str] = "wikijs_update_page"
TOOL_DELETE_PAGE: Final[str] = "wikijs_delete_page"
TOOL_LIST_PAGES: Final[str] = "wikijs_list_pages"
TOOL_SEARCH_PAGES: Final[str] = "wikijs_search_pages"
TOOL_MOVE_PAGE: Final[str] = "wikijs_move_page"


def _annotations(
    read_only: bool,
    destructive: bool,
    idempotent: bool,
) -> Dict[str, bool]:
    return {
        "readOnlyHint": read_only,
        "destructiveHint": destructive,
        "idempotentHint": idempotent,
        "openWorldHint": True,
    }


def _definition(
    name: str,
    description: str,
    input_model: Type[BaseModel],
    annotations: Dict[str, bool],
) -> Dict[str, Any]:
    return {
        "name": name,
        "description": description,
        "inputSchema": input_model.model_json_schema(by_alias=True),
        "annotations": annotations,
    }


# ---------------------------------------------------------------------
# Tool Definitions
# ---------------------------------------------------------------------

TOOL_DEFINITIONS: List[Dict[str, Any]] = [
    _definition(
        TOOL_CREATE_PAGE,
        """Create a new page in Wiki.js with markdown or HTML content.

This tool creates a new page at the specified path. If a page already exists at that path, the operation will fail.

Args:
  - path (string, required): Page path without leading slash (e.g., "osticket/plugin-name")
  - title (string, required): Page title (max 200 chars)
  - content (string, required): Page content in markdown or HTML
  - description (string, required): Meta description (max 500 chars)
  - locale (string): Page locale, default "en"
  - editor (enum): "markdown" (default), "code", or "ckeditor"
  - isPublished (boolean): Publish immediately, default true
  - isPrivate (boolean): Private page, default false
  - tags (array): Tags for categorization

Returns:
  Created page info with ID, path and title

Examples:
  - Create docs page: path="docs/api", title="API Reference", content="# API..."
  - Create private draft: path="drafts/idea", isPublished=false, isPrivate=true""",
        CreatePageInput,
        _annotations(read_only=False, destructive=False, idempotent=False),
    ),
    _definition(
        TOOL_GET_PAGE,
        """Get a page from Wiki.js by ID or path. Returns full page content and metadata.

Identify the page either by its numeric ID or by its path + locale combination.

Args:
  - id (number, optional): Page ID (use this OR path)
  - path (string, optional): Page path (use this OR id)
  - locale (string): Page locale, default "en" (used with path)

Returns:
  id, path, title, description, content, contentType, editor, isPublished,
  isPrivate, locale, tags, createdAt, updatedAt

Note: Content over 100,000 characters will be truncated with a notice.

Examples:
  - Get by ID: id=42
  - Get by path: path="osticket/api-endpoints", locale="en\"""",
        GetPageInput,
        _annotations(read_only=True, destructive=False, idempotent=True),
    ),
    _definition(
        TOOL_UPDATE_PAGE,
        """Update an existing page in Wiki.js.

Modify content, title, description, tags, or publish status of an existing page. Identify the page by ID or path+locale.

Args:
  - id (number, optional): Page ID (use this OR path)
  - path (string, optional): Page path (use this OR id)
  - locale (string): Page locale, default "en" (used with path)
  - content (string, optional): New page content
  - title (string, optional): New title (max 200 chars)
  - description (string, optional): New description (max 500 chars)
  - isPublished (boolean, optional): Publish/unpublish
  - tags (array, optional): Replace tags; an empty array removes all tags

Returns:
  Success confirmation with update result

Note: If you don't provide content or tags, existing values are automatically preserved.
This allows metadata-only updates (e.g., changing isPublished) without having to provide the full page content.

Examples:
  - Update content: id=42, content="# New Content..."
  - Unpublish: path="drafts/old-post", isPublished=false
  - Update tags: id=42, tags=["updated", "v2"]
  - Publish only: id=42, isPublished=true (content auto-preserved)""",
        UpdatePageInput,
        _annotations(read_only=False, destructive=False, idempotent=True),
    ),
    _definition(
        TOOL_DELETE_PAGE,
        """Delete a page from Wiki.js. WARNING: This action is IRREVERSIBLE!

Permanently removes a page and all its history. Identify the page by ID or path+locale.

Args:
  - id (number, optional): Page ID (use this OR path)
  - path (string, optional): Page path (use this OR id)
  - locale (string): Page locale, default "en" (used with path)

Returns:
  Confirmation of deletion

CAUTION: This operation cannot be undone. All page history will be lost.

Examples:
  - Delete by ID: id=42
  - Delete by path: path="old/deprecated-page", locale="en\"""",
        DeletePageInput,
        _annotations(read_only=False, destructive=True, idempotent=False),
    ),
    _definition(
        TOOL_LIST_PAGES,
        """List all pages in Wiki.js with optional filtering and pagination.

Returns a paginated list of pages. Use the offset parameter to navigate through large result sets.

Args:
  - locale (string, optional): Filter by locale (e.g., "en", "de")
  - limit (number): Max pages to return, default 50, max 200
  - offset (number): Skip N pages for pagination, default 0

Returns:
  - pages: Array of page summaries (id, path, title, description, locale, isPublished, tags, updatedAt)
  - pagination: { limit, offset, total_count, has_more, next_offset }

Use pagination.has_more and pagination.next_offset to fetch more results.

Examples:
  - List all: (no params, returns first 50)
  - Filter by locale: locale="de"
  - Paginate: offset=50, limit=50 (get pages 51-100)""",
        ListPagesInput,
        _annotations(read_only=True, destructive=False, idempotent=True),
    ),
    _definition(
        TOOL_SEARCH_PAGES,
        """Search for pages in Wiki.js by query string.

Performs a full-text search across all page content and metadata. Results are ranked by relevance.

Args:
  - query (string, required): Search query (min 2 chars, max 200 chars)
  - locale (string, optional): Filter results by locale

Returns:
  - totalHits: Number of matching pages (after locale filtering, if any)
  - suggestions: Search suggestions for refinement
  - results: Array of matching pages (id, title, path, description, locale)

Examples:
  - Search for topic: query="osTicket API"
  - Search in German pages: query="Plugin", locale="de\"""",
        SearchPagesInput,
        _annotations(read_only=True, destructive=False, idempotent=True),
    ),
    _definition(
        TOOL_MOVE_PAGE,
        """Move a page to a new path in Wiki.js.

Reorganize the wiki by moving pages to different paths or locales. Identify the source page by ID or path+locale.

Args:
  - id (number, optional): Page ID to move (use this OR path)
  - path (string, optional): Current page path (use this OR id)
  - locale (string): Current page locale, default "en"
  - destinationPath (string, required): New path for the page
  - destinationLocale (string): Target locale, default "en"

Returns:
  Confirmation of move with old and new paths

Note: This changes the page URL. Update any links pointing to the old path.

Examples:
  - Move to new category: id=42, destinationPath="new-category/page-name"
  - Reorganize: path="old/path", destinationPath="new/path"
  - Change locale: id=42, destinationPath="page-name", destinationLocale="de\"""",
        MovePageInput,
        _annotations(read_only=False, destructive=False, idempotent=False),
    ),
]
