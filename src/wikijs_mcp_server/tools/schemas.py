"""
Tool Input Schemas

Pydantic models validating the arguments of every page tool. They are the
structural gate in front of the tool handlers: types, lengths, ranges and
defaults are enforced here, and the JSON schemas advertised to the host are
generated from these models.

Rules that span several fields (e.g. "id or path required") are not
expressed here; the handlers check them and raise `InvalidArgumentError`.
"""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..config import DEFAULT_LOCALE, DEFAULT_PAGE_LIMIT, MAX_PAGE_LIMIT
from ..wiki.models import EditorKind


_LOCALE_DESCRIPTION = 'Page locale (e.g., "en", "de")'
_PATH_DESCRIPTION = (
    'Page path without leading slash (e.g., "osticket/plugin-name" or "home")'
)


class _ToolInput(BaseModel):
    model_config = ConfigDict(extra="forbid", populate_by_name=True)


class _PageIdentityInput(_ToolInput):
    id: Optional[int] = Field(
        default=None,
        gt=0,
        description="Page ID (optional if path is provided)",
    )
    path: Optional[str] = Field(
        default=None,
        min_length=1,
        max_length=500,
        description=f"{_PATH_DESCRIPTION} (optional if id is provided)",
    )
    locale: str = Field(
        default=DEFAULT_LOCALE,
        min_length=2,
        max_length=5,
        description=_LOCALE_DESCRIPTION,
    )


# ---------------------------------------------------------------------
# Create
# ---------------------------------------------------------------------

class CreatePageInput(_ToolInput):
    path: str = Field(..., min_length=1, max_length=500, description=_PATH_DESCRIPTION)
    title: str = Field(..., min_length=1, max_length=200, description="Page title")
    content: str = Field(
        ...,
        min_length=1,
        description="Page content (Markdown or HTML depending on editor)",
    )
    description: str = Field(
        ...,
        min_length=1,
        max_length=500,
        description="Short page description (meta description)",
    )
    locale: str = Field(
        default=DEFAULT_LOCALE,
        min_length=2,
        max_length=5,
        description=_LOCALE_DESCRIPTION,
    )
    editor: EditorKind = Field(
        default="markdown",
        description=(
            'Editor type: "markdown" (default), "code" (raw HTML), '
            'or "ckeditor" (visual)'
        ),
    )
    is_published: bool = Field(
        default=True,
        alias="isPublished",
        description="Whether the page should be published immediately",
    )
    is_private: bool = Field(
        default=False,
        alias="isPrivate",
        description="Whether the page should be private (restricted access)",
    )
    tags: List[str] = Field(
        default_factory=list,
        description='Array of tags for the page (e.g., ["tutorial", "development"])',
    )


# ---------------------------------------------------------------------
# Read / Delete
# ---------------------------------------------------------------------

class GetPageInput(_PageIdentityInput):
    pass


class DeletePageInput(_PageIdentityInput):
    pass


# ---------------------------------------------------------------------
# Update
# ---------------------------------------------------------------------

class UpdatePageInput(_PageIdentityInput):
    """
    Sparse update intent.

    A field the caller did not send is absent from `model_fields_set`; a
    field sent as an empty string or empty list is present. Explicit `null`
    is rejected so that "absent" and "cleared" never collapse into one.
    """
    content: Optional[str] = Field(default=None, description="New page content (optional)")
    title: Optional[str] = Field(
        default=None,
        max_length=200,
        description="New page title (optional)",
    )
    description: Optional[str] = Field(
        default=None,
        max_length=500,
        description="New page description (optional)",
    )
    is_published: Optional[bool] = Field(
        default=None,
        alias="isPublished",
        description="Whether the page should be published (optional)",
    )
    tags: Optional[List[str]] = Field(
        default=None,
        description="Array of tags for the page, replaces existing tags (optional)",
    )

    @field_validator("content", "title", "description", "is_published", "tags")
    @classmethod
    def _reject_explicit_null(cls, value):
        # Only runs for values the caller actually sent.
        if value is None:
            raise ValueError("must be omitted rather than null")
        return value


# ---------------------------------------------------------------------
# List / Search
# ---------------------------------------------------------------------

class ListPagesInput(_ToolInput):
    locale: Optional[str] = Field(
        default=None,
        min_length=2,
        max_length=5,
        description='Filter by locale (optional, e.g., "en", "de")',
    )
    limit: int = Field(
        default=DEFAULT_PAGE_LIMIT,
        ge=1,
        le=MAX_PAGE_LIMIT,
        description=(
            f"Maximum number of pages to return "
            f"(default: {DEFAULT_PAGE_LIMIT}, max: {MAX_PAGE_LIMIT})"
        ),
    )
    offset: int = Field(
        default=0,
        ge=0,
        description="Number of pages to skip for pagination (default: 0)",
    )


class SearchPagesInput(_ToolInput):
    query: str = Field(
        ...,
        min_length=2,
        max_length=200,
        description="Search query string (minimum 2 characters)",
    )
    locale: Optional[str] = Field(
        default=None,
        min_length=2,
        max_length=5,
        description="Filter results by locale (optional)",
    )


# ---------------------------------------------------------------------
# Move
# ---------------------------------------------------------------------

class MovePageInput(_PageIdentityInput):
    destination_path: str = Field(
        ...,
        alias="destinationPath",
        min_length=1,
        max_length=500,
        description='New path for the page (e.g., "new-category/page-name")',
    )
    destination_locale: str = Field(
        default=DEFAULT_LOCALE,
        alias="destinationLocale",
        min_length=2,
        max_length=5,
        description='Target locale (e.g., "en", "de")',
    )
