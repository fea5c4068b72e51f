"""
Wiki.js Data Models

Pydantic models for the shapes exchanged with the Wiki.js GraphQL API.
Attribute names are snake_case; aliases carry the remote camelCase names, so
`model_dump(by_alias=True)` produces wire-compatible dicts.
"""

from __future__ import annotations

from typing import Any, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


EditorKind = Literal["markdown", "code", "ckeditor"]


class _RemoteModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


# ---------------------------------------------------------------------
# Pages
# ---------------------------------------------------------------------

class PageListItem(_RemoteModel):
    """
    Page summary as returned by `pages.list` (no content body).
    """
    id: int
    path: str
    title: str
    description: Optional[str] = None
    is_published: bool = Field(default=False, alias="isPublished")
    locale: str
    content_type: Optional[str] = Field(default=None, alias="contentType")
    created_at: Optional[str] = Field(default=None, alias="createdAt")
    updated_at: Optional[str] = Field(default=None, alias="updatedAt")
    tags: List[str] = Field(default_factory=list)

    @field_validator("tags", mode="before")
    @classmethod
    def _flatten_tags(cls, value: Any) -> List[str]:
        # pages.list returns plain strings, pages.single returns {tag, title}
        # objects, and either may be null.
        if value is None:
            return []
        return [t["tag"] if isinstance(t, dict) else t for t in value]


class WikiPage(PageListItem):
    """
    Full page as returned by `pages.single` / `pages.singleByPath`.
    """
    content: Optional[str] = None
    editor: Optional[str] = None
    is_private: bool = Field(default=False, alias="isPrivate")


# ---------------------------------------------------------------------
# Search
# ---------------------------------------------------------------------

class SearchResult(_RemoteModel):
    # The search engine reports ids as strings.
    id: int
    title: str
    path: str
    description: Optional[str] = None
    locale: str


class SearchResponse(_RemoteModel):
    results: List[SearchResult] = Field(default_factory=list)
    suggestions: List[str] = Field(default_factory=list)
    total_hits: int = Field(default=0, alias="totalHits")

    @field_validator("results", "suggestions", mode="before")
    @classmethod
    def _none_to_empty(cls, value: Any) -> Any:
        return [] if value is None else value


# ---------------------------------------------------------------------
# Mutations
# ---------------------------------------------------------------------

class ApiResponseResult(_RemoteModel):
    """
    The `responseResult` block every Wiki.js page mutation returns.
    """
    succeeded: bool
    error_code: int = Field(default=0, alias="errorCode")
    message: Optional[str] = None
    slug: Optional[str] = None


class CreatePageParams(_RemoteModel):
    path: str
    title: str
    content: str
    description: str
    locale: str
    editor: EditorKind = "markdown"
    is_published: bool = Field(default=True, alias="isPublished")
    is_private: bool = Field(default=False, alias="isPrivate")
    tags: List[str] = Field(default_factory=list)


class UpdatePageParams(_RemoteModel):
    """
    Parameters for `pages.update`.

    Only fields that were explicitly set (see `model_fields_set`) are sent;
    an unset field is left out of the mutation entirely.
    """
    id: int
    content: Optional[str] = None
    title: Optional[str] = None
    description: Optional[str] = None
    is_published: Optional[bool] = Field(default=None, alias="isPublished")
    tags: Optional[List[str]] = None
