"""
Error Taxonomy and Global Error Handling

This module defines every failure the tool layer can report, plus the
FastAPI safety-net handler for the HTTP transport.

Taxonomy
--------
- InvalidArgumentError : caller omitted a required identity or field
                         (detected locally, no network call made)
- PageNotFoundError    : identity resolution matched no page
- RemoteError          : the Wiki.js API call failed; `kind` tells how

Input-shape failures are pydantic `ValidationError`s and are rendered
separately by the envelope formatter.
"""

from __future__ import annotations

import enum
import logging
from typing import Any, Dict, Optional

from fastapi import Request
from fastapi.responses import JSONResponse

logger = logging.getLogger("wikijs.errors")


# ---------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------

class WikiJsError(Exception):
    """Base class for all errors surfaced to the tool caller."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class InvalidArgumentError(WikiJsError, ValueError):
    """Raised when required arguments are missing before any remote call."""


class PageNotFoundError(WikiJsError):
    """Raised when a page cannot be found by id or by (path, locale)."""

    def __init__(
        self,
        path: Optional[str] = None,
        page_id: Optional[int] = None,
    ) -> None:
        if path is not None:
            message = f"Page not found at path: {path}"
        else:
            message = f"Page not found with ID: {page_id}"
        super().__init__(message)
        self.path = path
        self.page_id = page_id


class RemoteErrorKind(str, enum.Enum):
    TIMEOUT = "timeout"
    TRANSPORT = "transport"
    REMOTE_REJECTED = "remote_rejected"
    EMPTY_RESPONSE = "empty_response"
    OPERATION_REJECTED = "operation_rejected"


class RemoteError(WikiJsError):
    """
    Raised by the Wiki.js client for any failed remote call.

    Attributes
    ----------
    kind : RemoteErrorKind
        Failure category.
    status : Optional[int]
        HTTP status code, for TRANSPORT failures that carry one.
    details : Any
        GraphQL error list (REMOTE_REJECTED) or the remote result message
        (OPERATION_REJECTED).
    """

    def __init__(
        self,
        kind: RemoteErrorKind,
        message: str,
        status: Optional[int] = None,
        details: Any = None,
    ) -> None:
        super().__init__(message)
        self.kind = kind
        self.status = status
        self.details = details


# ---------------------------------------------------------------------
# Public Exception Handlers
# ---------------------------------------------------------------------

async def unhandled_exception_handler(
    request: Request,
    exc: Exception,
) -> JSONResponse:
    """
    Catch-all handler for exceptions that escape the HTTP routes.

    Tool routes return envelopes and should never reach this handler; it
    guards the rest of the app. The traceback is logged, the client gets a
    generic 500.
    """
    logger.exception(
        "Unhandled exception during request: %s %s",
        request.method,
        request.url.path,
        exc_info=exc,
    )

    payload: Dict[str, Any] = {
        "error": "internal_server_error",
        "detail": "Internal server error",
    }

    return JSONResponse(
        status_code=500,
        content=payload,
    )
