"""
HTTP Transport Access Control

The HTTP transport can be protected by a static bearer key
(`HTTP_API_KEY`). When no key is configured the routes are open, which is
the expected setup for a server bound to localhost.
"""

from __future__ import annotations

import hmac
from typing import Annotated, Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from ..config import Settings
from ..api.dependencies import get_app_settings


# ---------------------------------------------------------------------
# Security Scheme
# ---------------------------------------------------------------------

security = HTTPBearer(auto_error=False)


# ---------------------------------------------------------------------
# Public Authentication Dependency
# ---------------------------------------------------------------------

def require_api_key(
    settings: Annotated[Settings, Depends(get_app_settings)],
    creds: Annotated[Optional[HTTPAuthorizationCredentials], Depends(security)],
) -> None:
    """
    Enforce the configured bearer key, if any.

    Raises
    ------
    HTTPException(401)
        If a key is configured and the request carries no valid bearer token.
    """
    if settings.http_api_key is None:
        return

    if creds is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Missing bearer token.",
        )

    expected = settings.http_api_key.get_secret_value()
    if not hmac.compare_digest(creds.credentials, expected):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid bearer token.",
        )
