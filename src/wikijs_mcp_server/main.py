"""
HTTP Application Entry Point

This module defines the FastAPI application serving the page tools over
HTTP, registers all routers, and configures global exception handling.

Run with:  uvicorn wikijs_mcp_server.main:app
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import FastAPI

from . import __version__
from .api import health_routes, tool_routes
from .config import Settings, get_settings
from .core.errors import unhandled_exception_handler
from .wiki.api_client import WikiJsClient

logger = logging.getLogger("wikijs.app")


# ---------------------------------------------------------------------
# Application Factory (Test-Friendly)
# ---------------------------------------------------------------------

def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Explicit configuration. When omitted, settings are loaded from the
        environment at startup, so a missing WIKIJS_API_URL/WIKIJS_API_TOKEN
        fails the startup rather than the first request.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        app_settings = settings or get_settings()

        app.state.settings = app_settings
        app.state.wiki_client = WikiJsClient.from_settings(app_settings)

        logger.info("Starting wikijs-mcp-server (HTTP)")
        logger.info("Connected to: %s", app_settings.wikijs_api_url)

        yield

        # Clients are per-request; nothing to close.
        logger.info("Shutting down wikijs-mcp-server (HTTP)")

    app = FastAPI(
        title="wikijs-mcp-server",
        version=__version__,
        lifespan=lifespan,
    )

    # --------------------------------------------------------------
    # Global Exception Handling
    # --------------------------------------------------------------

    app.add_exception_handler(Exception, unhandled_exception_handler)

    # --------------------------------------------------------------
    # Router Registration
    # --------------------------------------------------------------

    app.include_router(health_routes.router)
    app.include_router(tool_routes.router)

    return app


# ---------------------------------------------------------------------
# Default Application Instance (for Uvicorn)
# ---------------------------------------------------------------------

app = create_app()
