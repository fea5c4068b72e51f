"""
MCP stdio Server

Exposes the page tools to an MCP host over stdio. Arguments reach the
dispatcher as the raw mapping the host sent, so an omitted field stays
omitted all the way to the update reconciler.

Lifecycle
---------
- Settings are loaded once; missing WIKIJS_API_URL / WIKIJS_API_TOKEN is
  fatal (exit status 1).
- The server runs until stdin closes or SIGINT/SIGTERM arrives.
- On a signal the serve task is cancelled and given a bounded grace period.
  No request state is held, so nothing is drained.
"""

from __future__ import annotations

import asyncio
import contextlib
import json
import logging
import signal
from typing import Any, Dict, List, Optional

import mcp.types as types
from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server
from pydantic import ValidationError

from . import __version__
from .config import DEPLOYMENT_ENV_FILE, Settings, get_settings, setup_logging
from .tools.base import dispatch_tool_call
from .tools.definitions import TOOL_DEFINITIONS
from .wiki.api_client import WikiJsClient

logger = logging.getLogger("wikijs.mcp")

SERVER_NAME = "wikijs-mcp-server"
SHUTDOWN_GRACE_SECONDS = 5.0


def create_server(client: WikiJsClient, settings: Settings) -> Server:
    """Build the MCP server with the page tools bound to `client`."""
    server = Server(SERVER_NAME, version=__version__)

    @server.list_tools()
    async def list_tools() -> List[types.Tool]:
        return [
            types.Tool(
                name=definition["name"],
                description=definition["description"],
                inputSchema=definition["inputSchema"],
                annotations=types.ToolAnnotations(**definition["annotations"]),
            )
            for definition in TOOL_DEFINITIONS
        ]

    # Argument validation is done by the dispatcher so failures come back as
    # envelopes with field paths.
    @server.call_tool(validate_input=False)
    async def call_tool(
        name: str,
        arguments: Optional[Dict[str, Any]],
    ) -> types.CallToolResult:
        envelope = await dispatch_tool_call(
            name,
            arguments,
            client,
            character_limit=settings.character_limit,
        )
        return types.CallToolResult(
            content=[
                types.TextContent(
                    type="text",
                    text=json.dumps(envelope, indent=2, default=str),
                )
            ],
            isError=not envelope["success"],
        )

    return server


async def serve(settings: Settings) -> None:
    """Serve over stdio until stdin closes or a stop signal arrives."""
    client = WikiJsClient.from_settings(settings)
    server = create_server(client, settings)

    stop = asyncio.Event()
    loop = asyncio.get_running_loop()
    for sig in (signal.SIGINT, signal.SIGTERM):
        with contextlib.suppress(NotImplementedError):
            loop.add_signal_handler(sig, stop.set)

    logger.info("Wiki.js MCP Server v%s running on stdio", __version__)
    logger.info("Connected to: %s", client.api_url)

    async with stdio_server() as (read_stream, write_stream):
        serve_task = asyncio.create_task(
            server.run(
                read_stream,
                write_stream,
                server.create_initialization_options(),
            )
        )
        stop_task = asyncio.create_task(stop.wait())

        done, _ = await asyncio.wait(
            {serve_task, stop_task},
            return_when=asyncio.FIRST_COMPLETED,
        )

        if stop_task in done:
            logger.info("Stop signal received, shutting down")
            serve_task.cancel()
            with contextlib.suppress(asyncio.CancelledError, asyncio.TimeoutError):
                await asyncio.wait_for(serve_task, SHUTDOWN_GRACE_SECONDS)
        else:
            stop_task.cancel()
            # Surface a crash of the serve loop.
            serve_task.result()

    logger.info("Wiki.js MCP Server shutdown complete")


def main() -> None:
    """Console entry point."""
    setup_logging()

    try:
        settings = get_settings()
    except ValidationError as exc:
        missing = ", ".join(
            str(err["loc"][0]).upper() for err in exc.errors() if err["loc"]
        )
        logger.error("Missing or invalid configuration: %s", missing)
        logger.error(
            "Set WIKIJS_API_URL and WIKIJS_API_TOKEN in the environment, in %s, "
            "or in a .env file in the current directory",
            DEPLOYMENT_ENV_FILE,
        )
        raise SystemExit(1) from exc

    setup_logging(settings.log_level)
    asyncio.run(serve(settings))


if __name__ == "__main__":
    main()
