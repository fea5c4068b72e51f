"""
Server Configuration

Settings are read from the environment and from `.env` files. The deployment
location `~/.claude/mcp-servers/wikijs/.env` wins over a `.env` in the working
directory when both exist.

The `Settings` object is built once at process start (see `get_settings`) and
handed to the client and transports explicitly.
"""

from __future__ import annotations

import logging
import sys
from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import AnyHttpUrl, Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


# ---------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------

DEFAULT_LOCALE = "en"
DEFAULT_PAGE_LIMIT = 50
MAX_PAGE_LIMIT = 200
DEFAULT_REQUEST_TIMEOUT = 30.0

# Maximum page content returned to the host before truncation.
CHARACTER_LIMIT = 100_000

DEPLOYMENT_ENV_FILE = Path.home() / ".claude" / "mcp-servers" / "wikijs" / ".env"

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class Settings(BaseSettings):
    wikijs_api_url: AnyHttpUrl
    wikijs_api_token: SecretStr

    request_timeout: float = Field(default=DEFAULT_REQUEST_TIMEOUT, gt=0)
    character_limit: int = Field(default=CHARACTER_LIMIT, ge=1)

    log_level: str = "INFO"

    # Bearer key for the HTTP transport; unset means the routes are open.
    http_api_key: Optional[SecretStr] = None

    model_config = SettingsConfigDict(
        env_file=(".env", str(DEPLOYMENT_ENV_FILE)),
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    return Settings()


def setup_logging(level: str = "INFO") -> None:
    """
    Route all log output to stderr.

    Stdout carries the MCP stdio protocol and must stay clean.
    """
    root = logging.getLogger()
    root.setLevel(level.upper())

    for handler in list(root.handlers):
        root.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)
