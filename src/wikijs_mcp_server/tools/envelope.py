"""
Response Envelopes

Every tool call answers with one JSON-serializable dict:

    success: {"success": True, ...payload}
    failure: {"success": False, "error": "<message>", "tool": "<tool name>"}

Validation failures list each offending field path on its own line; all
other failures carry the exception's message.
"""

from __future__ import annotations

import logging
from typing import Any, Dict

from pydantic import ValidationError

logger = logging.getLogger("wikijs.tools")


def success_response(payload: Dict[str, Any]) -> Dict[str, Any]:
    return {"success": True, **payload}


def format_validation_error(exc: ValidationError, tool_name: str) -> str:
    issues = "\n".join(
        f"  - {'.'.join(str(part) for part in err['loc'])}: {err['msg']}"
        for err in exc.errors()
    )
    return f"Validation error in {tool_name}:\n{issues}"


def error_response(exc: BaseException, tool_name: str) -> Dict[str, Any]:
    if isinstance(exc, ValidationError):
        message = format_validation_error(exc, tool_name)
    else:
        message = str(exc) or type(exc).__name__

    logger.error("[%s] Error: %s", tool_name, message)

    return {
        "success": False,
        "error": message,
        "tool": tool_name,
    }
