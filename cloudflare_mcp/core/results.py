# =============================================================================
# core/results.py  -  Tool Result Envelope
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Every tool returns the same shape: a list holding ONE text segment.
#     - success → the data serialized as JSON
#     - failure → "Error {context}: {message}"
#     - no active account → a fixed sentinel message
#
#   FastMCP passes a list of TextContent through to the client unchanged,
#   so the host never has to know which tool produced the payload or
#   whether it failed.
# =============================================================================

import json
from collections.abc import Mapping
from typing import Any

from mcp.types import TextContent

ToolResult = list[TextContent]

MISSING_ACCOUNT_ID_MESSAGE = (
    "No currently active accountId. Try listing your accounts (accounts_list) "
    "and then setting an active account (set_active_account)"
)


def _text(text: str) -> ToolResult:
    return [TextContent(type="text", text=text)]


def create_tool_result(data: Any) -> ToolResult:
    """Wrap any JSON-serializable value in a success envelope."""
    return _text(json.dumps(data))


def _error_message(error: Any) -> str:
    # Accessors on odd error objects can raise; each step falls through.
    try:
        if isinstance(error, Mapping):
            message = error.get("message")
        else:
            message = getattr(error, "message", None)
        if isinstance(message, str):
            return message
    except Exception:
        pass

    try:
        return str(error)
    except Exception:
        return f"<unprintable {type(error).__name__}>"


def create_error_result(error: Any, context: str) -> ToolResult:
    """Wrap an exception (or anything else) in an error envelope.

    Never raises: ``None`` and objects without a message are stringified.

    >>> create_error_result(ValueError("boom"), "listing X")[0].text
    'Error listing X: boom'
    """
    return _text(f"Error {context}: {_error_message(error)}")


def missing_account_id_result() -> ToolResult:
    """The sentinel returned when no account could be resolved."""
    return _text(MISSING_ACCOUNT_ID_MESSAGE)
