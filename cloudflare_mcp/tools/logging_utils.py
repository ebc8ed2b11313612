# =============================================================================
# tools/logging_utils.py  -  Tool Call Logging
# =============================================================================
# We log to STDERR because the MCP server talks to its host over STDOUT
# (stdio transport).  Anything printed to stdout would corrupt the MCP JSON
# stream.
#
# ANSI COLOR CODES:
#     - CYAN for incoming requests (tool name + parameters)
#     - GREEN for responses
#     - YELLOW for intermediate status messages
#
# Tool parameters are logged, the API token never is: it lives on the
# PluginContext and no tool takes it as a parameter.
# =============================================================================

import logging
import sys

from cloudflare_mcp.core.results import ToolResult

logger = logging.getLogger("cloudflare_mcp.tools")

_CYAN = "\033[36m"     # Requests (tool calls with params)
_GREEN = "\033[32m"    # Responses
_YELLOW = "\033[33m"   # Status/progress messages
_RESET = "\033[0m"

_MAX_LOGGED_RESPONSE = 500


def configure_logging(level: int = logging.INFO) -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s [MCP] %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )


def log_request(tool_name: str, **params) -> None:
    """Log an incoming tool call with its parameters in CYAN."""
    param_str = ", ".join(f"{k}={v!r}" for k, v in params.items())
    logger.info(f"{_CYAN}{tool_name} called with: {param_str}{_RESET}")


def log_status(message: str) -> None:
    """Log an intermediate status message in YELLOW."""
    logger.info(f"{_YELLOW}  → {message}{_RESET}")


def log_response(tool_name: str, result: ToolResult) -> ToolResult:
    """Log the (truncated) tool response in GREEN, then return it."""
    text = " ".join(segment.text for segment in result)
    if len(text) > _MAX_LOGGED_RESPONSE:
        text = text[:_MAX_LOGGED_RESPONSE] + "…"
    logger.info(f"{_GREEN}  ← {tool_name} response: {text}{_RESET}")
    return result
