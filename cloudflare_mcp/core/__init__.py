# =============================================================================
# cloudflare_mcp/core/__init__.py
# =============================================================================
# This package contains the framework-agnostic parts of the plugin:
#   - models.py             data shapes (accounts, categories, plugin info)
#   - config.py             PluginConfig + environment loading
#   - context.py            the account resolver shared by every tool
#   - results.py            the success/error result envelope
#   - cloudflare_client.py  the async HTTP client for the Cloudflare v4 API
#
# Nothing here registers tools.  The tools/ package wires these pieces into
# a FastMCP server.
# =============================================================================

from cloudflare_mcp.core.cloudflare_client import CloudflareAPIError, CloudflareClient
from cloudflare_mcp.core.config import ConfigurationError, PluginConfig, load_config_from_env
from cloudflare_mcp.core.context import PluginContext, create_plugin_context
from cloudflare_mcp.core.models import AccountIdentity, PluginInfo, ToolCategory
from cloudflare_mcp.core.results import (
    MISSING_ACCOUNT_ID_MESSAGE,
    ToolResult,
    create_error_result,
    create_tool_result,
    missing_account_id_result,
)

__all__ = [
    "AccountIdentity",
    "CloudflareAPIError",
    "CloudflareClient",
    "ConfigurationError",
    "MISSING_ACCOUNT_ID_MESSAGE",
    "PluginConfig",
    "PluginContext",
    "PluginInfo",
    "ToolCategory",
    "ToolResult",
    "create_error_result",
    "create_plugin_context",
    "create_tool_result",
    "load_config_from_env",
    "missing_account_id_result",
]
