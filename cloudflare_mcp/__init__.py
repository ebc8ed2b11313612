# =============================================================================
# cloudflare_mcp
# =============================================================================
# Exposes the Cloudflare API as MCP tools that can be added to any FastMCP
# server.
#
#   from fastmcp import FastMCP
#   from cloudflare_mcp import PluginConfig, register_cloudflare_tools
#
#   mcp = FastMCP("my-server")
#   register_cloudflare_tools(mcp, PluginConfig(
#       api_token=os.environ["CLOUDFLARE_API_TOKEN"],
#       enabled_categories=["workers", "kv", "d1"],
#   ))
#
# Layout:
#   core/   framework-agnostic logic (config, account resolution, results,
#           the HTTP client)
#   tools/  FastMCP tool registrars, one module per category
# =============================================================================

from cloudflare_mcp.core import (
    AccountIdentity,
    CloudflareAPIError,
    CloudflareClient,
    ConfigurationError,
    PluginConfig,
    PluginContext,
    PluginInfo,
    ToolCategory,
    ToolResult,
    create_error_result,
    create_plugin_context,
    create_tool_result,
    load_config_from_env,
)
from cloudflare_mcp.tools import (
    DEFAULT_CATEGORIES,
    TOOL_REGISTRARS,
    register_account_tools,
    register_d1_tools,
    register_kv_tools,
    register_r2_tools,
    register_tools,
    register_workers_tools,
    register_zone_tools,
)
from cloudflare_mcp.tools.mcp_server import (
    PLUGIN_INFO,
    create_cloudflare_server,
    register_cloudflare_tools,
)

__version__ = PLUGIN_INFO.version

__all__ = [
    "AccountIdentity",
    "CloudflareAPIError",
    "CloudflareClient",
    "ConfigurationError",
    "DEFAULT_CATEGORIES",
    "PLUGIN_INFO",
    "PluginConfig",
    "PluginContext",
    "PluginInfo",
    "TOOL_REGISTRARS",
    "ToolCategory",
    "ToolResult",
    "create_cloudflare_server",
    "create_error_result",
    "create_plugin_context",
    "create_tool_result",
    "load_config_from_env",
    "register_account_tools",
    "register_cloudflare_tools",
    "register_d1_tools",
    "register_kv_tools",
    "register_r2_tools",
    "register_tools",
    "register_workers_tools",
    "register_zone_tools",
]
