# =============================================================================
# tools/mcp_server.py  -  FastMCP Server Assembly
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Glues the pieces together:
#     1. builds a PluginContext (account resolver + HTTP client) from config
#     2. runs the category dispatcher against a FastMCP server
#     3. hands back the server and context
#
# TWO WAYS TO USE IT:
#   a) Add Cloudflare tools to a server you already have:
#
#        mcp = FastMCP("my-server")
#        register_cloudflare_tools(mcp, PluginConfig(api_token="..."))
#
#   b) Get a ready-made server (what cli.py does):
#
#        server, context = create_cloudflare_server(PluginConfig(api_token="..."))
#        await server.run_async()
#        await context.client.aclose()
#
# Every tool registered on the server closes over the SAME context, so
# set_active_account affects all subsequent calls on that server and no
# other.
# =============================================================================

from typing import Any, Optional

from fastmcp import FastMCP

from cloudflare_mcp.core.config import PluginConfig
from cloudflare_mcp.core.context import PluginContext, create_plugin_context
from cloudflare_mcp.core.models import PluginInfo, ToolCategory
from cloudflare_mcp.tools import register_tools
from cloudflare_mcp.tools.logging_utils import log_status

DEFAULT_SERVER_NAME = "cloudflare-mcp-server"
PLUGIN_VERSION = "0.1.0"

PLUGIN_INFO = PluginInfo(
    name="cloudflare-mcp-plugin",
    version=PLUGIN_VERSION,
    description="Cloudflare MCP tools as a plugin for any MCP server",
    categories=tuple(ToolCategory),
)


def register_cloudflare_tools(
    server: FastMCP,
    config: PluginConfig,
    client: Optional[Any] = None,
) -> PluginContext:
    """Register Cloudflare tools on ``server`` and return the shared context.

    ``client`` overrides the HTTP client built from ``config.api_token``.
    """
    context = create_plugin_context(config, client=client)

    active = register_tools(
        server,
        context,
        enabled_categories=config.enabled_categories,
        disabled_categories=config.disabled_categories,
    )
    log_status(f"Active tool categories: {', '.join(str(c) for c in active) or 'none'}")
    return context


def create_cloudflare_server(
    config: PluginConfig,
    name: str = DEFAULT_SERVER_NAME,
    version: str = PLUGIN_VERSION,
    client: Optional[Any] = None,
) -> tuple[FastMCP, PluginContext]:
    """Create a FastMCP server with the Cloudflare tools already registered.

    The caller owns the HTTP client: await ``context.client.aclose()`` once
    the server has stopped (cli.serve does this).
    """
    server = FastMCP(name, version=version)
    context = register_cloudflare_tools(server, config, client=client)
    return server, context
