# =============================================================================
# cli.py  -  stdio Entry Point
# =============================================================================
#
# HOW TO RUN:
#   CLOUDFLARE_API_TOKEN=xxx cloudflare-mcp
#
# Or from an MCP client configuration:
#   {
#     "mcpServers": {
#       "cloudflare": {
#         "command": "cloudflare-mcp",
#         "env": {"CLOUDFLARE_API_TOKEN": "your-api-token"}
#       }
#     }
#   }
#
# A .env file in the working directory is loaded first, so the variables
# above can live there instead.  Logs go to stderr; stdout is the MCP stream.
# The Cloudflare HTTP client is closed once the server stops.
# =============================================================================

import asyncio
import logging
import sys

from dotenv import load_dotenv

from cloudflare_mcp.core.config import ConfigurationError, load_config_from_env
from cloudflare_mcp.tools.logging_utils import configure_logging
from cloudflare_mcp.tools.mcp_server import PLUGIN_VERSION, create_cloudflare_server

logger = logging.getLogger(__name__)


async def serve(server, context) -> None:
    """Run the server over stdio, closing the HTTP client when it stops."""
    try:
        await server.run_async()
    finally:
        await context.client.aclose()


def main() -> None:
    load_dotenv()
    configure_logging()

    try:
        config = load_config_from_env()
    except ConfigurationError as error:
        logger.error("Error: %s", error)
        logger.error("Usage: CLOUDFLARE_API_TOKEN=xxx cloudflare-mcp")
        sys.exit(1)

    server, context = create_cloudflare_server(
        config, name="cloudflare-mcp-plugin", version=PLUGIN_VERSION
    )

    logger.info("Cloudflare MCP Plugin started")
    if config.account_id:
        logger.info("Using account ID: %s", config.account_id)
    if config.enabled_categories is not None:
        logger.info("Enabled categories: %s", ", ".join(config.enabled_categories))
    if config.disabled_categories:
        logger.info("Disabled categories: %s", ", ".join(config.disabled_categories))

    asyncio.run(serve(server, context))


if __name__ == "__main__":
    main()
