# =============================================================================
# tools/__init__.py  -  Category Registry & Registration Dispatcher
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Maps every ToolCategory to the function that registers its tools on a
#   FastMCP server, and decides at startup which categories go live.
#
#   TOOL_REGISTRARS   category → registrar, or None for categories that
#                     are reserved but have no tools yet
#   DEFAULT_CATEGORIES  what is enabled when the caller doesn't say
#   register_tools()    the one-shot dispatcher
#
# HOW THE ACTIVE SET IS COMPUTED:
#   effective = (enabled_categories or DEFAULT_CATEGORIES) minus disabled
#   in the order of the enabled/default list.  enabled_categories=None
#   falls back to the defaults; enabled_categories=[] registers nothing.
#
#   Registration happens once per server.  Calling register_tools() twice
#   on the same server registers every tool name twice, which FastMCP does
#   not guarantee to accept.
# =============================================================================

import logging
from collections.abc import Callable, Iterable, Mapping
from types import MappingProxyType
from typing import Any, Optional

from cloudflare_mcp.core.config import CategoryName
from cloudflare_mcp.core.context import PluginContext
from cloudflare_mcp.core.models import ToolCategory
from cloudflare_mcp.tools.accounts import register_account_tools
from cloudflare_mcp.tools.d1 import register_d1_tools
from cloudflare_mcp.tools.kv import register_kv_tools
from cloudflare_mcp.tools.r2 import register_r2_tools
from cloudflare_mcp.tools.workers import register_workers_tools
from cloudflare_mcp.tools.zones import register_zone_tools

logger = logging.getLogger(__name__)

ToolRegistrar = Callable[[Any, PluginContext], None]

TOOL_REGISTRARS: Mapping[ToolCategory, Optional[ToolRegistrar]] = MappingProxyType({
    ToolCategory.ACCOUNTS: register_account_tools,
    ToolCategory.WORKERS: register_workers_tools,
    ToolCategory.KV: register_kv_tools,
    ToolCategory.R2: register_r2_tools,
    ToolCategory.D1: register_d1_tools,
    ToolCategory.HYPERDRIVE: None,
    ToolCategory.ZONES: register_zone_tools,
    ToolCategory.RADAR: None,
    ToolCategory.URL_SCANNER: None,
    ToolCategory.BROWSER: None,
    ToolCategory.AI_GATEWAY: None,
    ToolCategory.WORKERS_BUILDS: None,
    ToolCategory.WORKERS_OBSERVABILITY: None,
    ToolCategory.AUDITLOGS: None,
    ToolCategory.LOGPUSH: None,
    ToolCategory.DNS_ANALYTICS: None,
    ToolCategory.GRAPHQL: None,
    ToolCategory.AUTORAG: None,
    ToolCategory.CASB: None,
    ToolCategory.DEX: None,
})

DEFAULT_CATEGORIES: tuple[ToolCategory, ...] = (
    ToolCategory.ACCOUNTS,
    ToolCategory.WORKERS,
    ToolCategory.KV,
    ToolCategory.R2,
    ToolCategory.D1,
    ToolCategory.ZONES,
)


def _known_categories(names: Iterable[CategoryName]) -> list[ToolCategory]:
    categories = []
    for name in names:
        try:
            categories.append(ToolCategory(name))
        except ValueError:
            logger.debug("Ignoring unknown tool category %r", name)
    return categories


def resolve_categories(
    enabled_categories: Optional[Iterable[CategoryName]] = None,
    disabled_categories: Optional[Iterable[CategoryName]] = None,
) -> list[ToolCategory]:
    """Compute the ordered, de-duplicated list of active categories."""
    requested = DEFAULT_CATEGORIES if enabled_categories is None else enabled_categories
    disabled = set(_known_categories(disabled_categories or ()))

    active: list[ToolCategory] = []
    for category in _known_categories(requested):
        if category not in disabled and category not in active:
            active.append(category)
    return active


def register_tools(
    server,
    context: PluginContext,
    enabled_categories: Optional[Iterable[CategoryName]] = None,
    disabled_categories: Optional[Iterable[CategoryName]] = None,
) -> list[ToolCategory]:
    """Register the tools of every active category on ``server``.

    Returns the categories that were considered active, including
    placeholders that registered nothing.
    """
    active = resolve_categories(enabled_categories, disabled_categories)

    for category in active:
        registrar = TOOL_REGISTRARS.get(category)
        if registrar is None:
            logger.debug("Category %s has no tools yet, skipping", category)
            continue
        registrar(server, context)
        logger.debug("Registered tools for category %s", category)

    return active


__all__ = [
    "DEFAULT_CATEGORIES",
    "TOOL_REGISTRARS",
    "ToolRegistrar",
    "register_account_tools",
    "register_d1_tools",
    "register_kv_tools",
    "register_r2_tools",
    "register_tools",
    "register_workers_tools",
    "register_zone_tools",
    "resolve_categories",
]
