# =============================================================================
# core/models.py  -  Data Models
# =============================================================================
#
# The shapes that flow between the account resolver, the category registry
# and the tool handlers.  Like the rest of core/, these carry no FastMCP or
# HTTP knowledge.
#
# ToolCategory is a CLOSED set: every category the plugin knows about is
# listed here, including the ones that have no tools yet.  The registry in
# tools/__init__.py maps each member to a registrar (or to None).
# =============================================================================

from dataclasses import dataclass, field
from enum import Enum


class ToolCategory(str, Enum):
    """A named group of tools that can be enabled or disabled as a unit."""

    ACCOUNTS = "accounts"
    WORKERS = "workers"
    KV = "kv"
    R2 = "r2"
    D1 = "d1"
    HYPERDRIVE = "hyperdrive"
    ZONES = "zones"
    RADAR = "radar"
    URL_SCANNER = "url-scanner"
    BROWSER = "browser"
    AI_GATEWAY = "ai-gateway"
    WORKERS_BUILDS = "workers-builds"
    WORKERS_OBSERVABILITY = "workers-observability"
    AUDITLOGS = "auditlogs"
    LOGPUSH = "logpush"
    DNS_ANALYTICS = "dns-analytics"
    GRAPHQL = "graphql"
    AUTORAG = "autorag"
    CASB = "casb"
    DEX = "dex"

    def __str__(self) -> str:
        return self.value


# -----------------------------------------------------------------------------
# AccountIdentity: one account visible to the API token
# -----------------------------------------------------------------------------
# Frozen: once observed from the provider, an account entry never changes
# for the lifetime of the process (the resolver caches the whole list).
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class AccountIdentity:
    id: str
    name: str


@dataclass(frozen=True)
class PluginInfo:
    """Static metadata describing the plugin."""

    name: str
    version: str
    description: str
    categories: tuple[ToolCategory, ...] = field(default_factory=tuple)
