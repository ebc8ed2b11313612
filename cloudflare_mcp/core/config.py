# =============================================================================
# core/config.py  -  Plugin Configuration
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Defines PluginConfig (the only input the plugin needs) and a loader that
#   builds one from environment variables:
#
#     CLOUDFLARE_API_TOKEN            required, the bearer credential
#     CLOUDFLARE_ACCOUNT_ID           optional, seeds the active account
#     CLOUDFLARE_ENABLED_CATEGORIES   optional, comma-separated
#     CLOUDFLARE_DISABLED_CATEGORIES  optional, comma-separated
#
# UNSET vs EMPTY:
#   enabled_categories=None means "use the default categories".
#   enabled_categories=[] means "register nothing".  A blank environment
#   variable is treated as unset, so the empty list is only reachable from
#   Python code.
# =============================================================================

import os
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Optional, Union

from cloudflare_mcp.core.models import ToolCategory

# Category entries may be enum members or their string values.
CategoryName = Union[ToolCategory, str]


class ConfigurationError(Exception):
    """Raised when the plugin cannot start with the given configuration."""


@dataclass
class PluginConfig:
    api_token: str = field(repr=False)
    account_id: Optional[str] = None
    enabled_categories: Optional[Sequence[CategoryName]] = None
    disabled_categories: Optional[Sequence[CategoryName]] = None

    def __post_init__(self) -> None:
        if not self.api_token:
            raise ConfigurationError("A Cloudflare API token is required")


def _split_categories(raw: Optional[str]) -> Optional[list[str]]:
    if raw is None or not raw.strip():
        return None
    return [part.strip() for part in raw.split(",") if part.strip()]


def load_config_from_env(environ: Optional[Mapping[str, str]] = None) -> PluginConfig:
    """Build a PluginConfig from CLOUDFLARE_* environment variables.

    Raises:
        ConfigurationError: if CLOUDFLARE_API_TOKEN is missing or blank.
    """
    env = os.environ if environ is None else environ

    api_token = env.get("CLOUDFLARE_API_TOKEN", "").strip()
    if not api_token:
        raise ConfigurationError(
            "CLOUDFLARE_API_TOKEN environment variable is required. "
            "Create a token at https://dash.cloudflare.com/profile/api-tokens"
        )

    return PluginConfig(
        api_token=api_token,
        account_id=env.get("CLOUDFLARE_ACCOUNT_ID") or None,
        enabled_categories=_split_categories(env.get("CLOUDFLARE_ENABLED_CATEGORIES")),
        disabled_categories=_split_categories(env.get("CLOUDFLARE_DISABLED_CATEGORIES")),
    )
