# =============================================================================
# core/context.py  -  Plugin Context & Account Resolution
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   PluginContext answers one question for every tool call: "which account
#   does this call act on?"  It owns the only mutable state in the plugin:
#
#     _active_account_id   the account tools act on (or None)
#     _cached_accounts     every account visible to the token (or None)
#
# RESOLUTION ORDER (get_account_id):
#   1. An explicit account id (from config or set_active_account) wins,
#      with no network I/O.
#   2. Otherwise the account list is fetched (once, see below).
#   3. If the token sees EXACTLY one account, it becomes the active account.
#   4. Zero or several accounts → None.  The tool must then return the
#      "no active account" sentinel and let the caller choose.
#
# CACHING:
#   get_accounts() fetches all pages once, sorts by name and keeps the list
#   for the lifetime of the context.  Accounts added or removed remotely
#   after that are not seen until the process restarts.
#
# CONCURRENCY:
#   No locks.  Two calls racing on an empty cache may both fetch; both
#   produce the same sorted list, so whichever write lands last is fine.
#
# ERRORS:
#   Provider errors raised while listing accounts propagate unchanged.
#   Tool handlers are responsible for turning them into error results.
# =============================================================================

import logging
from typing import Any, Optional

from cloudflare_mcp.core.cloudflare_client import CloudflareClient
from cloudflare_mcp.core.config import PluginConfig
from cloudflare_mcp.core.models import AccountIdentity

logger = logging.getLogger(__name__)


class PluginContext:
    """Shared state handed to every tool registrar.

    One instance per server.  ``client`` is anything exposing the
    CloudflareClient methods; tests pass fakes.
    """

    def __init__(self, client: Any, api_token: str, account_id: Optional[str] = None):
        self.client = client
        self._api_token = api_token
        self._active_account_id: Optional[str] = account_id or None
        self._cached_accounts: Optional[list[AccountIdentity]] = None

    def __repr__(self) -> str:
        return f"PluginContext(active_account_id={self._active_account_id!r})"

    @property
    def api_token(self) -> str:
        return self._api_token

    async def get_account_id(self) -> Optional[str]:
        """Return the active account id, auto-selecting a sole account."""
        if self._active_account_id:
            return self._active_account_id

        accounts = await self.get_accounts()
        if len(accounts) == 1:
            self._active_account_id = accounts[0].id
            logger.info("Auto-selected the only available account: %s", accounts[0].name)
            return self._active_account_id

        return None

    def set_account_id(self, account_id: str) -> None:
        # Not validated here; the first API call using it will fail if it's wrong.
        self._active_account_id = account_id

    async def get_accounts(self) -> list[AccountIdentity]:
        """Return every account visible to the token, sorted by name."""
        if self._cached_accounts is not None:
            return self._cached_accounts

        logger.info("Fetching account list from Cloudflare")
        accounts = [
            AccountIdentity(id=account["id"], name=account["name"])
            async for account in self.client.list_accounts()
        ]
        accounts.sort(key=lambda account: account.name)

        self._cached_accounts = accounts
        logger.info("Found %d account(s)", len(accounts))
        return accounts


def create_plugin_context(config: PluginConfig, client: Optional[Any] = None) -> PluginContext:
    """Build a PluginContext from config, creating an HTTP client if none is given."""
    if client is None:
        client = CloudflareClient(config.api_token)
    return PluginContext(client, api_token=config.api_token, account_id=config.account_id)
