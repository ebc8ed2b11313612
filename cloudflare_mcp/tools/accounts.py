# =============================================================================
# tools/accounts.py  -  Account Management Tools
# =============================================================================
#
#   accounts_list        every account the token can see (cached)
#   set_active_account   choose the account other tools act on
#   get_active_account   report the active account, auto-selecting a sole one
#
# These are the tools the "no active account" sentinel points callers to.
# =============================================================================

from dataclasses import asdict
from typing import Annotated

from pydantic import Field

from cloudflare_mcp.core.context import PluginContext
from cloudflare_mcp.core.results import create_error_result, create_tool_result
from cloudflare_mcp.tools.logging_utils import log_request, log_response, log_status


def register_account_tools(server, context: PluginContext) -> None:
    """Register account management tools."""

    @server.tool(
        name="accounts_list",
        description="List all accounts in your Cloudflare account",
    )
    async def accounts_list():
        log_request("accounts_list")
        try:
            accounts = await context.get_accounts()
            log_status(f"{len(accounts)} account(s) available")
            result = create_tool_result({
                "accounts": [asdict(account) for account in accounts],
                "count": len(accounts),
            })
        except Exception as error:
            result = create_error_result(error, "listing accounts")
        return log_response("accounts_list", result)

    @server.tool(
        name="set_active_account",
        description="Set active account to be used for tool calls that require accountId",
    )
    async def set_active_account(
        account_id: Annotated[str, Field(
            description="The accountId present in the users Cloudflare account, "
                        "that should be the active accountId."
        )],
    ):
        log_request("set_active_account", account_id=account_id)
        try:
            context.set_account_id(account_id)
            result = create_tool_result({"activeAccountId": account_id})
        except Exception as error:
            result = create_error_result(error, "setting active account")
        return log_response("set_active_account", result)

    @server.tool(
        name="get_active_account",
        description="Get the currently active account ID being used for API calls",
    )
    async def get_active_account():
        log_request("get_active_account")
        try:
            account_id = await context.get_account_id()
            result = create_tool_result({
                "activeAccountId": account_id,
                "isSet": account_id is not None,
            })
        except Exception as error:
            result = create_error_result(error, "getting active account")
        return log_response("get_active_account", result)
