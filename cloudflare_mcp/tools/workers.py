# =============================================================================
# tools/workers.py  -  Workers Script Tools
# =============================================================================

from typing import Annotated

from pydantic import Field

from cloudflare_mcp.core.context import PluginContext
from cloudflare_mcp.core.results import (
    create_error_result,
    create_tool_result,
    missing_account_id_result,
)
from cloudflare_mcp.tools.logging_utils import log_request, log_response, log_status

ScriptName = Annotated[str, Field(description="The name of the worker script")]


def _newest_first(workers: list[dict]) -> list[dict]:
    # ISO-8601 timestamps sort lexically; scripts without one go last.
    dated = [w for w in workers if w["created_on"]]
    undated = [w for w in workers if not w["created_on"]]
    return sorted(dated, key=lambda w: w["created_on"], reverse=True) + undated


def register_workers_tools(server, context: PluginContext) -> None:
    """Register Workers management tools."""

    @server.tool(
        name="workers_list",
        description="List all Workers in your Cloudflare account.\n"
                    "If you only need details of a single Worker, use workers_get_worker_code.",
    )
    async def workers_list():
        log_request("workers_list")
        try:
            account_id = await context.get_account_id()
            if not account_id:
                return log_response("workers_list", missing_account_id_result())

            scripts = await context.client.list_worker_scripts(account_id)
            workers = _newest_first([
                {
                    "name": script.get("id"),
                    "modified_on": script.get("modified_on") or None,
                    "created_on": script.get("created_on") or None,
                }
                for script in scripts
            ])
            log_status(f"Found {len(workers)} worker(s)")
            result = create_tool_result({"workers": workers, "count": len(workers)})
        except Exception as error:
            result = create_error_result(error, "listing workers")
        return log_response("workers_list", result)

    @server.tool(
        name="workers_get_worker_code",
        description="Get the source code of a Cloudflare Worker. "
                    "Note: This may be a bundled version of the worker.",
    )
    async def workers_get_worker_code(script_name: ScriptName):
        log_request("workers_get_worker_code", script_name=script_name)
        try:
            account_id = await context.get_account_id()
            if not account_id:
                return log_response("workers_get_worker_code", missing_account_id_result())

            code = await context.client.get_worker_script(account_id, script_name)
            result = create_tool_result({"code": code})
        except Exception as error:
            result = create_error_result(error, "retrieving worker script")
        return log_response("workers_get_worker_code", result)

    @server.tool(
        name="workers_delete",
        description="Delete a Worker script from your Cloudflare account",
    )
    async def workers_delete(script_name: ScriptName):
        log_request("workers_delete", script_name=script_name)
        try:
            account_id = await context.get_account_id()
            if not account_id:
                return log_response("workers_delete", missing_account_id_result())

            await context.client.delete_worker_script(account_id, script_name)
            result = create_tool_result({"success": True, "deleted": script_name})
        except Exception as error:
            result = create_error_result(error, "deleting worker")
        return log_response("workers_delete", result)
