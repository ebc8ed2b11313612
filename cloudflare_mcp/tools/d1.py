# =============================================================================
# tools/d1.py  -  D1 Database Tools
# =============================================================================
# d1_database_query runs arbitrary SQL against the database.  Parameters are
# passed separately from the statement and bound by D1, never interpolated.
# =============================================================================

from typing import Annotated, Literal, Optional

from pydantic import Field

from cloudflare_mcp.core.context import PluginContext
from cloudflare_mcp.core.results import (
    create_error_result,
    create_tool_result,
    missing_account_id_result,
)
from cloudflare_mcp.tools.logging_utils import log_request, log_response

DatabaseId = Annotated[str, Field(description="The ID of the D1 database")]
DatabaseName = Annotated[str, Field(description="The name of the D1 database")]
LocationHint = Literal["wnam", "enam", "weur", "eeur", "apac", "oc"]


def register_d1_tools(server, context: PluginContext) -> None:
    """Register D1 database management tools."""

    @server.tool(
        name="d1_databases_list",
        description="List all of the D1 databases in your Cloudflare account",
    )
    async def d1_databases_list(
        name: Annotated[Optional[str], Field(description="Filter by database name")] = None,
        page: Annotated[Optional[int], Field(description="Page number")] = None,
        per_page: Annotated[Optional[int], Field(description="Number of results per page")] = None,
    ):
        log_request("d1_databases_list", name=name, page=page, per_page=per_page)
        try:
            account_id = await context.get_account_id()
            if not account_id:
                return log_response("d1_databases_list", missing_account_id_result())

            response = await context.client.list_d1_databases(
                account_id, name=name, page=page, per_page=per_page
            )
            result = create_tool_result({
                "result": response.get("result"),
                "result_info": response.get("result_info"),
            })
        except Exception as error:
            result = create_error_result(error, "listing D1 databases")
        return log_response("d1_databases_list", result)

    @server.tool(
        name="d1_database_create",
        description="Create a new D1 database in your Cloudflare account",
    )
    async def d1_database_create(
        name: DatabaseName,
        primary_location_hint: Annotated[
            Optional[LocationHint],
            Field(description="Primary location hint for the database "
                              "(wnam, enam, weur, eeur, apac, oc)"),
        ] = None,
    ):
        log_request("d1_database_create", name=name, primary_location_hint=primary_location_hint)
        try:
            account_id = await context.get_account_id()
            if not account_id:
                return log_response("d1_database_create", missing_account_id_result())

            database = await context.client.create_d1_database(
                account_id, name, primary_location_hint=primary_location_hint
            )
            result = create_tool_result(database)
        except Exception as error:
            result = create_error_result(error, "creating D1 database")
        return log_response("d1_database_create", result)

    @server.tool(
        name="d1_database_delete",
        description="Delete a D1 database in your Cloudflare account",
    )
    async def d1_database_delete(database_id: DatabaseId):
        log_request("d1_database_delete", database_id=database_id)
        try:
            account_id = await context.get_account_id()
            if not account_id:
                return log_response("d1_database_delete", missing_account_id_result())

            response = await context.client.delete_d1_database(account_id, database_id)
            result = create_tool_result(response)
        except Exception as error:
            result = create_error_result(error, "deleting D1 database")
        return log_response("d1_database_delete", result)

    @server.tool(
        name="d1_database_get",
        description="Get a D1 database in your Cloudflare account",
    )
    async def d1_database_get(database_id: DatabaseId):
        log_request("d1_database_get", database_id=database_id)
        try:
            account_id = await context.get_account_id()
            if not account_id:
                return log_response("d1_database_get", missing_account_id_result())

            database = await context.client.get_d1_database(account_id, database_id)
            result = create_tool_result(database)
        except Exception as error:
            result = create_error_result(error, "getting D1 database")
        return log_response("d1_database_get", result)

    @server.tool(
        name="d1_database_query",
        description="Query a D1 database in your Cloudflare account",
    )
    async def d1_database_query(
        database_id: DatabaseId,
        sql: Annotated[str, Field(description="The SQL query to execute")],
        params: Annotated[
            Optional[list[str]],
            Field(description="Query parameters for parameterized queries (as strings)"),
        ] = None,
    ):
        log_request("d1_database_query", database_id=database_id, sql=sql, params=params)
        try:
            account_id = await context.get_account_id()
            if not account_id:
                return log_response("d1_database_query", missing_account_id_result())

            rows = await context.client.query_d1_database(account_id, database_id, sql, params=params)
            result = create_tool_result(rows)
        except Exception as error:
            result = create_error_result(error, "querying D1 database")
        return log_response("d1_database_query", result)
