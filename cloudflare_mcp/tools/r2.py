# =============================================================================
# tools/r2.py  -  R2 Bucket Tools
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

BucketName = Annotated[str, Field(description="The name of the R2 bucket")]


def register_r2_tools(server, context: PluginContext) -> None:
    """Register R2 bucket management tools."""

    @server.tool(
        name="r2_buckets_list",
        description="List R2 buckets in your Cloudflare account",
    )
    async def r2_buckets_list(
        cursor: Annotated[Optional[str], Field(description="Cursor for pagination")] = None,
        direction: Annotated[Optional[Literal["asc", "desc"]],
                             Field(description="Direction to order buckets")] = None,
        name_contains: Annotated[Optional[str],
                                 Field(description="Filter by bucket name containing this string")] = None,
        per_page: Annotated[Optional[int], Field(description="Number of buckets per page")] = None,
        start_after: Annotated[Optional[str],
                               Field(description="Start listing after this bucket name")] = None,
    ):
        log_request("r2_buckets_list", cursor=cursor, direction=direction,
                    name_contains=name_contains, per_page=per_page, start_after=start_after)
        try:
            account_id = await context.get_account_id()
            if not account_id:
                return log_response("r2_buckets_list", missing_account_id_result())

            response = await context.client.list_r2_buckets(
                account_id,
                cursor=cursor,
                direction=direction,
                name_contains=name_contains,
                per_page=per_page,
                start_after=start_after,
            )
            buckets = response.get("buckets") or []
            result = create_tool_result({"buckets": buckets, "count": len(buckets)})
        except Exception as error:
            result = create_error_result(error, "listing R2 buckets")
        return log_response("r2_buckets_list", result)

    @server.tool(
        name="r2_bucket_create",
        description="Create a new R2 bucket in your Cloudflare account",
    )
    async def r2_bucket_create(name: BucketName):
        log_request("r2_bucket_create", name=name)
        try:
            account_id = await context.get_account_id()
            if not account_id:
                return log_response("r2_bucket_create", missing_account_id_result())

            bucket = await context.client.create_r2_bucket(account_id, name)
            result = create_tool_result(bucket)
        except Exception as error:
            result = create_error_result(error, "creating R2 bucket")
        return log_response("r2_bucket_create", result)

    @server.tool(
        name="r2_bucket_get",
        description="Get details about a specific R2 bucket",
    )
    async def r2_bucket_get(name: BucketName):
        log_request("r2_bucket_get", name=name)
        try:
            account_id = await context.get_account_id()
            if not account_id:
                return log_response("r2_bucket_get", missing_account_id_result())

            bucket = await context.client.get_r2_bucket(account_id, name)
            result = create_tool_result(bucket)
        except Exception as error:
            result = create_error_result(error, "getting R2 bucket")
        return log_response("r2_bucket_get", result)

    @server.tool(
        name="r2_bucket_delete",
        description="Delete an R2 bucket",
    )
    async def r2_bucket_delete(name: BucketName):
        log_request("r2_bucket_delete", name=name)
        try:
            account_id = await context.get_account_id()
            if not account_id:
                return log_response("r2_bucket_delete", missing_account_id_result())

            response = await context.client.delete_r2_bucket(account_id, name)
            result = create_tool_result(response)
        except Exception as error:
            result = create_error_result(error, "deleting R2 bucket")
        return log_response("r2_bucket_delete", result)
