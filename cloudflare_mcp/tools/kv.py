# =============================================================================
# tools/kv.py  -  Workers KV Namespace Tools
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

NamespaceId = Annotated[str, Field(description="The ID of the KV namespace")]
NamespaceTitle = Annotated[str, Field(description="The human-readable name/title of the KV namespace")]


def register_kv_tools(server, context: PluginContext) -> None:
    """Register KV namespace management tools."""

    @server.tool(
        name="kv_namespaces_list",
        description="List all of the KV namespaces in your Cloudflare account.\n"
                    "Returns a list of KV namespaces with id and title properties.",
    )
    async def kv_namespaces_list(
        direction: Annotated[Optional[Literal["asc", "desc"]],
                             Field(description="Direction to order namespaces (asc/desc)")] = None,
        order: Annotated[Optional[Literal["id", "title"]],
                         Field(description="Field to order namespaces by (id/title)")] = None,
        page: Annotated[Optional[int],
                        Field(ge=1, description="Page number of results (starts at 1)")] = None,
        per_page: Annotated[Optional[int],
                            Field(ge=1, le=100, description="Number of namespaces per page (1-100)")] = None,
    ):
        log_request("kv_namespaces_list", direction=direction, order=order,
                    page=page, per_page=per_page)
        try:
            account_id = await context.get_account_id()
            if not account_id:
                return log_response("kv_namespaces_list", missing_account_id_result())

            response = await context.client.list_kv_namespaces(
                account_id, direction=direction, order=order, page=page, per_page=per_page
            )
            namespaces = [{"id": ns.get("id"), "title": ns.get("title")} for ns in response]
            result = create_tool_result({"namespaces": namespaces, "count": len(namespaces)})
        except Exception as error:
            result = create_error_result(error, "listing KV namespaces")
        return log_response("kv_namespaces_list", result)

    @server.tool(
        name="kv_namespace_create",
        description="Create a new KV namespace in your Cloudflare account",
    )
    async def kv_namespace_create(title: NamespaceTitle):
        log_request("kv_namespace_create", title=title)
        try:
            account_id = await context.get_account_id()
            if not account_id:
                return log_response("kv_namespace_create", missing_account_id_result())

            namespace = await context.client.create_kv_namespace(account_id, title)
            result = create_tool_result(namespace)
        except Exception as error:
            result = create_error_result(error, "creating KV namespace")
        return log_response("kv_namespace_create", result)

    @server.tool(
        name="kv_namespace_delete",
        description="Delete a KV namespace in your Cloudflare account",
    )
    async def kv_namespace_delete(namespace_id: NamespaceId):
        log_request("kv_namespace_delete", namespace_id=namespace_id)
        try:
            account_id = await context.get_account_id()
            if not account_id:
                return log_response("kv_namespace_delete", missing_account_id_result())

            response = await context.client.delete_kv_namespace(account_id, namespace_id)
            result = create_tool_result(response if response is not None else {"success": True})
        except Exception as error:
            result = create_error_result(error, "deleting KV namespace")
        return log_response("kv_namespace_delete", result)

    @server.tool(
        name="kv_namespace_get",
        description="Get details of a KV namespace in your Cloudflare account.\n"
                    "Returns id, title, supports_url_encoding, and beta properties.",
    )
    async def kv_namespace_get(namespace_id: NamespaceId):
        log_request("kv_namespace_get", namespace_id=namespace_id)
        try:
            account_id = await context.get_account_id()
            if not account_id:
                return log_response("kv_namespace_get", missing_account_id_result())

            namespace = await context.client.get_kv_namespace(account_id, namespace_id)
            result = create_tool_result(namespace)
        except Exception as error:
            result = create_error_result(error, "getting KV namespace")
        return log_response("kv_namespace_get", result)

    @server.tool(
        name="kv_namespace_update",
        description="Update the title of a KV namespace in your Cloudflare account",
    )
    async def kv_namespace_update(namespace_id: NamespaceId, title: NamespaceTitle):
        log_request("kv_namespace_update", namespace_id=namespace_id, title=title)
        try:
            account_id = await context.get_account_id()
            if not account_id:
                return log_response("kv_namespace_update", missing_account_id_result())

            response = await context.client.update_kv_namespace(account_id, namespace_id, title)
            result = create_tool_result(response if response is not None else {"success": True})
        except Exception as error:
            result = create_error_result(error, "updating KV namespace")
        return log_response("kv_namespace_update", result)
