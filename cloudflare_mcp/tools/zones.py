# =============================================================================
# tools/zones.py  -  Zone & DNS Tools
# =============================================================================
#
# zones_list and zone_details need an active account.  zone_dns_records_list
# is scoped by zone id alone and works without one.
# =============================================================================

from typing import Annotated, Literal, Optional

from pydantic import Field

from cloudflare_mcp.core.context import PluginContext
from cloudflare_mcp.core.results import (
    create_error_result,
    create_tool_result,
    missing_account_id_result,
)
from cloudflare_mcp.tools.logging_utils import log_request, log_response, log_status

_ZONE_FIELDS = (
    "id",
    "name",
    "status",
    "paused",
    "type",
    "development_mode",
    "name_servers",
    "created_on",
    "modified_on",
)


def register_zone_tools(server, context: PluginContext) -> None:
    """Register zone and DNS record tools."""

    @server.tool(
        name="zones_list",
        description="List all zones under a Cloudflare account",
    )
    async def zones_list(
        name: Annotated[Optional[str], Field(description="Filter zones by name")] = None,
        status: Annotated[Optional[str], Field(
            description="Filter zones by status (active, pending, initializing, moved, "
                        "deleted, deactivated, read only)"
        )] = None,
        page: Annotated[int, Field(ge=1, description="Page number for pagination")] = 1,
        per_page: Annotated[int, Field(ge=5, le=1000, description="Number of zones per page")] = 50,
        order: Annotated[Literal["name", "status", "account.name"],
                         Field(description="Field to order results by")] = "name",
        direction: Annotated[Literal["asc", "desc"],
                             Field(description="Direction to order results")] = "desc",
    ):
        log_request("zones_list", name=name, status=status, page=page,
                    per_page=per_page, order=order, direction=direction)
        try:
            account_id = await context.get_account_id()
            if not account_id:
                return log_response("zones_list", missing_account_id_result())

            response = await context.client.list_zones(
                account_id,
                name=name,
                status=status,
                page=page,
                per_page=per_page,
                order=order,
                direction=direction,
            )
            zones = [{key: zone.get(key) for key in _ZONE_FIELDS} for zone in response]
            log_status(f"Found {len(zones)} zone(s)")
            result = create_tool_result({
                "zones": zones,
                "count": len(zones),
                "page": page,
                "per_page": per_page,
                "accountId": account_id,
            })
        except Exception as error:
            result = create_error_result(error, "listing zones")
        return log_response("zones_list", result)

    @server.tool(
        name="zone_details",
        description="Get details for a specific Cloudflare zone",
    )
    async def zone_details(
        zone_id: Annotated[str, Field(description="The ID of the zone to get details for")],
    ):
        log_request("zone_details", zone_id=zone_id)
        try:
            account_id = await context.get_account_id()
            if not account_id:
                return log_response("zone_details", missing_account_id_result())

            zone = await context.client.get_zone(zone_id)
            result = create_tool_result({"zone": zone})
        except Exception as error:
            result = create_error_result(error, "fetching zone details")
        return log_response("zone_details", result)

    @server.tool(
        name="zone_dns_records_list",
        description="List DNS records for a specific Cloudflare zone",
    )
    async def zone_dns_records_list(
        zone_id: Annotated[str, Field(description="The ID of the zone")],
        type: Annotated[Optional[str], Field(
            description="Filter by record type (A, AAAA, CNAME, TXT, MX, etc.)"
        )] = None,
        page: Annotated[int, Field(ge=1, description="Page number")] = 1,
        per_page: Annotated[int, Field(ge=5, le=1000, description="Records per page")] = 50,
    ):
        log_request("zone_dns_records_list", zone_id=zone_id, type=type,
                    page=page, per_page=per_page)
        try:
            records = await context.client.list_dns_records(
                zone_id, record_type=type, page=page, per_page=per_page
            )
            result = create_tool_result({"records": records, "count": len(records)})
        except Exception as error:
            result = create_error_result(error, "listing DNS records")
        return log_response("zone_dns_records_list", result)
