"""
End-to-end tests through a real FastMCP server and an in-memory client.
"""

import json

from fastmcp import Client, FastMCP

from cloudflare_mcp import PLUGIN_INFO, ToolCategory
from cloudflare_mcp.core.config import PluginConfig
from cloudflare_mcp.core.results import MISSING_ACCOUNT_ID_MESSAGE
from cloudflare_mcp.tools.mcp_server import create_cloudflare_server, register_cloudflare_tools
from tests.conftest import FakeCloudflareClient
from tests.test_registry import DEFAULT_TOOLS, KV_TOOLS


async def list_tool_names(server):
    async with Client(server) as client:
        return sorted(tool.name for tool in await client.list_tools())


async def call_text(server, name, arguments=None):
    async with Client(server) as client:
        result = await client.call_tool(name, arguments or {})
    return result.content[0].text


async def test_default_server_exposes_default_tools():
    server, _ = create_cloudflare_server(
        PluginConfig(api_token="tok"), client=FakeCloudflareClient()
    )
    assert await list_tool_names(server) == sorted(DEFAULT_TOOLS)


async def test_explicit_empty_categories_expose_nothing():
    server, _ = create_cloudflare_server(
        PluginConfig(api_token="tok", enabled_categories=[]), client=FakeCloudflareClient()
    )
    assert await list_tool_names(server) == []


async def test_disabled_categories_via_config():
    server, _ = create_cloudflare_server(
        PluginConfig(api_token="tok", enabled_categories=["kv", "r2"], disabled_categories=["r2"]),
        client=FakeCloudflareClient(),
    )
    assert await list_tool_names(server) == sorted(KV_TOOLS)


async def test_register_on_existing_server():
    server = FastMCP("host-server")
    context = register_cloudflare_tools(
        server,
        PluginConfig(api_token="tok", enabled_categories=["accounts"]),
        client=FakeCloudflareClient([{"id": "acc-1", "name": "Solo"}]),
    )

    text = await call_text(server, "get_active_account")

    assert json.loads(text) == {"activeAccountId": "acc-1", "isSet": True}
    assert await context.get_account_id() == "acc-1"


async def test_sentinel_through_protocol():
    server, _ = create_cloudflare_server(
        PluginConfig(api_token="tok"), client=FakeCloudflareClient([])
    )
    assert await call_text(server, "kv_namespaces_list") == MISSING_ACCOUNT_ID_MESSAGE


async def test_set_active_account_through_protocol():
    client = FakeCloudflareClient([
        {"id": "a", "name": "A"},
        {"id": "b", "name": "B"},
    ])
    client.kv_namespaces = [{"id": "ns-1", "title": "cache"}]
    server, context = create_cloudflare_server(PluginConfig(api_token="tok"), client=client)

    await call_text(server, "set_active_account", {"account_id": "b"})
    text = await call_text(server, "kv_namespaces_list")

    assert json.loads(text) == {"namespaces": [{"id": "ns-1", "title": "cache"}], "count": 1}
    assert client.calls[0][1] == ("b",)


async def test_provider_error_is_an_envelope_not_a_protocol_error():
    server, _ = create_cloudflare_server(
        PluginConfig(api_token="tok"),
        client=FakeCloudflareClient(error=RuntimeError("connection reset")),
    )
    assert await call_text(server, "accounts_list") == "Error listing accounts: connection reset"


async def test_servers_do_not_share_account_state():
    first, first_context = create_cloudflare_server(
        PluginConfig(api_token="tok"), client=FakeCloudflareClient([])
    )
    second, second_context = create_cloudflare_server(
        PluginConfig(api_token="tok"), client=FakeCloudflareClient([])
    )

    await call_text(first, "set_active_account", {"account_id": "only-first"})

    assert await first_context.get_account_id() == "only-first"
    assert await second_context.get_account_id() is None


def test_plugin_info_lists_every_category():
    assert PLUGIN_INFO.categories == tuple(ToolCategory)
    assert len(PLUGIN_INFO.categories) == 20
