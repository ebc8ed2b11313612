"""
Tests for the Cloudflare HTTP client using httpx.MockTransport.
"""

import json

import httpx
import pytest

from cloudflare_mcp.core.cloudflare_client import CloudflareAPIError, CloudflareClient


def envelope(result, **extra):
    return {"success": True, "errors": [], "messages": [], "result": result, **extra}


@pytest.fixture
def requests_seen():
    return []


@pytest.fixture
async def make_client(requests_seen):
    clients = []

    def _make(handler):
        def recording_handler(request):
            requests_seen.append(request)
            return handler(request)

        client = CloudflareClient(
            "test-token",
            base_url="https://api.test/client/v4",
            transport=httpx.MockTransport(recording_handler),
        )
        clients.append(client)
        return client

    yield _make
    for client in clients:
        await client.aclose()


async def test_list_accounts_follows_pagination(make_client, requests_seen):
    pages = {
        "1": [{"id": "a1", "name": "One"}, {"id": "a2", "name": "Two"}],
        "2": [{"id": "a3", "name": "Three"}],
    }

    def handler(request):
        page = request.url.params["page"]
        return httpx.Response(200, json=envelope(
            pages[page], result_info={"page": int(page), "total_pages": 2}
        ))

    client = make_client(handler)
    accounts = [account async for account in client.list_accounts()]

    assert [a["id"] for a in accounts] == ["a1", "a2", "a3"]
    assert len(requests_seen) == 2
    assert requests_seen[0].headers["Authorization"] == "Bearer test-token"
    assert requests_seen[0].url.path == "/client/v4/accounts"


async def test_list_accounts_stops_without_result_info(make_client, requests_seen):
    client = make_client(lambda request: httpx.Response(200, json=envelope([{"id": "a", "name": "A"}])))

    accounts = [account async for account in client.list_accounts()]

    assert len(accounts) == 1
    assert len(requests_seen) == 1


async def test_http_error_raises_with_provider_message(make_client):
    def handler(request):
        return httpx.Response(403, json={
            "success": False,
            "errors": [{"code": 10000, "message": "Authentication error"}],
            "messages": [],
            "result": None,
        })

    client = make_client(handler)

    with pytest.raises(CloudflareAPIError) as excinfo:
        await client.list_worker_scripts("acc-1")

    assert excinfo.value.status_code == 403
    assert excinfo.value.message == "Authentication error (code 10000)"
    assert str(excinfo.value) == "Authentication error (code 10000)"


async def test_http_error_without_json_body(make_client):
    client = make_client(lambda request: httpx.Response(502, text="Bad Gateway"))

    with pytest.raises(CloudflareAPIError, match="HTTP 502"):
        await client.get_zone("z1")


async def test_unsuccessful_envelope_raises(make_client):
    def handler(request):
        return httpx.Response(200, json={
            "success": False,
            "errors": [{"message": "namespace not found"}],
            "result": None,
        })

    client = make_client(handler)

    with pytest.raises(CloudflareAPIError, match="namespace not found"):
        await client.get_kv_namespace("acc-1", "missing")


async def test_none_params_are_dropped(make_client, requests_seen):
    client = make_client(lambda request: httpx.Response(200, json=envelope([])))

    await client.list_kv_namespaces("acc-1", page=2)

    params = dict(requests_seen[0].url.params)
    assert params == {"page": "2"}
    assert requests_seen[0].url.path == "/client/v4/accounts/acc-1/storage/kv/namespaces"


async def test_none_body_fields_are_dropped(make_client, requests_seen):
    client = make_client(lambda request: httpx.Response(200, json=envelope({"uuid": "db-1"})))

    result = await client.create_d1_database("acc-1", "main")

    assert result == {"uuid": "db-1"}
    assert requests_seen[0].method == "POST"
    assert json.loads(requests_seen[0].content) == {"name": "main"}


async def test_zones_are_scoped_by_account(make_client, requests_seen):
    client = make_client(lambda request: httpx.Response(200, json=envelope([{"id": "z1"}])))

    zones = await client.list_zones("acc-1", per_page=50, direction="desc")

    assert zones == [{"id": "z1"}]
    params = requests_seen[0].url.params
    assert params["account.id"] == "acc-1"
    assert "name" not in params


async def test_worker_script_returns_raw_text(make_client):
    client = make_client(lambda request: httpx.Response(200, text="export default {}"))

    assert await client.get_worker_script("acc-1", "api") == "export default {}"


async def test_d1_list_returns_envelope(make_client):
    client = make_client(lambda request: httpx.Response(200, json=envelope(
        [{"uuid": "db-1"}], result_info={"page": 1, "count": 1}
    )))

    response = await client.list_d1_databases("acc-1")

    assert response["result"] == [{"uuid": "db-1"}]
    assert response["result_info"]["count"] == 1


async def test_empty_response_body(make_client):
    client = make_client(lambda request: httpx.Response(204))
    assert await client.delete_kv_namespace("acc-1", "ns-1") is None


async def test_repr_hides_token():
    async with CloudflareClient("secret-token") as client:
        assert "secret-token" not in repr(client)
