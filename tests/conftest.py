"""
Shared fixtures: a fake Cloudflare client and a server that records tools.

FakeCloudflareClient implements the subset of CloudflareClient that the
context and the tool handlers call, and counts account-list requests so tests
can assert memoization.  RecordingServer mimics ``FastMCP.tool(name=...,
description=...)`` and keeps the decorated handlers so tests can call them
directly.
"""

import json

import pytest

from cloudflare_mcp.core.cloudflare_client import CloudflareAPIError
from cloudflare_mcp.core.context import PluginContext


class FakeCloudflareClient:
    def __init__(self, accounts=None, error=None):
        self.accounts = list(accounts or [])
        self.error = error
        self.list_accounts_calls = 0
        self.calls = []
        self.kv_namespaces = []
        self.worker_scripts = []
        self.dns_records = []
        self.responses = {}
        self.closed = False

    async def list_accounts(self):
        self.list_accounts_calls += 1
        if self.error is not None:
            raise self.error
        for account in self.accounts:
            yield account

    async def aclose(self):
        self.closed = True

    def _record(self, method, *args, **kwargs):
        self.calls.append((method, args, kwargs))
        response = self.responses.get(method)
        if isinstance(response, Exception):
            raise response
        return response

    async def list_worker_scripts(self, account_id):
        self._record("list_worker_scripts", account_id)
        return self.worker_scripts

    async def get_worker_script(self, account_id, script_name):
        return self._record("get_worker_script", account_id, script_name)

    async def delete_worker_script(self, account_id, script_name):
        return self._record("delete_worker_script", account_id, script_name)

    async def list_kv_namespaces(self, account_id, **params):
        self._record("list_kv_namespaces", account_id, **params)
        return self.kv_namespaces

    async def create_kv_namespace(self, account_id, title):
        return self._record("create_kv_namespace", account_id, title)

    async def get_kv_namespace(self, account_id, namespace_id):
        return self._record("get_kv_namespace", account_id, namespace_id)

    async def update_kv_namespace(self, account_id, namespace_id, title):
        return self._record("update_kv_namespace", account_id, namespace_id, title)

    async def delete_kv_namespace(self, account_id, namespace_id):
        return self._record("delete_kv_namespace", account_id, namespace_id)

    async def list_r2_buckets(self, account_id, **params):
        return self._record("list_r2_buckets", account_id, **params) or {}

    async def query_d1_database(self, account_id, database_id, sql, params=None):
        return self._record("query_d1_database", account_id, database_id, sql, params=params)

    async def list_zones(self, account_id, **params):
        return self._record("list_zones", account_id, **params) or []

    async def list_dns_records(self, zone_id, **params):
        self._record("list_dns_records", zone_id, **params)
        return self.dns_records


class RecordingServer:
    def __init__(self):
        self.tools = {}

    def tool(self, name, description=None):
        def decorator(fn):
            if name in self.tools:
                raise ValueError(f"Tool {name!r} registered twice")
            self.tools[name] = fn
            return fn
        return decorator

    @property
    def tool_names(self):
        return list(self.tools)


def payload(result):
    """Decode the JSON body of a success envelope."""
    assert len(result) == 1
    return json.loads(result[0].text)


@pytest.fixture
def single_account():
    return [{"id": "acc-1", "name": "Only Account"}]


@pytest.fixture
def two_accounts():
    return [
        {"id": "acc-b", "name": "Beta"},
        {"id": "acc-a", "name": "Alpha"},
    ]


@pytest.fixture
def recording_server():
    return RecordingServer()


@pytest.fixture
def make_context():
    def _make(accounts=None, account_id=None, error=None):
        client = FakeCloudflareClient(accounts=accounts, error=error)
        return PluginContext(client, api_token="test-token", account_id=account_id)
    return _make


@pytest.fixture
def auth_error():
    return CloudflareAPIError("Authentication error (code 10000)", status_code=403)
