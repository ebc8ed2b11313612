# =============================================================================
# core/cloudflare_client.py  -  Cloudflare API v4 Client
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   A thin async wrapper over the Cloudflare REST API v4.  Each method maps
#   to one endpoint and returns the "result" part of the v4 envelope:
#
#     {"success": true, "errors": [], "messages": [], "result": ...,
#      "result_info": {"page": 1, "per_page": 20, "total_pages": 3, ...}}
#
#   Methods that need paging metadata return the whole envelope instead.
#
# ERRORS:
#   Any HTTP status >= 400, or an envelope with "success": false, raises
#   CloudflareAPIError.  Transport failures (DNS, timeouts) surface as the
#   underlying httpx exceptions.  Nothing here retries; callers turn the
#   exceptions into error results.
#
# OPTIONAL PARAMETERS:
#   Every query parameter or body field that is None is dropped before the
#   request, so "not given" always means "use the provider's default".
# =============================================================================

import logging
from collections.abc import AsyncIterator
from typing import Any, Optional

import httpx

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.cloudflare.com/client/v4"
ACCOUNTS_PAGE_SIZE = 50


class CloudflareAPIError(Exception):
    """Raised when the Cloudflare API rejects a request."""

    def __init__(self, message: str, status_code: Optional[int] = None,
                 errors: Optional[list[dict]] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.errors = errors or []


def _compact(values: Optional[dict]) -> Optional[dict]:
    if values is None:
        return None
    return {key: value for key, value in values.items() if value is not None}


def _error_from_response(response: httpx.Response, payload: Any) -> CloudflareAPIError:
    errors = []
    if isinstance(payload, dict):
        errors = payload.get("errors") or []
    messages = [
        f"{err.get('message')} (code {err['code']})" if err.get("code") else str(err.get("message"))
        for err in errors
        if isinstance(err, dict) and err.get("message")
    ]
    message = "; ".join(messages) or f"HTTP {response.status_code}: {response.reason_phrase}"
    return CloudflareAPIError(message, status_code=response.status_code, errors=errors)


class CloudflareClient:
    """Async client for the Cloudflare v4 API using a bearer API token."""

    def __init__(
        self,
        api_token: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self._http = httpx.AsyncClient(
            base_url=base_url,
            timeout=timeout,
            transport=transport,
            headers={
                "Authorization": f"Bearer {api_token}",
                "Content-Type": "application/json",
                "Accept": "application/json",
            },
        )

    def __repr__(self) -> str:
        return f"CloudflareClient(base_url={str(self._http.base_url)!r})"

    async def aclose(self) -> None:
        await self._http.aclose()

    async def __aenter__(self) -> "CloudflareClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    # -------------------------------------------------------------------------
    # Request plumbing
    # -------------------------------------------------------------------------
    async def _send(
        self,
        method: str,
        path: str,
        params: Optional[dict] = None,
        json_body: Optional[dict] = None,
    ) -> httpx.Response:
        logger.debug("Cloudflare API %s %s", method, path)
        response = await self._http.request(
            method,
            path,
            params=_compact(params),
            json=_compact(json_body),
        )
        if response.status_code >= 400:
            try:
                payload = response.json()
            except ValueError:
                payload = None
            raise _error_from_response(response, payload)
        return response

    async def _request(
        self,
        method: str,
        path: str,
        params: Optional[dict] = None,
        json_body: Optional[dict] = None,
    ) -> dict:
        """Send a request and return the decoded v4 envelope."""
        response = await self._send(method, path, params=params, json_body=json_body)
        if not response.content:
            return {"success": True, "result": None}
        payload = response.json()
        if isinstance(payload, dict) and payload.get("success") is False:
            raise _error_from_response(response, payload)
        return payload

    async def _result(self, method: str, path: str, **kwargs) -> Any:
        envelope = await self._request(method, path, **kwargs)
        return envelope.get("result")

    # -------------------------------------------------------------------------
    # Accounts
    # -------------------------------------------------------------------------
    async def list_accounts(self) -> AsyncIterator[dict]:
        """Yield every account visible to the token, following pagination."""
        page = 1
        while True:
            envelope = await self._request(
                "GET", "/accounts", params={"page": page, "per_page": ACCOUNTS_PAGE_SIZE}
            )
            accounts = envelope.get("result") or []
            for account in accounts:
                yield account

            total_pages = (envelope.get("result_info") or {}).get("total_pages")
            if not accounts or total_pages is None or page >= total_pages:
                break
            page += 1

    # -------------------------------------------------------------------------
    # Workers
    # -------------------------------------------------------------------------
    async def list_worker_scripts(self, account_id: str) -> list[dict]:
        return await self._result("GET", f"/accounts/{account_id}/workers/scripts") or []

    async def get_worker_script(self, account_id: str, script_name: str) -> str:
        response = await self._send(
            "GET", f"/accounts/{account_id}/workers/scripts/{script_name}"
        )
        return response.text

    async def delete_worker_script(self, account_id: str, script_name: str) -> Any:
        return await self._result("DELETE", f"/accounts/{account_id}/workers/scripts/{script_name}")

    # -------------------------------------------------------------------------
    # Workers KV
    # -------------------------------------------------------------------------
    async def list_kv_namespaces(
        self,
        account_id: str,
        direction: Optional[str] = None,
        order: Optional[str] = None,
        page: Optional[int] = None,
        per_page: Optional[int] = None,
    ) -> list[dict]:
        params = {"direction": direction, "order": order, "page": page, "per_page": per_page}
        return await self._result(
            "GET", f"/accounts/{account_id}/storage/kv/namespaces", params=params
        ) or []

    async def create_kv_namespace(self, account_id: str, title: str) -> Any:
        return await self._result(
            "POST", f"/accounts/{account_id}/storage/kv/namespaces", json_body={"title": title}
        )

    async def get_kv_namespace(self, account_id: str, namespace_id: str) -> Any:
        return await self._result(
            "GET", f"/accounts/{account_id}/storage/kv/namespaces/{namespace_id}"
        )

    async def update_kv_namespace(self, account_id: str, namespace_id: str, title: str) -> Any:
        return await self._result(
            "PUT",
            f"/accounts/{account_id}/storage/kv/namespaces/{namespace_id}",
            json_body={"title": title},
        )

    async def delete_kv_namespace(self, account_id: str, namespace_id: str) -> Any:
        return await self._result(
            "DELETE", f"/accounts/{account_id}/storage/kv/namespaces/{namespace_id}"
        )

    # -------------------------------------------------------------------------
    # R2
    # -------------------------------------------------------------------------
    async def list_r2_buckets(
        self,
        account_id: str,
        cursor: Optional[str] = None,
        direction: Optional[str] = None,
        name_contains: Optional[str] = None,
        per_page: Optional[int] = None,
        start_after: Optional[str] = None,
    ) -> dict:
        params = {
            "cursor": cursor,
            "direction": direction,
            "name_contains": name_contains,
            "per_page": per_page,
            "start_after": start_after,
        }
        return await self._result("GET", f"/accounts/{account_id}/r2/buckets", params=params) or {}

    async def create_r2_bucket(self, account_id: str, name: str) -> Any:
        return await self._result(
            "POST", f"/accounts/{account_id}/r2/buckets", json_body={"name": name}
        )

    async def get_r2_bucket(self, account_id: str, name: str) -> Any:
        return await self._result("GET", f"/accounts/{account_id}/r2/buckets/{name}")

    async def delete_r2_bucket(self, account_id: str, name: str) -> Any:
        return await self._result("DELETE", f"/accounts/{account_id}/r2/buckets/{name}")

    # -------------------------------------------------------------------------
    # D1
    # -------------------------------------------------------------------------
    async def list_d1_databases(
        self,
        account_id: str,
        name: Optional[str] = None,
        page: Optional[int] = None,
        per_page: Optional[int] = None,
    ) -> dict:
        """Returns the full envelope; callers need ``result_info`` for paging."""
        params = {"name": name, "page": page, "per_page": per_page}
        return await self._request("GET", f"/accounts/{account_id}/d1/database", params=params)

    async def create_d1_database(
        self, account_id: str, name: str, primary_location_hint: Optional[str] = None
    ) -> Any:
        body = {"name": name, "primary_location_hint": primary_location_hint}
        return await self._result("POST", f"/accounts/{account_id}/d1/database", json_body=body)

    async def get_d1_database(self, account_id: str, database_id: str) -> Any:
        return await self._result("GET", f"/accounts/{account_id}/d1/database/{database_id}")

    async def delete_d1_database(self, account_id: str, database_id: str) -> Any:
        return await self._result("DELETE", f"/accounts/{account_id}/d1/database/{database_id}")

    async def query_d1_database(
        self, account_id: str, database_id: str, sql: str, params: Optional[list[str]] = None
    ) -> Any:
        return await self._result(
            "POST",
            f"/accounts/{account_id}/d1/database/{database_id}/query",
            json_body={"sql": sql, "params": params},
        )

    # -------------------------------------------------------------------------
    # Zones & DNS
    # -------------------------------------------------------------------------
    async def list_zones(
        self,
        account_id: str,
        name: Optional[str] = None,
        status: Optional[str] = None,
        page: Optional[int] = None,
        per_page: Optional[int] = None,
        order: Optional[str] = None,
        direction: Optional[str] = None,
    ) -> list[dict]:
        params = {
            "account.id": account_id,
            "name": name,
            "status": status,
            "page": page,
            "per_page": per_page,
            "order": order,
            "direction": direction,
        }
        return await self._result("GET", "/zones", params=params) or []

    async def get_zone(self, zone_id: str) -> Any:
        return await self._result("GET", f"/zones/{zone_id}")

    async def list_dns_records(
        self,
        zone_id: str,
        record_type: Optional[str] = None,
        page: Optional[int] = None,
        per_page: Optional[int] = None,
    ) -> list[dict]:
        params = {"type": record_type, "page": page, "per_page": per_page}
        return await self._result("GET", f"/zones/{zone_id}/dns_records", params=params) or []
