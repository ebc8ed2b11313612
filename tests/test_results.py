"""
Tests for the tool result envelope: success JSON, error text and the
missing-account sentinel.  Building an error result must never raise.
"""

import json

from mcp.types import TextContent

from cloudflare_mcp.core.cloudflare_client import CloudflareAPIError
from cloudflare_mcp.core.results import (
    MISSING_ACCOUNT_ID_MESSAGE,
    create_error_result,
    create_tool_result,
    missing_account_id_result,
)


def test_success_round_trips_as_json():
    result = create_tool_result({"a": 1})

    assert len(result) == 1
    assert isinstance(result[0], TextContent)
    assert result[0].type == "text"
    assert json.loads(result[0].text) == {"a": 1}


def test_success_accepts_any_json_value():
    assert json.loads(create_tool_result(None)[0].text) is None
    assert json.loads(create_tool_result([1, "two"])[0].text) == [1, "two"]


def test_error_uses_exception_message():
    result = create_error_result(ValueError("boom"), "listing X")
    assert result[0].text == "Error listing X: boom"


def test_error_prefers_message_attribute():
    error = CloudflareAPIError("Authentication error (code 10000)", status_code=403)
    result = create_error_result(error, "listing accounts")
    assert result[0].text == "Error listing accounts: Authentication error (code 10000)"


def test_error_from_mapping_with_message():
    result = create_error_result({"message": "bad zone"}, "fetching zone details")
    assert result[0].text == "Error fetching zone details: bad zone"


def test_error_stringifies_non_exceptions():
    assert create_error_result(None, "x")[0].text == "Error x: None"
    assert create_error_result("plain text", "x")[0].text == "Error x: plain text"
    assert create_error_result(42, "x")[0].text == "Error x: 42"


def test_error_never_raises():
    class Unprintable:
        def __str__(self):
            raise RuntimeError("no")

    result = create_error_result(Unprintable(), "x")
    assert result[0].text == "Error x: <unprintable Unprintable>"


def test_error_survives_raising_message_property():
    class ExplodingMessage(Exception):
        @property
        def message(self):
            raise RuntimeError("message getter exploded")

    result = create_error_result(ExplodingMessage("fallback text"), "x")
    assert result[0].text == "Error x: fallback text"


def test_error_survives_broken_mapping():
    class BrokenMapping(dict):
        def get(self, key, default=None):
            raise KeyError(key)

    result = create_error_result(BrokenMapping(), "x")
    assert result[0].text == "Error x: {}"


def test_success_and_error_have_the_same_shape():
    ok = create_tool_result({"a": 1})
    failed = create_error_result(ValueError("boom"), "doing")
    assert type(ok) is type(failed)
    assert [type(c) for c in ok] == [type(c) for c in failed]


def test_missing_account_sentinel():
    result = missing_account_id_result()
    assert result[0].text == MISSING_ACCOUNT_ID_MESSAGE
    assert "accounts_list" in result[0].text
    assert "set_active_account" in result[0].text
    assert missing_account_id_result() is not result
