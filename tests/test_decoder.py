"""Tests for plaidkit.decoder."""

import pytest

from plaidkit.decoder import RESOURCE_SCHEMAS, handle_response, unwrap
from plaidkit.errors import PlaidAPIError
from plaidkit.models import AccountsResponse, PlaidError, RawResponse


def test_accounts_schema_registered():
    assert RESOURCE_SCHEMAS["accounts"] is AccountsResponse


def test_unknown_resource_raises():
    with pytest.raises(ValueError, match="transactions"):
        handle_response(RawResponse(status_code=200, body={}), "transactions")


def test_success_body_decodes_to_schema(accounts_body):
    result = handle_response(RawResponse(status_code=200, body=accounts_body), "accounts")

    assert isinstance(result, AccountsResponse)
    assert result.request_id == "qk5Bxes3gDfv4F2"
    assert result.accounts[1].owners is None
    assert result.accounts[1].balances.limit == 2000.0


def test_transport_error_decodes_to_plaid_error():
    raw = RawResponse(transport_error="Read timed out", transport_error_type="ReadTimeout")

    result = handle_response(raw, "accounts")

    assert isinstance(result, PlaidError)
    assert result.error_type == "TRANSPORT_ERROR"
    assert result.error_code == "ReadTimeout"
    assert result.error_message == "Read timed out"
    assert result.status_code is None


def test_api_error_body_maps_field_for_field():
    body = {
        "display_message": None,
        "error_code": "INVALID_ACCESS_TOKEN",
        "error_message": "provided access token is in an invalid format",
        "error_type": "INVALID_INPUT",
        "request_id": "m8MDnv9okwxFNBV",
        "causes": [],
        "status": 400,
        "documentation_url": "https://plaid.com/docs/errors/invalid-input/#invalid_access_token",
        "suggested_action": None,
        "environment": "sandbox",
    }

    result = handle_response(RawResponse(status_code=400, body=body), "accounts")

    assert isinstance(result, PlaidError)
    assert not isinstance(result, AccountsResponse)
    assert result.error_type == "INVALID_INPUT"
    assert result.error_code == "INVALID_ACCESS_TOKEN"
    assert result.request_id == "m8MDnv9okwxFNBV"
    assert result.status_code == 400
    assert result.model_dump()["environment"] == "sandbox"


def test_non_json_error_body_uses_text():
    result = handle_response(RawResponse(status_code=503, text="Service Unavailable"), "accounts")

    assert result.error_type == "API_ERROR"
    assert result.error_message == "Service Unavailable"
    assert result.status_code == 503


def test_empty_error_body_uses_status():
    result = handle_response(RawResponse(status_code=502), "accounts")

    assert result.error_message == "HTTP 502"


def test_error_body_with_unexpected_types_is_kept():
    body = {"error_type": "RATE_LIMIT_EXCEEDED", "error_code": 429, "error_message": "too many requests", "request_id": "req-x"}

    result = handle_response(RawResponse(status_code=429, body=body), "accounts")

    assert isinstance(result, PlaidError)
    assert result.error_type == "RATE_LIMIT_EXCEEDED"
    assert result.error_code == 429
    assert result.error_message == "too many requests"
    assert result.request_id == "req-x"
    assert result.status_code == 429


def test_error_body_with_unexpected_causes_keeps_request_id():
    body = {"error_type": "INVALID_REQUEST", "causes": {"item_id": "a"}, "request_id": "r", "environment": "sandbox"}

    result = handle_response(RawResponse(status_code=400, body=body), "accounts")

    assert result.error_type == "INVALID_REQUEST"
    assert result.causes == {"item_id": "a"}
    assert result.request_id == "r"
    assert result.status_code == 400
    assert result.model_dump()["environment"] == "sandbox"


def test_success_body_that_does_not_validate_is_decode_error():
    body = {"accounts": "not-a-list", "request_id": "req9"}

    result = handle_response(RawResponse(status_code=200, body=body), "accounts")

    assert isinstance(result, PlaidError)
    assert result.error_type == "DECODE_ERROR"
    assert result.request_id == "req9"
    assert result.status_code == 200


def test_success_status_with_non_json_body_is_decode_error():
    result = handle_response(RawResponse(status_code=200, text="OK"), "accounts")

    assert isinstance(result, PlaidError)
    assert result.error_type == "DECODE_ERROR"


def test_unwrap_returns_success():
    response = AccountsResponse(request_id="req1")

    assert unwrap(response) is response


def test_unwrap_raises_for_error():
    error = PlaidError(error_type="ITEM_ERROR", error_code="ITEM_LOGIN_REQUIRED", error_message="login required")

    with pytest.raises(PlaidAPIError) as exc_info:
        unwrap(error)

    assert exc_info.value.error is error
    assert str(exc_info.value) == "ITEM_ERROR ITEM_LOGIN_REQUIRED: login required"
