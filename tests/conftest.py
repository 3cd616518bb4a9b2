"""Shared fixtures: isolated home directory, default config, mocked HTTP responses."""

from unittest.mock import Mock, patch

import pytest

from plaidkit.client import PlaidClient
from plaidkit.models import PlaidConfig

CLIENT_ID = "5f2b3c4d5e6f7a8b9c0d1e2f"
SECRET = "0123456789abcdef0123456789abcd"


@pytest.fixture(autouse=True)
def isolated_home(tmp_path):
    with patch("plaidkit.paths.get_plaidkit_home", return_value=tmp_path):
        yield tmp_path


@pytest.fixture
def defaults():
    return PlaidConfig(client_id=CLIENT_ID, secret=SECRET, environment="sandbox")


@pytest.fixture
def client(defaults):
    return PlaidClient(defaults)


@pytest.fixture
def make_response():
    """Build a mock requests.Response."""
    def _make(status_code=200, json_body=None, text=""):
        response = Mock()
        response.status_code = status_code
        response.text = text
        if json_body is None:
            response.json.side_effect = ValueError("No JSON object could be decoded")
        else:
            response.json.return_value = json_body
        return response
    return _make


@pytest.fixture
def accounts_body():
    """Realistic accounts/get response from the Plaid sandbox."""
    return {
        "accounts": [
            {
                "account_id": "BxBXxLj1m4HMXBm9WZZmCWVbPjX16EHwv99vp",
                "balances": {
                    "available": 100.0,
                    "current": 110.0,
                    "limit": None,
                    "iso_currency_code": "USD",
                    "unofficial_currency_code": None,
                },
                "mask": "0000",
                "name": "Plaid Checking",
                "official_name": "Plaid Gold Standard 0% Interest Checking",
                "subtype": "checking",
                "type": "depository",
                "owners": [
                    {
                        "names": ["Alberta Bobbeth Charleson"],
                        "addresses": [
                            {
                                "data": {
                                    "city": "Malakoff",
                                    "region": "NY",
                                    "street": "2992 Cameron Road",
                                    "postal_code": "14236",
                                    "country": "US",
                                },
                                "primary": True,
                            }
                        ],
                        "emails": [
                            {"data": "accountholder0@example.com", "primary": True, "type": "primary"}
                        ],
                        "phone_numbers": [
                            {"data": "1112223333", "primary": False, "type": "home"}
                        ],
                    }
                ],
            },
            {
                "account_id": "dVzbVMLjrxTnLjX4G66XUp5GLklm4oiZy88yK",
                "balances": {
                    "available": None,
                    "current": 410.0,
                    "limit": 2000.0,
                    "iso_currency_code": "USD",
                    "unofficial_currency_code": None,
                },
                "mask": "3333",
                "name": "Plaid Credit Card",
                "official_name": "Plaid Diamond 12.5% APR Interest Credit Card",
                "subtype": "credit card",
                "type": "credit",
            },
        ],
        "item": {
            "item_id": "eVBnVMp7zdTJLkRNr33Rs6zr7KNJqBFL9DrE6",
            "institution_id": "ins_3",
            "webhook": "https://www.genericwebhookurl.com/webhook",
            "error": None,
            "available_products": ["balance", "identity"],
            "billed_products": ["auth", "transactions"],
            "consent_expiration_time": None,
        },
        "request_id": "qk5Bxes3gDfv4F2",
    }
