"""Functions for the Plaid `accounts` endpoints."""

from typing import TYPE_CHECKING, Any, Mapping, Union

from plaidkit.decoder import handle_response
from plaidkit.models import AccountsRequest, AccountsResponse, HttpOptions, PlaidError

if TYPE_CHECKING:
    from plaidkit.client import ConfigOverrides, Params, PlaidClient

ENDPOINT = "accounts"


class Accounts:
    """accounts/get and accounts/balance/get."""

    def __init__(self, client: "PlaidClient"):
        self.client = client

    def get(self, params: "Params", config: "ConfigOverrides" = None) -> Union[AccountsResponse, PlaidError]:
        """Get account data associated with an Item.

        Params::

            {"access_token": "access-token"}
        """
        config = self.client.validate_cred(config)
        raw = self.client.make_request_with_cred("post", f"{ENDPOINT}/get", config, to_request(params))
        return handle_response(raw, ENDPOINT)

    def get_balance(self, params: "Params", config: "ConfigOverrides" = None) -> Union[AccountsResponse, PlaidError]:
        """Get real-time balances for accounts associated with an Item.

        Params::

            {"access_token": "access-token", "options": {"account_ids": ["account-id"]}}
        """
        config = self.client.validate_cred(config)
        raw = self.client.make_request_with_cred("post", f"{ENDPOINT}/balance/get", config, to_request(params))
        return handle_response(raw, ENDPOINT)

    def get_balance_with_http_options(
        self,
        params: "Params",
        http_options: Union[HttpOptions, Mapping[str, Any]],
        config: "ConfigOverrides" = None,
    ) -> Union[AccountsResponse, PlaidError]:
        """Get balances using ``http_options`` instead of the configured transport options.

        http_options::

            {"ssl_versions": ["TLSv1.2"], "timeout": 15, "recv_timeout": 30}
        """
        config = self.client.validate_cred(config)
        raw = self.client.make_request_with_cred_and_options(
            "post", f"{ENDPOINT}/balance/get", config, to_request(params), http_options
        )
        return handle_response(raw, ENDPOINT)


def to_request(params: "Params") -> AccountsRequest:
    if isinstance(params, AccountsRequest):
        return params
    if not isinstance(params, Mapping):
        params = params.model_dump(exclude_none=True)
    return AccountsRequest(**params)
