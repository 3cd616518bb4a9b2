"""plaidkit - typed client for the Plaid accounts endpoints."""

__version__ = "0.1.0"

from plaidkit.client import PlaidClient
from plaidkit.decoder import handle_response, unwrap
from plaidkit.errors import MissingCredentialsError, PlaidAPIError, PlaidKitError
from plaidkit.models import AccountsResponse, HttpOptions, PlaidConfig, PlaidError

__all__ = [
    "PlaidClient",
    "handle_response",
    "unwrap",
    "MissingCredentialsError",
    "PlaidAPIError",
    "PlaidKitError",
    "AccountsResponse",
    "HttpOptions",
    "PlaidConfig",
    "PlaidError",
]
