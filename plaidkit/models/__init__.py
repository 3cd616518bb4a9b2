"""plaidkit data models for API requests, responses and configuration."""

from .accounts import (
    Account,
    AccountsRequest,
    AccountsRequestOptions,
    AccountsResponse,
    Address,
    AddressData,
    Balance,
    Email,
    Owner,
    PhoneNumber,
)
from .config import HttpOptions, PlaidConfig
from .error import PlaidError
from .item import Item
from .raw import RawResponse

__all__ = [
    "Account",
    "AccountsRequest",
    "AccountsRequestOptions",
    "AccountsResponse",
    "Address",
    "AddressData",
    "Balance",
    "Email",
    "Owner",
    "PhoneNumber",
    "HttpOptions",
    "PlaidConfig",
    "PlaidError",
    "Item",
    "RawResponse",
]
