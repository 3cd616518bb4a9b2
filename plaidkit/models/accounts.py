"""Pydantic models for the Plaid accounts endpoints.

Response models keep fields they do not declare, so newer Plaid fields
survive decoding and re-serialization.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from .item import Item


class Balance(BaseModel):
    """Account balance figures."""

    model_config = ConfigDict(extra="allow")

    available: Optional[float] = None
    current: Optional[float] = None
    limit: Optional[float] = None
    iso_currency_code: Optional[str] = None
    unofficial_currency_code: Optional[str] = None


class AddressData(BaseModel):
    model_config = ConfigDict(extra="allow")

    city: Optional[str] = None
    region: Optional[str] = None
    street: Optional[str] = None
    postal_code: Optional[str] = None
    country: Optional[str] = None


class Address(BaseModel):
    """Owner postal address."""

    model_config = ConfigDict(extra="allow")

    data: AddressData = Field(default_factory=AddressData)
    primary: bool = False


class Email(BaseModel):
    """Owner email address."""

    model_config = ConfigDict(extra="allow")

    data: Optional[str] = None
    primary: bool = False
    type: Optional[str] = None


class PhoneNumber(BaseModel):
    """Owner phone number."""

    model_config = ConfigDict(extra="allow")

    data: Optional[str] = None
    primary: bool = False
    type: Optional[str] = None


class Owner(BaseModel):
    """Account holder identity data."""

    model_config = ConfigDict(extra="allow")

    addresses: Optional[List[Address]] = None
    emails: Optional[List[Email]] = None
    names: Optional[List[str]] = None
    phone_numbers: Optional[List[PhoneNumber]] = None


class Account(BaseModel):
    """Plaid account record."""

    model_config = ConfigDict(extra="allow")

    account_id: Optional[str] = None
    balances: Optional[Balance] = None
    owners: Optional[List[Owner]] = None
    name: Optional[str] = None
    mask: Optional[str] = None
    official_name: Optional[str] = None
    type: Optional[str] = None
    subtype: Optional[str] = None
    verification_status: Optional[str] = None


class AccountsResponse(BaseModel):
    """Response body of accounts/get and accounts/balance/get."""

    model_config = ConfigDict(extra="allow")

    accounts: List[Account] = []
    item: Optional[Item] = None
    request_id: Optional[str] = None


class AccountsRequestOptions(BaseModel):
    model_config = ConfigDict(extra="allow")

    account_ids: Optional[List[str]] = None


class AccountsRequest(BaseModel):
    """Parameters for the accounts endpoints.

    Unknown keys are forwarded to Plaid unchanged.
    """

    model_config = ConfigDict(extra="allow")

    access_token: str = Field(..., min_length=1)
    options: Optional[AccountsRequestOptions] = None
