"""Individual credential models for validation."""

from pydantic import BaseModel, Field


class PlaidClientId(BaseModel):
    """Plaid client ID."""
    value: str = Field(pattern=r"^[a-f0-9]{24}$")


class PlaidSecret(BaseModel):
    """Plaid API secret."""
    value: str = Field(pattern=r"^[a-f0-9]{30}$")

