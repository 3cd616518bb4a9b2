"""Pydantic model for Plaid Items."""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict

from .error import PlaidError


class Item(BaseModel):
    """A linked financial institution connection."""

    model_config = ConfigDict(extra="allow")

    item_id: Optional[str] = None
    institution_id: Optional[str] = None
    webhook: Optional[str] = None
    error: Optional[PlaidError] = None
    available_products: List[str] = []
    billed_products: List[str] = []
    consent_expiration_time: Optional[str] = None
