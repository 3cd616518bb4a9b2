"""Pydantic model for Plaid API error bodies."""

from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict


class PlaidError(BaseModel):
    """Plaid API error response.

    Fields follow Plaid's error object. Any additional fields in the body are
    kept as-is so the payload maps one-to-one.
    """

    model_config = ConfigDict(extra="allow")

    error_type: Optional[str] = None
    error_code: Optional[str] = None
    error_message: Optional[str] = None
    display_message: Optional[str] = None
    request_id: Optional[str] = None
    causes: Optional[List[Any]] = None
    status: Optional[int] = None
    documentation_url: Optional[str] = None
    suggested_action: Optional[str] = None
    status_code: Optional[int] = None  # HTTP status, None for transport failures
