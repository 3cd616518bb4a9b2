"""Undecoded HTTP result passed from the dispatcher to the decoder."""

from typing import Any, Optional

from pydantic import BaseModel


class RawResponse(BaseModel):
    """Raw outcome of one HTTP call."""

    status_code: Optional[int] = None
    body: Any = None  # Decoded JSON, None if the body was not JSON
    text: str = ""
    transport_error: Optional[str] = None
    transport_error_type: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status_code is not None and 200 <= self.status_code < 300
