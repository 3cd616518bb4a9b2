"""Exceptions raised by plaidkit."""

from typing import Iterable


class PlaidKitError(Exception):
    """Base exception for plaidkit."""

    pass


class MissingCredentialsError(PlaidKitError):
    """Raised when a call cannot proceed because credentials are not configured."""

    def __init__(self, missing: Iterable[str]):
        self.missing = tuple(missing)
        super().__init__(
            f"Missing Plaid credentials: {', '.join(self.missing)}. "
            "Pass them in the call config or run 'plaidkit auth'."
        )


class PlaidAPIError(PlaidKitError):
    """Raised by ``unwrap`` when a call returned a Plaid error result."""

    def __init__(self, error):
        self.error = error
        code = f" {error.error_code}" if error.error_code else ""
        super().__init__(f"{error.error_type or 'API_ERROR'}{code}: {error.error_message}")
