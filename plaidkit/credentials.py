"""Credential storage using the system keyring, with environment fallback."""

import os
from pathlib import Path
from typing import Optional

import keyring
from dotenv import load_dotenv
from keyring.errors import KeyringError

from plaidkit import paths
from plaidkit.logger import get_logger
from plaidkit.models.credentials import PlaidClientId, PlaidSecret

logger = get_logger("plaidkit.credentials")

# Keyring service name
SERVICE_NAME = "plaidkit"

KEY_CLIENT_ID = "client_id"
KEY_SECRET = "secret"
KEY_PUBLIC_KEY = "public_key"

# Credential key names and their validation models
CREDENTIALS = {
    KEY_CLIENT_ID: PlaidClientId,
    KEY_SECRET: PlaidSecret,
    KEY_PUBLIC_KEY: None,  # Legacy key, format not enforced
}

ENV_PREFIX = "PLAID_"


def load_env(env_path: Optional[Path] = None) -> None:
    """Load PLAID_* variables from a .env file without overriding the environment."""
    load_dotenv(env_path or paths.get_default_env_path(), override=False)


def get(key: str) -> Optional[str]:
    """Get a credential from keyring, falling back to the PLAID_<KEY> env var."""
    try:
        value = keyring.get_password(SERVICE_NAME, key)
    except KeyringError as e:
        logger.debug(f"Keyring unavailable for '{key}': {e}")
        value = None

    if value:
        return value

    return os.getenv(ENV_PREFIX + key.upper())


def store_credential(key: str, value: str) -> bool:
    """Store a credential in keyring with validation."""
    if key not in CREDENTIALS:
        raise ValueError(f"Unknown credential: {key}")
    if not value:
        return True

    # Let Pydantic ValidationError propagate
    model_class = CREDENTIALS[key]
    if model_class:
        model_class(value=value)

    keyring.set_password(SERVICE_NAME, key, value)
    return True


def mask(value: Optional[str], show_chars: int = 4) -> str:
    """Mask a credential value for display."""
    if value is None:
        return "<not set>"

    if len(value) <= show_chars:
        return "*" * len(value)

    return "*" * (len(value) - show_chars) + value[-show_chars:]


def set_client_id(client_id: str) -> bool:
    """Set Plaid client ID with validation."""
    return store_credential(KEY_CLIENT_ID, client_id)


def set_secret(secret: str) -> bool:
    """Set Plaid secret with validation."""
    return store_credential(KEY_SECRET, secret)
