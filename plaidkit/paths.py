"""Path utilities for the plaidkit home directory."""

from pathlib import Path


def get_plaidkit_home() -> Path:
    """Get plaidkit home directory (~/.plaidkit/), creating it if needed."""
    home = Path.home() / ".plaidkit"
    home.mkdir(parents=True, exist_ok=True)
    return home


def get_default_config_path() -> Path:
    return get_plaidkit_home() / "config.yml"


def get_default_env_path() -> Path:
    return get_plaidkit_home() / ".env"
