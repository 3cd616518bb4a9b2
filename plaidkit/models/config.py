"""Configuration models and resolution for plaidkit."""

from pathlib import Path
from typing import Any, Mapping, Optional, Tuple, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator

from plaidkit import credentials, paths
from plaidkit.errors import MissingCredentialsError

TLS_VERSIONS = ("TLSv1", "TLSv1.1", "TLSv1.2", "TLSv1.3")

REQUIRED_CREDENTIALS = ("client_id", "secret")


class HttpOptions(BaseModel):
    """HTTP transport options for a Plaid call."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    timeout: float = Field(10.0, gt=0, description="Connect timeout in seconds")
    recv_timeout: float = Field(30.0, gt=0, description="Read timeout in seconds")
    ssl_versions: Optional[Tuple[str, ...]] = Field(None, description="Allowed TLS versions, e.g. ('TLSv1.2',)")

    @field_validator('ssl_versions')
    @classmethod
    def validate_ssl_versions(cls, v):
        if v is None:
            return None
        if not v:
            raise ValueError("ssl_versions must name at least one TLS version")
        unknown = [version for version in v if version not in TLS_VERSIONS]
        if unknown:
            raise ValueError(f"Unsupported TLS versions {unknown}; expected any of {list(TLS_VERSIONS)}")
        return v

    @property
    def requests_timeout(self) -> Tuple[float, float]:
        """(connect, read) timeout tuple as accepted by requests."""
        return (self.timeout, self.recv_timeout)


class PlaidConfig(BaseModel):
    """Plaid credentials, endpoint and transport settings.

    Process-wide defaults are built once (directly or with ``load``) and passed
    to the client. Per-call overrides are merged in with ``resolve``.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    client_id: Optional[str] = None
    secret: Optional[str] = None
    public_key: Optional[str] = None
    environment: str = Field("development", pattern=r"^(sandbox|development|production)$")
    root_uri: Optional[str] = None
    http_options: HttpOptions = Field(default_factory=HttpOptions)

    @property
    def base_url(self) -> str:
        """Root URI, derived from the environment when not set explicitly."""
        return self.root_uri or f"https://{self.environment}.plaid.com/"

    def resolve(self, overrides: Union["PlaidConfig", Mapping[str, Any], None] = None) -> "PlaidConfig":
        """Merge per-call overrides over these defaults.

        Overrides that are None are ignored. A partial ``http_options`` mapping
        only replaces the fields it names.

        Raises:
            MissingCredentialsError: If client_id or secret is still unset.
        """
        if isinstance(overrides, PlaidConfig):
            overrides = overrides.model_dump(exclude_unset=True)

        merged = self.model_dump(exclude_none=True)
        for key, value in (overrides or {}).items():
            if value is None:
                continue
            if key == "http_options":
                if isinstance(value, HttpOptions):
                    value = value.model_dump(exclude_unset=True)
                value = {**merged.get("http_options", {}), **value}
            merged[key] = value

        missing = [name for name in REQUIRED_CREDENTIALS if not merged.get(name)]
        if missing:
            raise MissingCredentialsError(missing)

        return PlaidConfig(**merged)

    @classmethod
    def load(cls, config_path: Optional[Path] = None) -> "PlaidConfig":
        """Load defaults from config.yml plus keyring (or PLAID_* env) credentials."""
        config_path = config_path or paths.get_default_config_path()

        settings = {}
        if config_path.exists():
            with open(config_path, 'r') as f:
                settings = yaml.safe_load(f) or {}

        credentials.load_env()
        for key in credentials.CREDENTIALS:
            value = credentials.get(key)
            if value:
                settings[key] = value

        return cls(**settings)
