"""Plaid API client: credential resolution and request dispatch."""

from typing import Any, Dict, Mapping, Optional, Union

import requests
from pydantic import BaseModel

from plaidkit import __version__
from plaidkit.accounts import Accounts
from plaidkit.logger import get_logger
from plaidkit.models import HttpOptions, PlaidConfig, RawResponse
from plaidkit.transport import build_session

logger = get_logger("plaidkit.client")

USER_AGENT = f"plaidkit/{__version__}"

Params = Union[Mapping[str, Any], BaseModel]
ConfigOverrides = Union[PlaidConfig, Mapping[str, Any], None]


class PlaidClient:
    """Plaid API client bound to a read-only default configuration."""

    def __init__(self, defaults: Optional[PlaidConfig] = None):
        self.defaults = defaults or PlaidConfig()
        self.session = build_session(self.defaults.http_options.ssl_versions)
        self.accounts = Accounts(self)

    def validate_cred(self, config: ConfigOverrides = None) -> PlaidConfig:
        """Resolve per-call config against the defaults. Raises MissingCredentialsError."""
        return self.defaults.resolve(config)

    def make_request_with_cred(self, method: str, endpoint: str, config: PlaidConfig, params: Params) -> RawResponse:
        """Send ``params`` plus credentials to ``endpoint`` using the config's transport options."""
        return self._make_request(method, endpoint, config, params, config.http_options)

    def make_request_with_cred_and_options(
        self,
        method: str,
        endpoint: str,
        config: PlaidConfig,
        params: Params,
        http_options: Union[HttpOptions, Mapping[str, Any]],
    ) -> RawResponse:
        """Like make_request_with_cred, with ``http_options`` replacing the config's."""
        if not isinstance(http_options, HttpOptions):
            http_options = HttpOptions(**http_options)
        return self._make_request(method, endpoint, config, params, http_options)

    def _make_request(
        self,
        method: str,
        endpoint: str,
        config: PlaidConfig,
        params: Params,
        http_options: HttpOptions,
    ) -> RawResponse:
        url = f"{config.base_url.rstrip('/')}/{endpoint.lstrip('/')}"
        body = {**params_to_body(params), "client_id": config.client_id, "secret": config.secret}
        headers = {"Content-Type": "application/json", "User-Agent": USER_AGENT}

        logger.debug(f"{method.upper()} {url}")
        try:
            if http_options.ssl_versions == self.defaults.http_options.ssl_versions:
                response = self.session.request(
                    method.upper(), url, json=body, headers=headers, timeout=http_options.requests_timeout
                )
            else:
                with build_session(http_options.ssl_versions) as session:
                    response = session.request(
                        method.upper(), url, json=body, headers=headers, timeout=http_options.requests_timeout
                    )
        except requests.RequestException as e:
            logger.warning(f"Transport error calling {endpoint}: {e}")
            return RawResponse(transport_error=str(e), transport_error_type=type(e).__name__)

        logger.debug(f"{method.upper()} {url} -> {response.status_code}")
        return to_raw_response(response)


def params_to_body(params: Params) -> Dict[str, Any]:
    """Request parameters as a JSON body dict, with None values dropped."""
    if isinstance(params, BaseModel):
        return params.model_dump(exclude_none=True)
    return {key: value for key, value in dict(params or {}).items() if value is not None}


def to_raw_response(response: requests.Response) -> RawResponse:
    try:
        return RawResponse(status_code=response.status_code, body=response.json())
    except ValueError:
        return RawResponse(status_code=response.status_code, text=response.text)
