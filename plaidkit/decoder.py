"""Decode raw Plaid responses into typed results."""

from typing import Dict, Type, Union

from pydantic import BaseModel, ValidationError

from plaidkit.errors import PlaidAPIError
from plaidkit.logger import get_logger
from plaidkit.models import AccountsResponse, PlaidError, RawResponse

logger = get_logger("plaidkit.decoder")

# Resource tag -> success body model. Adding a resource only needs an entry here.
RESOURCE_SCHEMAS: Dict[str, Type[BaseModel]] = {
    "accounts": AccountsResponse,
}


def handle_response(raw: RawResponse, resource: str) -> Union[BaseModel, PlaidError]:
    """Decode ``raw`` as the ``resource`` schema, or as a PlaidError on failure.

    Transport failures, non-2xx responses and success bodies that do not match
    the schema all come back as PlaidError; nothing is raised for them.

    Raises:
        ValueError: If ``resource`` has no registered schema.
    """
    schema = RESOURCE_SCHEMAS.get(resource)
    if schema is None:
        raise ValueError(f"No response schema registered for resource '{resource}'")

    if raw.transport_error is not None:
        return PlaidError(
            error_type="TRANSPORT_ERROR",
            error_code=raw.transport_error_type,
            error_message=raw.transport_error,
        )

    if raw.ok:
        return decode_success(raw, schema, resource)

    return decode_error(raw)


def decode_success(raw: RawResponse, schema: Type[BaseModel], resource: str) -> Union[BaseModel, PlaidError]:
    if not isinstance(raw.body, dict):
        logger.warning(f"Non-JSON {resource} response body (HTTP {raw.status_code})")
        return PlaidError(
            error_type="DECODE_ERROR",
            error_message=f"Expected a JSON object for {resource}, got: {raw.text[:200]!r}",
            status_code=raw.status_code,
        )

    try:
        return schema.model_validate(raw.body)
    except ValidationError as e:
        logger.warning(f"Could not decode {resource} response: {e.error_count()} validation error(s)")
        request_id = raw.body.get("request_id")
        return PlaidError(
            error_type="DECODE_ERROR",
            error_message=str(e),
            request_id=request_id if isinstance(request_id, str) else None,
            status_code=raw.status_code,
        )


def decode_error(raw: RawResponse) -> PlaidError:
    if isinstance(raw.body, dict):
        fields = {**raw.body, "status_code": raw.status_code}
        try:
            error = PlaidError.model_validate(fields)
        except ValidationError as e:
            # Keep the payload as sent; only the mistyped fields stay unconverted
            logger.debug(f"Error body did not validate: {e.error_count()} validation error(s)")
            error = PlaidError.model_construct(**fields)
        logger.warning(f"Plaid error {error.error_type}/{error.error_code} (HTTP {raw.status_code}): {error.error_message}")
        return error

    return PlaidError(
        error_type="API_ERROR",
        error_message=raw.text or f"HTTP {raw.status_code}",
        status_code=raw.status_code,
    )


def unwrap(result: Union[BaseModel, PlaidError]) -> BaseModel:
    """Return a success result, or raise PlaidAPIError for a PlaidError."""
    if isinstance(result, PlaidError):
        raise PlaidAPIError(result)
    return result
