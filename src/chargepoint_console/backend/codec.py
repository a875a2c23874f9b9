"""Decode backend responses into typed values."""

from functools import lru_cache
from typing import Any

import httpx
from loguru import logger
from pydantic import BaseModel, TypeAdapter, ValidationError

from chargepoint_console.common import Diagnostic, Failure, Success
from chargepoint_console.config.errors import ErrorCode

__all__ = ["adapter_for", "decode_response", "encode_body"]


@lru_cache(maxsize=128)
def adapter_for[T](response_type: type[T]) -> TypeAdapter[T]:
    """Return a cached ``TypeAdapter`` for ``response_type``."""
    return TypeAdapter(response_type)


def decode_response[T](
    response: httpx.Response, response_type: type[T]
) -> Success[T] | Failure[Diagnostic]:
    """Decode a response body as ``response_type``.

    A body that is not JSON, is JSON ``null`` or does not match the expected
    shape yields a ``DECODE_ERROR`` diagnostic. Nothing is raised.

    Args:
        response: The backend response, whatever its status.
        response_type: Type the body must validate against.

    Returns:
        ``Success`` with the decoded value, or ``Failure`` with a diagnostic.
    """
    path = response.request.url.path

    try:
        payload = response.json()
    except ValueError as e:
        return _decode_failure(response, path, f"Body is not JSON: {e}")

    if payload is None:
        return _decode_failure(response, path, "Body is empty")

    try:
        value = adapter_for(response_type).validate_python(payload)
    except ValidationError as e:
        detail = f"{e.error_count()} validation error(s): {e.errors()[0]['msg']}"
        return _decode_failure(response, path, detail)

    return Success(value)


def encode_body(body: Any) -> Any:  # noqa: ANN401
    """Return the JSON-ready form of a request body, camelCase for models."""
    if isinstance(body, BaseModel):
        return body.model_dump(mode="json", by_alias=True, exclude_none=True)
    return body


def _decode_failure(
    response: httpx.Response, path: str, detail: str
) -> Failure[Diagnostic]:
    logger.debug("Undecodable backend body", path=path, detail=detail)
    return Failure(
        Diagnostic(
            code=ErrorCode.DECODE_ERROR,
            path=path,
            status=response.status_code,
            detail=detail,
        )
    )
