"""Create and update requests with a uniform success or error result."""

from typing import Any

import httpx
from loguru import logger

from chargepoint_console.backend.codec import decode_response, encode_body
from chargepoint_console.common import (
    Diagnostic,
    ErrorMessage,
    Failure,
    Result,
    Success,
)
from chargepoint_console.config.errors import ErrorCode, ErrorNames

from .schemas import MutationKind, UpdateMethod

__all__ = ["create_element", "mutate", "update_element"]


_DEFAULT_MESSAGES = {
    MutationKind.CREATE: ErrorNames.CREATE_FAILED,
    MutationKind.UPDATE: ErrorNames.UPDATE_FAILED,
}


async def mutate[T](
    client: httpx.AsyncClient,
    kind: MutationKind,
    path: str,
    response_type: type[T],
    body: Any = None,  # noqa: ANN401
    *,
    method: UpdateMethod = "PATCH",
) -> Result[T, ErrorMessage]:
    """Send a create or update request and resolve it to one result branch.

    CREATE is a POST that always carries a JSON body. UPDATE uses ``method``
    and sends a body only when one is given. A 2xx answer decoded as
    ``response_type`` gives ``Success``; any other answer whose body is an
    ``ErrorMessage`` gives ``Failure`` with it. Everything else gives the
    default ``Failure`` naming ``path``, with the diagnostic attached.

    Args:
        client: Backend client.
        kind: Create or update.
        path: Target path.
        response_type: Expected type of a successful answer.
        body: Request body, a pydantic model or JSON-ready data.
        method: HTTP method of an update.

    Returns:
        ``Success`` with the decoded answer or ``Failure`` with an error message.

    Raises:
        ValueError: If a CREATE is requested without a body.
    """
    if kind is MutationKind.CREATE:
        if body is None:
            raise ValueError(f"Create request to {path} needs a body")
        http_method = "POST"
    else:
        http_method = method

    if body is None:
        response = await client.request(http_method, path)
    else:
        response = await client.request(http_method, path, json=encode_body(body))

    diagnostic: Diagnostic
    if response.is_success:
        result = decode_response(response, response_type)
        if isinstance(result, Success):
            logger.debug("Mutation succeeded", method=http_method, path=path)
            return result
        diagnostic = result.error
        logger.warning(
            "Unexpected response type received", method=http_method, path=path
        )
    else:
        error = decode_response(response, ErrorMessage)
        if isinstance(error, Success):
            logger.info(
                "Mutation rejected",
                method=http_method,
                path=path,
                status=response.status_code,
            )
            return Failure(error.value)
        diagnostic = Diagnostic(
            code=ErrorCode.TRANSPORT_ERROR,
            path=path,
            status=response.status_code,
            detail=error.error.detail,
        )
        logger.warning(
            "Mutation request failed",
            method=http_method,
            path=path,
            status=response.status_code,
        )

    message = _DEFAULT_MESSAGES[kind].format(path=path)
    return Failure(ErrorMessage(message=message), diagnostic=diagnostic)


async def create_element[T](
    client: httpx.AsyncClient,
    path: str,
    body: Any,  # noqa: ANN401
    response_type: type[T],
) -> Result[T, ErrorMessage]:
    """POST ``body`` to ``path``."""
    return await mutate(client, MutationKind.CREATE, path, response_type, body)


async def update_element[T](
    client: httpx.AsyncClient,
    method: UpdateMethod,
    path: str,
    response_type: type[T],
    body: Any = None,  # noqa: ANN401
) -> Result[T, ErrorMessage]:
    """PATCH or PUT ``path``, with ``body`` when given."""
    return await mutate(
        client, MutationKind.UPDATE, path, response_type, body, method=method
    )
