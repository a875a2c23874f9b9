"""HTTP client to the charging station REST backend."""

import httpx
from fastapi import Request
from loguru import logger

from chargepoint_console.config import settings

__all__ = ["create_backend_client", "get_backend_client"]


async def _log_request(request: httpx.Request) -> None:
    logger.debug("Backend request", method=request.method, url=str(request.url))


async def _log_response(response: httpx.Response) -> None:
    logger.debug(
        "Backend response",
        method=response.request.method,
        url=str(response.request.url),
        status=response.status_code,
    )


def create_backend_client(
    base_url: str | None = None,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Create the async client every backend call goes through.

    The client carries no timeout unless ``REQUEST_TIMEOUT`` is configured, and
    no retry policy: a failed call is reported once and left to the caller.

    Args:
        base_url: Backend base URL. Defaults to the configured ``backend_url``.
        transport: Optional transport, e.g. ``httpx.ASGITransport`` in tests.

    Returns:
        An ``httpx.AsyncClient`` that must be closed by the owner.
    """
    return httpx.AsyncClient(
        base_url=base_url or settings.backend_url,
        timeout=settings.request_timeout,
        headers={"Accept": "application/json"},
        event_hooks={"request": [_log_request], "response": [_log_response]},
        transport=transport,
    )


def get_backend_client(request: Request) -> httpx.AsyncClient:
    """FastAPI dependency returning the client opened in the app lifespan."""
    return request.app.state.backend_client
