"""Fetch pages, listings and single elements from the backend."""

import httpx
from fastapi import status
from loguru import logger

from chargepoint_console.backend.codec import decode_response
from chargepoint_console.common import Diagnostic, Failure, Success
from chargepoint_console.config.errors import ErrorCode

from .query_builder import build_search_target
from .schemas import Page, SearchParameters

__all__ = [
    "get_all_elements",
    "get_element_by_id",
    "search_elements",
    "try_fetch",
    "try_get_all_elements",
    "try_get_element_by_id",
    "try_search_elements",
]


async def try_fetch[T](
    client: httpx.AsyncClient, target: str, response_type: type[T]
) -> Success[T] | Failure[Diagnostic]:
    """GET ``target`` and decode the body as ``response_type``.

    A non-success status and an undecodable body both resolve to ``Failure``
    and a warning in the log. Transport exceptions raised by ``httpx`` (for
    example an unreachable backend) propagate.

    Args:
        client: Backend client.
        target: Path, optionally with a query string.
        response_type: Expected body type.

    Returns:
        ``Success`` with the decoded body or ``Failure`` with a diagnostic.
    """
    response = await client.get(target)
    path = response.request.url.path

    if not response.is_success:
        code = (
            ErrorCode.NOT_FOUND
            if response.status_code == status.HTTP_404_NOT_FOUND
            else ErrorCode.TRANSPORT_ERROR
        )
        logger.warning(
            "Fetch failed", path=path, target=target, status=response.status_code
        )
        return Failure(
            Diagnostic(
                code=code,
                path=path,
                status=response.status_code,
                detail=response.reason_phrase,
            )
        )

    result = decode_response(response, response_type)
    if isinstance(result, Failure):
        logger.warning("Fetch returned an unexpected body", path=path, target=target)
    return result


async def try_search_elements[T](
    client: httpx.AsyncClient,
    path: str,
    item_type: type[T],
    params: SearchParameters | None = None,
) -> Success[Page[T]] | Failure[Diagnostic]:
    """Fetch one page of ``path`` with pagination, filters and sort."""
    return await try_fetch(client, build_search_target(path, params), Page[item_type])


async def try_get_all_elements[T](
    client: httpx.AsyncClient, path: str, item_type: type[T]
) -> Success[list[T]] | Failure[Diagnostic]:
    """Fetch the unpaginated listing at ``path``."""
    return await try_fetch(client, path, list[item_type])


async def try_get_element_by_id[T](
    client: httpx.AsyncClient, path: str, element_id: int | str, item_type: type[T]
) -> Success[T] | Failure[Diagnostic]:
    """Fetch the element at ``path/element_id``."""
    return await try_fetch(client, f"{path}/{element_id}", item_type)


async def search_elements[T](
    client: httpx.AsyncClient,
    path: str,
    item_type: type[T],
    params: SearchParameters | None = None,
) -> Page[T] | None:
    """Fetch one page of ``path``, ``None`` when the backend gave no page.

    Args:
        client: Backend client.
        path: Search endpoint, e.g. ``/api/user/search``.
        item_type: Type of the page items.
        params: Pagination, filters and sort. The bare path is requested
            when omitted.

    Returns:
        The page envelope exactly as the backend sent it, or ``None``.
    """
    result = await try_search_elements(client, path, item_type, params)
    return result.value if isinstance(result, Success) else None


async def get_all_elements[T](
    client: httpx.AsyncClient, path: str, item_type: type[T]
) -> list[T] | None:
    """Fetch the unpaginated listing at ``path``, ``None`` on failure."""
    result = await try_get_all_elements(client, path, item_type)
    return result.value if isinstance(result, Success) else None


async def get_element_by_id[T](
    client: httpx.AsyncClient, path: str, element_id: int | str, item_type: type[T]
) -> T | None:
    """Fetch one element, ``None`` when missing or undecodable."""
    result = await try_get_element_by_id(client, path, element_id, item_type)
    return result.value if isinstance(result, Success) else None
