"""Generic resource router of the console gateway."""

from typing import Annotated, Any

import httpx
from fastapi import APIRouter, Body, Depends, Path, Query, status
from fastapi.responses import JSONResponse
from loguru import logger

from chargepoint_console.backend.client import get_backend_client
from chargepoint_console.common import Failure, Success
from chargepoint_console.common.exceptions import BackendUnavailableError
from chargepoint_console.config import settings
from chargepoint_console.config.errors import ErrorCode
from chargepoint_console.mutation import create_element, update_element
from chargepoint_console.search import (
    InvalidFilterError,
    SearchParameters,
    SearchSort,
    SortOrder,
    parse_filter_request,
    try_get_all_elements,
    try_get_element_by_id,
    try_search_elements,
)

from .exceptions import OperationNotSupportedError, ResourceNotFoundError
from .registry import ResourceDefinition, get_resource

__all__ = ["router"]


router = APIRouter(tags=["Resources"])

BackendClient = Annotated[httpx.AsyncClient, Depends(get_backend_client)]
ResourceName = Annotated[str, Path(description="Registered resource name")]


def _dump(value: Any) -> Any:  # noqa: ANN401
    if isinstance(value, list):
        return [_dump(item) for item in value]
    return value.model_dump(mode="json", by_alias=True)


def _require(resource: ResourceDefinition, allowed: bool, operation: str) -> None:
    if not allowed:
        raise OperationNotSupportedError(resource.name, operation)


@router.get("/{resource}", summary="Search a resource page")
async def search_resource(
    resource: ResourceName,
    client: BackendClient,
    page: Annotated[int, Query(ge=0, description="Page index, starts at 0")] = 0,
    size: Annotated[
        int | None, Query(ge=1, le=100, description="Items per page")
    ] = None,
    filter_request: Annotated[
        str | None,
        Query(alias="filter", description="Filters, e.g. name:`John`,age<`18`"),
    ] = None,
    sort_by: Annotated[str | None, Query(alias="sortBy")] = None,
    order: SortOrder = SortOrder.ASCENDING,
) -> dict[str, Any]:
    """Return one page of a resource, forwarded to the backend search.

    Raises:
        InvalidFilterError: If ``filter`` holds no valid filter.
        BackendUnavailableError: If the backend gave no page.
    """
    definition = get_resource(resource)
    _require(definition, definition.searchable, "search")

    filters = ()
    if filter_request:
        filters = tuple(parse_filter_request(filter_request, decoded=True))
        if not filters:
            raise InvalidFilterError(filter_request)

    params = SearchParameters(
        size=size or settings.page_size,
        page=page,
        filters=filters,
        sort=SearchSort(field=sort_by, direction=order) if sort_by else None,
    )

    result = await try_search_elements(
        client, definition.search_path, definition.model, params
    )
    if isinstance(result, Failure):
        raise BackendUnavailableError(result.error.path)

    logger.debug(
        "Resource page retrieved",
        resource=resource,
        page=page,
        items_count=len(result.value.data),
        total=result.value.total,
    )
    return _dump(result.value)


@router.get("/{resource}/all", summary="List a whole resource")
async def list_resource(
    resource: ResourceName, client: BackendClient
) -> list[dict[str, Any]]:
    """Return every element of a resource, without pagination."""
    definition = get_resource(resource)
    _require(definition, definition.listable, "listing")

    result = await try_get_all_elements(client, definition.all_path, definition.model)
    if isinstance(result, Failure):
        raise BackendUnavailableError(result.error.path)
    return _dump(result.value)


@router.get("/{resource}/{element_id}", summary="Get a resource element by ID")
async def get_resource_element(
    resource: ResourceName, element_id: int, client: BackendClient
) -> dict[str, Any]:
    """Return one element.

    Raises:
        ResourceNotFoundError: If the backend has no element with that ID.
        BackendUnavailableError: If the backend gave no usable answer.
    """
    definition = get_resource(resource)

    result = await try_get_element_by_id(
        client, definition.path, element_id, definition.model
    )
    if isinstance(result, Failure):
        if result.error.code == ErrorCode.NOT_FOUND:
            raise ResourceNotFoundError(resource, element_id)
        raise BackendUnavailableError(result.error.path)
    return _dump(result.value)


@router.post("/{resource}", summary="Create a resource element")
async def create_resource_element(
    resource: ResourceName,
    client: BackendClient,
    body: Annotated[dict[str, Any], Body()],
) -> JSONResponse:
    """Create an element; a rejection is answered with its error message."""
    definition = get_resource(resource)
    path = definition.create_path()
    _require(definition, path is not None, "creation")

    match await create_element(client, path, body, definition.model):
        case Success(value=created):
            return JSONResponse(_dump(created), status_code=status.HTTP_201_CREATED)
        case Failure(error=error):
            return JSONResponse(
                error.model_dump(), status_code=status.HTTP_400_BAD_REQUEST
            )


@router.patch("/{resource}/{element_id}", summary="Update a resource element")
async def update_resource_element(
    resource: ResourceName,
    element_id: int,
    client: BackendClient,
    body: Annotated[dict[str, Any] | None, Body()] = None,
) -> JSONResponse:
    """Update an element; a rejection is answered with its error message."""
    definition = get_resource(resource)
    path = definition.update_path(element_id)
    _require(definition, path is not None, "update")

    match await update_element(client, "PATCH", path, definition.model, body):
        case Success(value=updated):
            return JSONResponse(_dump(updated))
        case Failure(error=error):
            return JSONResponse(
                error.model_dump(), status_code=status.HTTP_400_BAD_REQUEST
            )
