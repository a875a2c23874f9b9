"""Session identity router."""

from typing import Annotated

import httpx
from fastapi import APIRouter, Depends, Response, status

from chargepoint_console.backend.client import get_backend_client
from chargepoint_console.common.exceptions import BackendUnavailableError

from .cache import IdentityCache, get_current_user, get_identity_cache
from .schemas import SessionIdentity

__all__ = ["router"]


router = APIRouter(tags=["Session"])


@router.get("", summary="Get the current user")
async def get_me(
    client: Annotated[httpx.AsyncClient, Depends(get_backend_client)],
    cache: Annotated[IdentityCache, Depends(get_identity_cache)],
) -> SessionIdentity:
    """Return the identity of the session user.

    Raises:
        BackendUnavailableError: If the backend did not return an identity.
    """
    identity = await get_current_user(client, cache)
    if identity is None:
        raise BackendUnavailableError(cache.path)
    return identity


@router.delete(
    "/cache",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Forget the cached current user",
)
async def invalidate_me(
    cache: Annotated[IdentityCache, Depends(get_identity_cache)],
) -> Response:
    """Drop the cached identity so the next request fetches it again."""
    cache.invalidate()
    return Response(status_code=status.HTTP_204_NO_CONTENT)
