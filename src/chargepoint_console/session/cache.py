"""Cache of the current session identity."""

import asyncio

import httpx
from fastapi import Request
from loguru import logger

from chargepoint_console.common import Success
from chargepoint_console.config import settings
from chargepoint_console.search.service import try_fetch

from .schemas import SessionIdentity

__all__ = ["IdentityCache", "get_current_user", "get_identity_cache"]


class IdentityCache:
    """Single entry cache of the identity returned by the backend.

    Only a successful fetch is stored; after a failure the next call fetches
    again. Concurrent first calls share one fetch. ``invalidate`` drops the
    entry, e.g. after a logout or a role change.
    """

    def __init__(self, path: str | None = None) -> None:
        """Initialize an empty cache.

        Args:
            path: Backend path of the identity, the configured
                ``current_user_path`` when omitted.
        """
        self.path = path or settings.current_user_path
        self._identity: SessionIdentity | None = None
        self._lock = asyncio.Lock()

    @property
    def cached(self) -> SessionIdentity | None:
        """Stored identity, without any network access."""
        return self._identity

    async def get_or_fetch(self, client: httpx.AsyncClient) -> SessionIdentity | None:
        """Return the stored identity or fetch it from the backend.

        Args:
            client: Backend client used on a cache miss.

        Returns:
            The identity, or ``None`` if the fetch failed.
        """
        if self._identity is not None:
            logger.debug("Session identity cache hit", user_id=self._identity.id)
            return self._identity

        async with self._lock:
            if self._identity is not None:
                return self._identity

            result = await try_fetch(client, self.path, SessionIdentity)
            if not isinstance(result, Success):
                logger.warning(
                    "Session identity unavailable",
                    path=self.path,
                    code=result.error.code,
                )
                return None

            self._identity = result.value
            logger.info(
                "Session identity cached",
                user_id=self._identity.id,
                role=self._identity.role,
            )
            return self._identity

    def invalidate(self) -> None:
        """Forget the stored identity."""
        if self._identity is not None:
            logger.info("Session identity invalidated", user_id=self._identity.id)
        self._identity = None


async def get_current_user(
    client: httpx.AsyncClient, cache: IdentityCache
) -> SessionIdentity | None:
    """Identity of the session user, fetched once per cache lifetime."""
    return await cache.get_or_fetch(client)


def get_identity_cache(request: Request) -> IdentityCache:
    """FastAPI dependency returning the cache opened in the app lifespan."""
    return request.app.state.identity_cache
