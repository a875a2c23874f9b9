"""Common test fixtures for the application."""

import os

os.environ.setdefault("ENV", "testing")

from collections.abc import AsyncGenerator, Callable

import httpx
import pytest
from stub_backend import BackendState, create_stub_backend

from chargepoint_console.app import app
from chargepoint_console.backend.client import (
    create_backend_client,
    get_backend_client,
)
from chargepoint_console.session.cache import IdentityCache, get_identity_cache

BACKEND_URL = "http://backend"

type Handler = Callable[[httpx.Request], httpx.Response]


@pytest.fixture
def backend_state() -> BackendState:
    """Fresh stub backend data for each test."""
    return BackendState.seeded()


@pytest.fixture
async def backend_client(
    backend_state: BackendState,
) -> AsyncGenerator[httpx.AsyncClient]:
    """Backend client wired to the stub backend."""
    transport = httpx.ASGITransport(app=create_stub_backend(backend_state))
    async with create_backend_client(BACKEND_URL, transport=transport) as client:
        yield client


@pytest.fixture
def mock_backend() -> Callable[[Handler], httpx.AsyncClient]:
    """Factory for backend clients answered by a plain handler function."""

    def factory(handler: Handler) -> httpx.AsyncClient:
        return create_backend_client(
            BACKEND_URL, transport=httpx.MockTransport(handler)
        )

    return factory


@pytest.fixture
def identity_cache() -> IdentityCache:
    """Empty identity cache."""
    return IdentityCache()


@pytest.fixture
async def console_client(
    backend_client: httpx.AsyncClient, identity_cache: IdentityCache
) -> AsyncGenerator[httpx.AsyncClient]:
    """Client of the console gateway, whose backend is the stub.

    Returns:
        httpx.AsyncClient: Client calling the gateway in process.
    """
    app.dependency_overrides[get_backend_client] = lambda: backend_client
    app.dependency_overrides[get_identity_cache] = lambda: identity_cache

    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(
        transport=transport, base_url="http://testserver"  # NOSONAR
    ) as client:
        yield client

    app.dependency_overrides.clear()
