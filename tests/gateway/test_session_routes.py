# ruff: noqa: S101

"""Tests for the console gateway session and health routes."""

import httpx
import pytest
from fastapi import status
from stub_backend import BackendState

from chargepoint_console.utils.prometheus import REQUESTS_IN_PROGRESS


@pytest.mark.asyncio
@pytest.mark.gateway
class TestSessionRoutes:
    """Tests for /me."""

    async def test_me_cached(
        self, console_client: httpx.AsyncClient, backend_state: BackendState
    ) -> None:
        """The identity is fetched once across requests."""
        first = await console_client.get("/me")
        second = await console_client.get("/me")

        assert first.status_code == status.HTTP_200_OK
        assert first.json() == second.json()
        assert first.json()["firstName"] == "Alice"
        assert backend_state.me_calls == 1

    async def test_me_invalidate(
        self, console_client: httpx.AsyncClient, backend_state: BackendState
    ) -> None:
        """Deleting the cache makes the next request fetch again."""
        await console_client.get("/me")
        response = await console_client.delete("/me/cache")
        assert response.status_code == status.HTTP_204_NO_CONTENT

        await console_client.get("/me")
        assert backend_state.me_calls == 2

    async def test_me_unavailable(
        self, console_client: httpx.AsyncClient, backend_state: BackendState
    ) -> None:
        """No identity from the backend answers 502."""
        backend_state.me_available = False
        response = await console_client.get("/me")

        assert response.status_code == status.HTTP_502_BAD_GATEWAY
        assert response.json()["code"] == "BACKEND_UNAVAILABLE"


@pytest.mark.asyncio
@pytest.mark.gateway
class TestCommonRoutes:
    """Tests for health and bootstrap routes."""

    async def test_health(self, console_client: httpx.AsyncClient) -> None:
        """Health answers without content."""
        response = await console_client.get("/health")
        assert response.status_code == status.HTTP_204_NO_CONTENT

    async def test_info(self, console_client: httpx.AsyncClient) -> None:
        """Bootstrap information advertises the notification channel."""
        response = await console_client.get("/info")

        assert response.status_code == status.HTTP_200_OK
        payload = response.json()
        assert payload["pageSize"] == 10
        assert payload["websocketUrl"].endswith("/websocket/chargepoint")


@pytest.mark.asyncio
@pytest.mark.gateway
class TestGatewayMetrics:
    """Tests for the in-flight request gauge."""

    async def test_unknown_paths_share_one_area(
        self, console_client: httpx.AsyncClient
    ) -> None:
        """Requests to unknown paths never add new gauge series."""
        for index in range(5):
            await console_client.get(f"/resources/bogus{index}")
            await console_client.get(f"/nope{index}")

        areas = {
            sample.labels["area"]
            for metric in REQUESTS_IN_PROGRESS.collect()
            for sample in metric.samples
        }
        assert not any("bogus" in area or "nope" in area for area in areas)
        assert "other" in areas
