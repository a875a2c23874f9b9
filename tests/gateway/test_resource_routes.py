# ruff: noqa: S101

"""Tests for the console gateway resource routes."""

import httpx
import pytest
from fastapi import status
from stub_backend import BackendState

from chargepoint_console.app import app
from chargepoint_console.backend.client import get_backend_client

_TOTAL_USERS = 5


@pytest.mark.asyncio
@pytest.mark.gateway
class TestSearchRoutes:
    """Tests for GET /resources/{resource}."""

    async def test_search_page(self, console_client: httpx.AsyncClient) -> None:
        """The gateway returns the backend page envelope in camelCase."""
        response = await console_client.get("/resources/users?size=2&page=1")

        assert response.status_code == status.HTTP_200_OK
        payload = response.json()
        assert payload["total"] == _TOTAL_USERS
        assert [user["firstName"] for user in payload["data"]] == ["Chloe", "David"]

    async def test_search_forwards_filter_and_sort(
        self, console_client: httpx.AsyncClient, backend_state: BackendState
    ) -> None:
        """Filter text and sort reach the backend through the query encoder."""
        response = await console_client.get(
            "/resources/users",
            params={"filter": "role:`EDITOR`", "sortBy": "lastName", "order": "desc"},
        )

        assert response.status_code == status.HTTP_200_OK
        names = [user["lastName"] for user in response.json()["data"]]
        assert names == ["Thomas", "Bernard"]
        assert backend_state.requested_queries[-1] == (
            "size=10&page=0&request=role:%60EDITOR%60&sortBy=lastName&order=desc"
        )

    async def test_filter_percent_sequence_kept(
        self, console_client: httpx.AsyncClient, backend_state: BackendState
    ) -> None:
        """A literal percent sequence in filter text is forwarded as typed."""
        response = await console_client.get(
            "/resources/users", params={"filter": "lastName:`%41`"}
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["total"] == 0
        assert backend_state.requested_queries[-1] == (
            "size=10&page=0&request=lastName:%60%2541%60"
        )

    async def test_invalid_filter(self, console_client: httpx.AsyncClient) -> None:
        """Filter text outside the grammar is rejected."""
        response = await console_client.get(
            "/resources/users", params={"filter": "role=EDITOR"}
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["code"] == "INVALID_SEARCH"

    async def test_unknown_resource(self, console_client: httpx.AsyncClient) -> None:
        """Unregistered resources answer 404."""
        response = await console_client.get("/resources/invoices")

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json()["code"] == "UNKNOWN_RESOURCE"

    async def test_not_searchable(self, console_client: httpx.AsyncClient) -> None:
        """Resources without a backend search answer 405."""
        response = await console_client.get("/resources/types")
        assert response.status_code == status.HTTP_405_METHOD_NOT_ALLOWED

    async def test_chargepoint_status_decoded(
        self, console_client: httpx.AsyncClient
    ) -> None:
        """Nested charge point status goes through the resource model."""
        response = await console_client.get("/resources/chargepoints?size=5")

        assert response.status_code == status.HTTP_200_OK
        first = response.json()["data"][0]
        assert first["serialNumberChargepoint"] == "SN-0001"
        assert first["status"]["state"] is True
        assert first["status"]["step"] == "CONFIGURATION"


@pytest.mark.asyncio
@pytest.mark.gateway
class TestElementRoutes:
    """Tests for listing, reading and writing elements."""

    async def test_list_all(self, console_client: httpx.AsyncClient) -> None:
        """The whole listing is returned."""
        response = await console_client.get("/resources/users/all")

        assert response.status_code == status.HTTP_200_OK
        assert len(response.json()) == _TOTAL_USERS

    async def test_get_by_id(self, console_client: httpx.AsyncClient) -> None:
        """An element is returned by ID."""
        response = await console_client.get("/resources/chargepoints/2")

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["clientId"] == "client-2"

    async def test_get_missing(self, console_client: httpx.AsyncClient) -> None:
        """A missing element answers 404."""
        response = await console_client.get("/resources/users/77")

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json()["code"] == "NOT_FOUND"

    async def test_create(self, console_client: httpx.AsyncClient) -> None:
        """A created element answers 201."""
        response = await console_client.post(
            "/resources/users",
            json={
                "email": "hugo@example.com",
                "firstName": "Hugo",
                "lastName": "Richard",
                "password": "secret",
                "role": "VISUALIZER",
            },
        )

        assert response.status_code == status.HTTP_201_CREATED
        assert response.json()["id"] == _TOTAL_USERS + 1

    async def test_create_rejected(self, console_client: httpx.AsyncClient) -> None:
        """A backend rejection is passed on with its message."""
        response = await console_client.post(
            "/resources/users",
            json={
                "email": "bruno@example.com",
                "firstName": "Bruno",
                "lastName": "Bernard",
                "role": "EDITOR",
            },
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json() == {"message": "Cet email est déjà utilisé"}

    async def test_update(self, console_client: httpx.AsyncClient) -> None:
        """A PATCH returns the updated element."""
        response = await console_client.patch(
            "/resources/users/3", json={"lastName": "Durand"}
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["lastName"] == "Durand"

    async def test_update_not_supported(self, console_client: httpx.AsyncClient) -> None:
        """Log resources cannot be written."""
        response = await console_client.patch(
            "/resources/business-logs/1", json={"level": "INFO"}
        )
        assert response.status_code == status.HTTP_405_METHOD_NOT_ALLOWED


@pytest.mark.asyncio
@pytest.mark.gateway
class TestUnexpectedErrors:
    """Tests for the catch-all error handler."""

    async def test_unexpected_error_is_500(self) -> None:
        """Any unhandled error is answered with the server error body."""

        def broken_client() -> httpx.AsyncClient:
            raise RuntimeError("client factory exploded")

        app.dependency_overrides[get_backend_client] = broken_client
        transport = httpx.ASGITransport(app=app, raise_app_exceptions=False)
        try:
            async with httpx.AsyncClient(
                transport=transport, base_url="http://testserver"  # NOSONAR
            ) as client:
                response = await client.get("/resources/users")
        finally:
            app.dependency_overrides.clear()

        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        assert response.json() == {
            "code": "SERVER_ERROR",
            "message": "Internal server error",
        }
