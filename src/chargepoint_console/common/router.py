"""Health and client bootstrap routes."""

from typing import Any

from fastapi import APIRouter, Response

from chargepoint_console.config import settings

__all__ = ["router"]


router = APIRouter(tags=["Common", "Health"])


@router.get("/health", include_in_schema=False, summary="Health check endpoint")
async def health() -> Response:
    """Health check endpoint."""
    return Response(status_code=204)


@router.get("/info", summary="Console bootstrap information")
async def info() -> dict[str, Any]:
    """Return what a browser client needs before its first list load.

    The notification channel is only advertised here; charge point status
    updates flow from the backend straight to the browser.
    """
    return {
        "version": settings.version,
        "pageSize": settings.page_size,
        "websocketUrl": settings.websocket_url,
    }
