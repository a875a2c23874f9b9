"""Router Initializer."""

from fastapi import FastAPI

from chargepoint_console.common.router import router as common_router
from chargepoint_console.resources.router import router as resources_router
from chargepoint_console.session.router import router as session_router


def register_routers(app: FastAPI) -> None:
    """Register all API routers with the FastAPI application.

    Args:
        app: FastAPI application instance.
    """
    app.include_router(common_router)
    app.include_router(session_router, prefix="/me")
    app.include_router(resources_router, prefix="/resources")
