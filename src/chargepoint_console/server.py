"""ASGI server for the console gateway."""

import uvicorn
from uvicorn.config import LOGGING_CONFIG

from chargepoint_console.config import settings

__all__ = ["run"]


def run() -> None:
    """Run the FastAPI application using Uvicorn."""
    is_production = settings.app_env == "production"

    uvicorn.run(
        "chargepoint_console:app",
        host=settings.host_binding,
        port=settings.port,
        reload=settings.reload,
        reload_dirs=["src/chargepoint_console"],
        server_header=False,
        log_config=None if is_production else LOGGING_CONFIG,
        log_level=None if is_production else "INFO",
    )
