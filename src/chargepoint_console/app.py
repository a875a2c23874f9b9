"""Main application module for the charge point console gateway."""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Final

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger
from prometheus_fastapi_instrumentator import Instrumentator

from chargepoint_console.backend.client import create_backend_client
from chargepoint_console.config import config_logger, settings
from chargepoint_console.session.cache import IdentityCache
from chargepoint_console.utils.banner import create_banner
from chargepoint_console.utils.error_handler import register_exception_handlers
from chargepoint_console.utils.prometheus import add_prometheus_metrics
from chargepoint_console.utils.routers import register_routers

config_logger()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
    """Open the backend client and the identity cache for the app's lifetime."""
    create_banner(settings, silent=settings.app_env == "testing")

    app.state.backend_client = create_backend_client()
    app.state.identity_cache = IdentityCache()
    logger.info("Console gateway ready", backend_url=settings.backend_url)

    yield
    await app.state.backend_client.aclose()


app: Final = FastAPI(
    title="Charge Point Console",
    description="Gateway of the charging station administration console",
    root_path=settings.root_path,
    version=settings.version,
    lifespan=lifespan,
)


# --------------------------------------------------------
# P R O M E T H E U S
# --------------------------------------------------------
Instrumentator().instrument(app).expose(app, include_in_schema=False)
add_prometheus_metrics(app)


# --------------------------------------------------------
# C O R S
# --------------------------------------------------------
if settings.app_env != "production":
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allow_origin,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )


# --------------------------------------------------------
# R O U T E R S
# --------------------------------------------------------
register_routers(app)


# --------------------------------------------------------
# E X C E P T I O N S
# --------------------------------------------------------
register_exception_handlers(app)
