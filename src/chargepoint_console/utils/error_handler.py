"""Exception handlers rendering every gateway error as ``{code, message}``."""

import httpx
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from loguru import logger

from chargepoint_console.common import AppError
from chargepoint_console.config import settings
from chargepoint_console.config.errors import ErrorCode, ErrorNames

__all__ = ["error_response", "register_exception_handlers"]


def error_response(status_code: int, code: ErrorCode, message: str) -> JSONResponse:
    """JSON error body shared by all handlers."""
    return JSONResponse(
        status_code=status_code, content={"code": code, "message": message}
    )


def _app_error(request: Request, exc: AppError) -> JSONResponse:
    server_side = exc.status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR
    log = logger.error if server_side else logger.warning
    log(
        "Request failed",
        code=exc.error_code,
        path=request.url.path,
        detail=exc.message,
    )
    return error_response(exc.status_code, exc.error_code, exc.message)


def _validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.info("Rejected request", path=request.url.path, errors=exc.errors())
    return error_response(
        status.HTTP_422_UNPROCESSABLE_ENTITY,
        ErrorCode.VALIDATION_ERROR,
        "Validation failed",
    )


def _backend_unreachable(
    request: Request, exc: httpx.TransportError
) -> JSONResponse:
    logger.error(
        "Backend unreachable",
        path=request.url.path,
        backend_url=settings.backend_url,
        error=repr(exc),
    )
    return error_response(
        status.HTTP_502_BAD_GATEWAY,
        ErrorCode.BACKEND_UNAVAILABLE,
        "Backend unreachable",
    )


def _unexpected(request: Request, exc: Exception) -> JSONResponse:
    logger.opt(exception=exc).error("Unhandled exception", path=request.url.path)
    return error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        ErrorCode.SERVER_ERROR,
        ErrorNames.INTERNAL_SERVER_ERROR,
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the gateway exception handlers to ``app``."""
    app.add_exception_handler(AppError, _app_error)
    app.add_exception_handler(RequestValidationError, _validation_error)
    app.add_exception_handler(httpx.TransportError, _backend_unreachable)
    app.add_exception_handler(Exception, _unexpected)
