"""Common exceptions."""

from fastapi import status

from chargepoint_console.common.app_error import AppError
from chargepoint_console.config.errors import ErrorCode

__all__ = ["BackendUnavailableError"]


class BackendUnavailableError(AppError):
    """Exception raised when the REST backend gave no usable answer."""

    error_code = ErrorCode.BACKEND_UNAVAILABLE
    status_code = status.HTTP_502_BAD_GATEWAY

    def __init__(self, path: str) -> None:
        """Initialize with the backend path that failed."""
        super().__init__(f"Backend request to {path} failed")
