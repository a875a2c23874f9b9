"""Search exceptions."""

from fastapi import status

from chargepoint_console.common.app_error import AppError
from chargepoint_console.config.errors import ErrorCode

__all__ = ["InvalidFilterError"]


class InvalidFilterError(AppError):
    """Exception raised when a filter text holds no valid filter."""

    error_code = ErrorCode.INVALID_SEARCH
    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, request: str) -> None:
        """Initialize with the rejected filter text."""
        super().__init__(
            f"Filter '{request}' does not match the form field:`value`, "
            "field<`value` or field>`value`"
        )
