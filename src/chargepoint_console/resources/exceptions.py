"""Resource exceptions."""

from fastapi import status

from chargepoint_console.common.app_error import AppError
from chargepoint_console.config.errors import ErrorCode

__all__ = [
    "OperationNotSupportedError",
    "ResourceNotFoundError",
    "UnknownResourceError",
]


class UnknownResourceError(AppError):
    """Exception raised when a resource name is not registered."""

    error_code = ErrorCode.UNKNOWN_RESOURCE
    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, name: str) -> None:
        """Initialize with the resource name."""
        super().__init__(f"Resource '{name}' does not exist")


class OperationNotSupportedError(AppError):
    """Exception raised when the backend has no endpoint for an operation."""

    error_code = ErrorCode.UNKNOWN_RESOURCE
    status_code = status.HTTP_405_METHOD_NOT_ALLOWED

    def __init__(self, name: str, operation: str) -> None:
        """Initialize with the resource name and the operation."""
        super().__init__(f"Resource '{name}' does not support {operation}")


class ResourceNotFoundError(AppError):
    """Exception raised when an element is missing on the backend."""

    error_code = ErrorCode.NOT_FOUND
    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, name: str, element_id: int | str) -> None:
        """Initialize with the resource name and element ID."""
        super().__init__(f"{name} with ID {element_id} not found")
