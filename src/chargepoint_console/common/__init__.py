"""Common module for shared result types and error handling.

Key Components:
- Result types: ``Success`` / ``Failure`` tagged union returned by backend calls
- Wire models: ``ErrorMessage`` error body and ``Diagnostic`` failure records
- App errors: Application-specific error types with structured error codes
"""

from .app_error import AppError
from .exceptions import BackendUnavailableError
from .result import Failure, Result, Success
from .schemas import Diagnostic, ErrorMessage

__all__ = [
    "AppError",
    "BackendUnavailableError",
    "Diagnostic",
    "ErrorMessage",
    "Failure",
    "Result",
    "Success",
]
