"""Scroll exceptions."""

from chargepoint_console.common.app_error import AppError
from chargepoint_console.config.errors import ErrorCode

__all__ = ["ScrollStateError"]


class ScrollStateError(AppError):
    """Exception raised when a continuation load precedes the initial load."""

    error_code = ErrorCode.SCROLL_STATE
    message = "load_more() called before a successful load_initial()"
