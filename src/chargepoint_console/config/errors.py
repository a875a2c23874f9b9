"""Text constants for consistent error handling."""

from enum import StrEnum

__all__ = ["ErrorCode", "ErrorNames"]


class ErrorCode(StrEnum):
    """Error codes for standardized error handling."""

    # General errors
    SERVER_ERROR = "SERVER_ERROR"
    NOT_FOUND = "NOT_FOUND"
    VALIDATION_ERROR = "VALIDATION_ERROR"

    # Backend access errors
    TRANSPORT_ERROR = "TRANSPORT_ERROR"
    DECODE_ERROR = "DECODE_ERROR"
    BACKEND_UNAVAILABLE = "BACKEND_UNAVAILABLE"

    # Console errors
    INVALID_SEARCH = "INVALID_SEARCH"
    SCROLL_STATE = "SCROLL_STATE"
    UNKNOWN_RESOURCE = "UNKNOWN_RESOURCE"


class ErrorNames(StrEnum):
    """User facing messages, French as the deployed console."""

    INTERNAL_SERVER_ERROR = "Internal server error"

    CREATE_FAILED = "Erreur lors de la création avec l'URL {path}"
    UPDATE_FAILED = "Erreur lors de la modification avec l'URL {path}"
    FETCH_LIST_FAILED = "Erreur lors de la récupération des éléments."
