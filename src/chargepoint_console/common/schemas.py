"""Shared wire and diagnostic models."""

from pydantic import BaseModel, ConfigDict, Field

from chargepoint_console.config.errors import ErrorCode

__all__ = ["Diagnostic", "ErrorMessage"]


class ErrorMessage(BaseModel):
    """Error body returned by the backend on a rejected request."""

    model_config = ConfigDict(frozen=True)

    message: str = Field(min_length=1, description="Displayable error text.")


class Diagnostic(BaseModel):
    """Structured record of a backend call that produced no usable value."""

    model_config = ConfigDict(frozen=True)

    code: ErrorCode
    path: str = Field(description="Backend URL path, without the query string.")
    status: int | None = None
    detail: str = ""
