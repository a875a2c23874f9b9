"""Mutation kinds."""

from enum import StrEnum
from typing import Literal

__all__ = ["MutationKind", "UpdateMethod"]


type UpdateMethod = Literal["PATCH", "PUT"]


class MutationKind(StrEnum):
    """Create or update request."""

    CREATE = "CREATE"
    UPDATE = "UPDATE"
