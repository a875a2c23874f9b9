"""Search parameters and the page envelope."""

from enum import StrEnum
from typing import Self

from pydantic import BaseModel, ConfigDict, Field, model_validator

__all__ = [
    "FilterOrder",
    "Page",
    "SearchFilter",
    "SearchParameters",
    "SearchSort",
    "SortOrder",
]


class FilterOrder(StrEnum):
    """Comparison of a filter, valued with its operator in the filter grammar."""

    EQUAL = ":"
    LESS_THAN = "<"
    GREATER_THAN = ">"


class SortOrder(StrEnum):
    """Sort direction as the backend's ``order`` parameter expects it."""

    ASCENDING = "asc"
    DESCENDING = "desc"


class SearchFilter(BaseModel):
    """Predicate on one backend field."""

    model_config = ConfigDict(frozen=True)

    field: str = Field(min_length=1, description="Field name known to the backend.")
    value: str = Field(
        min_length=1, description="Compared value, sent between backticks."
    )
    order: FilterOrder = Field(default=FilterOrder.EQUAL)


class SearchSort(BaseModel):
    """Sort order of a search."""

    model_config = ConfigDict(frozen=True)

    field: str = Field(min_length=1)
    direction: SortOrder = Field(default=SortOrder.ASCENDING)


class SearchParameters(BaseModel):
    """Pagination, filters and sort of one search request."""

    model_config = ConfigDict(frozen=True)

    size: int = Field(ge=1, description="Page length.")
    page: int = Field(default=0, ge=0, description="Page index, starts at 0.")
    filters: tuple[SearchFilter, ...] = Field(default=())
    sort: SearchSort | None = None


class Page[T](BaseModel):
    """Page envelope returned by the backend's search endpoints."""

    data: list[T]
    total: int = Field(ge=0, description="Matching items across all pages.")

    @model_validator(mode="after")
    def check_total(self) -> Self:
        """A page never holds more items than the query matches."""
        if self.total < len(self.data):
            raise ValueError(
                f"total {self.total} is lower than the page length {len(self.data)}"
            )
        return self
