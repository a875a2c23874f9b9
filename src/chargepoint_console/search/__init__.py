"""Search module: query encoding and paginated fetching."""

from .exceptions import InvalidFilterError
from .query_builder import (
    build_query,
    build_search_target,
    format_filter,
    parse_filter_request,
)
from .schemas import (
    FilterOrder,
    Page,
    SearchFilter,
    SearchParameters,
    SearchSort,
    SortOrder,
)
from .service import (
    get_all_elements,
    get_element_by_id,
    search_elements,
    try_fetch,
    try_get_all_elements,
    try_get_element_by_id,
    try_search_elements,
)

__all__ = [
    "FilterOrder",
    "InvalidFilterError",
    "Page",
    "SearchFilter",
    "SearchParameters",
    "SearchSort",
    "SortOrder",
    "build_query",
    "build_search_target",
    "format_filter",
    "get_all_elements",
    "get_element_by_id",
    "parse_filter_request",
    "search_elements",
    "try_fetch",
    "try_get_all_elements",
    "try_get_element_by_id",
    "try_search_elements",
]
