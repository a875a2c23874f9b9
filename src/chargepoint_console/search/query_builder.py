"""Encode search parameters into the backend's query string."""

import re
from urllib.parse import quote, unquote

from .schemas import FilterOrder, SearchFilter, SearchParameters

__all__ = [
    "build_query",
    "build_search_target",
    "format_filter",
    "parse_filter_request",
]


# Grammar separators left readable; every other reserved character is escaped.
_REQUEST_SAFE = ":,"

_FILTER_PATTERN = re.compile(r"(\w+?)(:|<|>)`([^`]+)`")


def format_filter(search_filter: SearchFilter) -> str:
    """Render one filter as ``field<op>`value```."""
    return f"{search_filter.field}{search_filter.order}`{search_filter.value}`"


def build_query(params: SearchParameters) -> str:
    """Build the query string of a search request.

    ``size`` and ``page`` are always present. Filters are joined with commas
    into a single ``request`` parameter encoded in one pass, so callers must
    keep the grammar characters out of field names and values. Sort adds
    ``sortBy`` and ``order``.

    Args:
        params: Search parameters.

    Returns:
        The query string, without the leading ``?``.
    """
    parts = [f"size={params.size}", f"page={params.page}"]

    if params.filters:
        request = ",".join(format_filter(f) for f in params.filters)
        parts.append(f"request={quote(request, safe=_REQUEST_SAFE)}")

    if params.sort:
        parts.append(f"sortBy={params.sort.field}&order={params.sort.direction}")

    return "&".join(parts)


def build_search_target(path: str, params: SearchParameters | None = None) -> str:
    """Append the encoded query to ``path``, or return ``path`` unchanged."""
    if params is None:
        return path
    return f"{path}?{build_query(params)}"


def parse_filter_request(
    request: str, *, decoded: bool = False
) -> list[SearchFilter]:
    """Read filters back from a ``request`` parameter value.

    Tokens that do not follow the grammar are skipped, as the backend does.

    Args:
        request: Value of the ``request`` query parameter.
        decoded: Whether ``request`` is already percent-decoded, as query
            values read by a web framework are.

    Returns:
        Filters in the order they appear.
    """
    text = request if decoded else unquote(request)
    return [
        SearchFilter(field=field, order=FilterOrder(operator), value=value)
        for field, operator, value in _FILTER_PATTERN.findall(text)
    ]
