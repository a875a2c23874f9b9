# ruff: noqa: S101

"""Tests for the search query encoding."""

from urllib.parse import parse_qs

import pytest
from pydantic import ValidationError

from chargepoint_console.search import (
    FilterOrder,
    SearchFilter,
    SearchParameters,
    SearchSort,
    SortOrder,
    build_query,
    build_search_target,
    format_filter,
    parse_filter_request,
)

_PATH = "/api/user/search"


@pytest.mark.search
class TestBuildQuery:
    """Tests for build_query and build_search_target."""

    def test_pagination_only(self) -> None:
        """Size and page are always present, nothing else."""
        params = SearchParameters(size=10, page=0)
        assert build_query(params) == "size=10&page=0"

    def test_bare_path_without_parameters(self) -> None:
        """Without parameters the path is requested unchanged."""
        assert build_search_target(_PATH) == _PATH

    def test_single_equal_filter(self) -> None:
        """Backticks are percent-encoded, the ':' operator is kept."""
        params = SearchParameters(
            size=5, page=2, filters=(SearchFilter(field="firstName", value="Alice"),)
        )
        assert build_query(params) == "size=5&page=2&request=firstName:%60Alice%60"

    def test_operators_and_join(self) -> None:
        """Filters render in order, joined by commas, with their operator."""
        params = SearchParameters(
            size=10,
            page=0,
            filters=(
                SearchFilter(field="date", value="2024-01-01", order=FilterOrder.GREATER_THAN),
                SearchFilter(field="date", value="2024-02-01", order=FilterOrder.LESS_THAN),
            ),
        )
        query = build_query(params)
        assert query == (
            "size=10&page=0&request="
            "date%3E%602024-01-01%60,date%3C%602024-02-01%60"
        )

    def test_space_in_value_encoded_once(self) -> None:
        """The filter fragment goes through a single encoding pass."""
        params = SearchParameters(
            size=10, page=0, filters=(SearchFilter(field="name", value="Borne A"),)
        )
        assert build_query(params).endswith("request=name:%60Borne%20A%60")

    def test_sort(self) -> None:
        """Sort adds sortBy and the lowercase order."""
        params = SearchParameters(
            size=10,
            page=1,
            sort=SearchSort(field="lastName", direction=SortOrder.DESCENDING),
        )
        assert build_query(params) == "size=10&page=1&sortBy=lastName&order=desc"

    def test_filters_then_sort(self) -> None:
        """Filters come before the sort parameters."""
        params = SearchParameters(
            size=3,
            page=0,
            filters=(SearchFilter(field="role", value="EDITOR"),),
            sort=SearchSort(field="id"),
        )
        assert build_search_target(_PATH, params) == (
            f"{_PATH}?size=3&page=0&request=role:%60EDITOR%60&sortBy=id&order=asc"
        )

    def test_empty_filters_add_no_request(self) -> None:
        """An empty filter tuple is the same as no filter."""
        params = SearchParameters(size=10, page=0, filters=())
        assert "request" not in build_query(params)

    def test_pure(self) -> None:
        """Equal parameters give identical strings and no repeated keys."""
        params = SearchParameters(
            size=10,
            page=4,
            filters=(SearchFilter(field="email", value="a@b.fr"),),
            sort=SearchSort(field="email"),
        )
        first = build_query(params)
        second = build_query(SearchParameters.model_validate(params.model_dump()))
        assert first == second
        keys = [part.split("=", 1)[0] for part in first.split("&")]
        assert len(keys) == len(set(keys))

    @pytest.mark.parametrize(
        ("value", "encoded"),
        [("R&D", "R%26D"), ("a+b", "a%2Bb"), ("SN#1", "SN%231"), ("x=1?", "x%3D1%3F")],
    )
    def test_query_delimiters_escaped(self, value: str, encoded: str) -> None:
        """Characters that split or end a query string are escaped in values."""
        params = SearchParameters(
            size=10, page=0, filters=(SearchFilter(field="name", value=value),)
        )
        assert build_query(params) == f"size=10&page=0&request=name:%60{encoded}%60"

    def test_rejects_empty_filter_value(self) -> None:
        """The grammar cannot carry an empty value."""
        with pytest.raises(ValidationError):
            SearchFilter(field="name", value="")

    def test_rejects_invalid_pagination(self) -> None:
        """Page size must be positive and the page index non-negative."""
        with pytest.raises(ValueError):
            SearchParameters(size=0, page=0)
        with pytest.raises(ValueError):
            SearchParameters(size=10, page=-1)


@pytest.mark.search
class TestParseFilterRequest:
    """Tests for reading the filter grammar back."""

    def test_round_trip_keeps_order(self) -> None:
        """Decoding the request fragment recovers the filters in order."""
        filters = (
            SearchFilter(field="lastName", value="Dubois"),
            SearchFilter(field="id", value="3", order=FilterOrder.LESS_THAN),
            SearchFilter(field="lastEdit", value="2024-05-01T00:00", order=FilterOrder.GREATER_THAN),
        )
        query = build_query(SearchParameters(size=10, page=0, filters=filters))
        request = parse_qs(query)["request"][0]
        assert parse_filter_request(request, decoded=True) == list(filters)

    @pytest.mark.parametrize("value", ["R&D", "a+b", "SN#1", "100%", "%41"])
    def test_round_trip_reserved_characters(self, value: str) -> None:
        """Values holding query delimiters survive encoding and decoding."""
        search_filter = SearchFilter(field="name", value=value)
        query = build_query(
            SearchParameters(size=10, page=0, filters=(search_filter,))
        )
        request = parse_qs(query)["request"][0]
        assert parse_filter_request(request, decoded=True) == [search_filter]

    def test_accepts_encoded_text(self) -> None:
        """Percent-encoded text is decoded before parsing."""
        parsed = parse_filter_request("name:%60John%60,age%3C%6018%60")
        assert [format_filter(f) for f in parsed] == ["name:`John`", "age<`18`"]

    def test_decoded_text_not_decoded_again(self) -> None:
        """Already decoded text keeps percent sequences literally."""
        parsed = parse_filter_request("code:`%41`", decoded=True)
        assert parsed == [SearchFilter(field="code", value="%41")]

    def test_skips_malformed_tokens(self) -> None:
        """Tokens outside the grammar are ignored."""
        parsed = parse_filter_request("name=John,role:`EDITOR`,age<18")
        assert parsed == [SearchFilter(field="role", value="EDITOR")]
