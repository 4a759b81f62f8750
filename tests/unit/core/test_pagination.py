from __future__ import annotations

import pytest
from django.http import QueryDict
from django.test import override_settings
from rest_framework.exceptions import ValidationError

from modules.core.pagination import (
    MAX_PAGE,
    MAX_PAGE_SIZE,
    Page,
    PageRequest,
    page_request_from_query,
    parse_sort,
)

pytestmark = pytest.mark.unit

SORTABLE = ("id", "name", "price", "rating")


class TestPage:
    def test_total_pages_rounds_up(self):
        page = Page(content=[1, 2], number=0, size=2, total_elements=5)
        assert page.total_pages == 3

    def test_offset(self):
        assert Page(number=3, size=10).offset == 30
        assert PageRequest(page=3, size=10).offset == 30

    def test_map_preserves_metadata(self):
        page = Page(content=[1, 2, 3], number=2, size=3, total_elements=9)
        mapped = page.map(str)
        assert mapped.content == ["1", "2", "3"]
        assert (mapped.number, mapped.size, mapped.total_elements) == (2, 3, 9)
        assert mapped.total_pages == page.total_pages

    def test_to_dict(self):
        page = Page(content=["a"], number=1, size=1, total_elements=2)
        assert page.to_dict(str.upper) == {
            "content": ["A"],
            "number": 1,
            "size": 1,
            "offset": 1,
            "total_elements": 2,
            "total_pages": 2,
        }


class TestParseSort:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("price", "price"),
            ("price,asc", "price"),
            ("price,desc", "-price"),
            ("name, DESC", "-name"),
        ],
    )
    def test_valid(self, value, expected):
        assert parse_sort(value, SORTABLE) == expected

    def test_unknown_field(self):
        with pytest.raises(ValueError, match="Cannot sort by 'password'"):
            parse_sort("password", SORTABLE)

    def test_unknown_direction(self):
        with pytest.raises(ValueError, match="Invalid sort direction"):
            parse_sort("price,sideways", SORTABLE)


class TestPageRequestFromQuery:
    def test_defaults(self):
        request = page_request_from_query(QueryDict(""), SORTABLE)
        assert request == PageRequest(page=0, size=20, ordering=())

    @override_settings(REST_FRAMEWORK={"PAGE_SIZE": 7})
    def test_default_size_from_settings(self):
        assert page_request_from_query(QueryDict(""), SORTABLE).size == 7

    def test_repeated_sort_parameters(self):
        query = QueryDict("page=2&size=5&sort=price,desc&sort=name")
        request = page_request_from_query(query, SORTABLE)
        assert request == PageRequest(page=2, size=5, ordering=("-price", "name"))

    @pytest.mark.parametrize(
        "query",
        [
            "page=-1",
            f"page={MAX_PAGE + 1}",
            "size=0",
            f"size={MAX_PAGE_SIZE + 1}",
            "page=abc",
            "sort=unknown",
        ],
    )
    def test_invalid_values_rejected(self, query):
        with pytest.raises(ValidationError):
            page_request_from_query(QueryDict(query), SORTABLE)
