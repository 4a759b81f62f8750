"""Page requests and page results.

``PageRequest`` is what a list endpoint hands to a service: a zero-based
page number, a page size and an ordering.  Repositories answer with a
``Page`` which services ``map`` into transfer objects without touching the
metadata.

Query string format::

    ?page=0&size=20&sort=price,desc&sort=name
"""

from __future__ import annotations

from dataclasses import dataclass, field
from math import ceil
from typing import Any, Callable, Dict, Generic, Iterable, List, Tuple, TypeVar

from django.conf import settings
from rest_framework import serializers

from modules.core.validation import MAX_ID

T = TypeVar("T")
R = TypeVar("R")

MAX_PAGE_SIZE = 100
# Keeps page * size inside the store's 64-bit offset range.
MAX_PAGE = MAX_ID // MAX_PAGE_SIZE - 1
SORT_DIRECTIONS = {"asc": "", "desc": "-"}


def default_page_size() -> int:
    return settings.REST_FRAMEWORK.get("PAGE_SIZE") or 20


@dataclass(frozen=True)
class PageRequest:
    page: int = 0
    size: int = 20
    ordering: Tuple[str, ...] = ()

    @property
    def offset(self) -> int:
        return self.page * self.size


@dataclass(frozen=True)
class Page(Generic[T]):
    """A slice of a larger result set plus the metadata to navigate it."""

    content: List[T] = field(default_factory=list)
    number: int = 0
    size: int = 20
    total_elements: int = 0

    @property
    def offset(self) -> int:
        return self.number * self.size

    @property
    def total_pages(self) -> int:
        if self.size <= 0:
            return 0
        return ceil(self.total_elements / self.size)

    def map(self, func: Callable[[T], R]) -> Page[R]:
        """Transform every element, keeping number/size/total unchanged."""
        return Page(
            content=[func(item) for item in self.content],
            number=self.number,
            size=self.size,
            total_elements=self.total_elements,
        )

    def to_dict(self, item_to_dict: Callable[[T], Any] = lambda item: item) -> Dict[str, Any]:
        return {
            "content": [item_to_dict(item) for item in self.content],
            "number": self.number,
            "size": self.size,
            "offset": self.offset,
            "total_elements": self.total_elements,
            "total_pages": self.total_pages,
        }


def parse_sort(value: str, sortable_fields: Iterable[str]) -> str:
    """Turn ``"price,desc"`` into the ORM ordering ``"-price"``.

    Raises ``ValueError`` for unknown fields or directions.
    """
    name, _, direction = value.partition(",")
    name = name.strip()
    direction = direction.strip().lower() or "asc"
    if name not in set(sortable_fields):
        raise ValueError(f"Cannot sort by '{name}'.")
    if direction not in SORT_DIRECTIONS:
        raise ValueError(f"Invalid sort direction '{direction}'.")
    return f"{SORT_DIRECTIONS[direction]}{name}"


class PageRequestSerializer(serializers.Serializer):
    """Validates ``page``/``size``/``sort`` query parameters.

    Pass ``sortable_fields`` through the serializer context.
    """

    page = serializers.IntegerField(
        required=False, min_value=0, max_value=MAX_PAGE, default=0
    )
    size = serializers.IntegerField(
        required=False, min_value=1, max_value=MAX_PAGE_SIZE
    )
    sort = serializers.ListField(
        child=serializers.CharField(), required=False, default=list
    )

    def validate_sort(self, value: List[str]) -> List[str]:
        sortable = self.context.get("sortable_fields", ())
        ordering = []
        for item in value:
            try:
                ordering.append(parse_sort(item, sortable))
            except ValueError as exc:
                raise serializers.ValidationError(str(exc)) from exc
        return ordering

    def to_page_request(self) -> PageRequest:
        data = self.validated_data
        return PageRequest(
            page=data.get("page", 0),
            size=data.get("size") or default_page_size(),
            ordering=tuple(data.get("sort") or ()),
        )


def page_request_from_query(query_params: Any, sortable_fields: Iterable[str]) -> PageRequest:
    """Parse a request's query parameters; raises DRF ``ValidationError``."""
    serializer = PageRequestSerializer(
        data=query_params, context={"sortable_fields": tuple(sortable_fields)}
    )
    serializer.is_valid(raise_exception=True)
    return serializer.to_page_request()
