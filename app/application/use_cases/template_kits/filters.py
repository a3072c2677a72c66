"""Compose template kit filters into store-agnostic query descriptors.

Every function in this module is pure: it receives already normalized values
(see :mod:`.normalization`) or raw query values and returns predicate
descriptors. Absent or empty inputs never produce a criterion.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from app.domain.query import AnyOf, Criterion, KitQuery, Operator, PageRequest, Predicate

from .normalization import (
    RawValue,
    clean_string,
    parse_bool,
    parse_int,
    to_string_list,
)

SUPPORTED_EXTENSION_TYPE = "wordpress"
SEARCH_PER_PAGE = 15
SEARCH_MAX_PAGE = 50
TEXT_SEARCH_FIELDS = ("name", "description", "author")


def exact_match(field_name: str, value: object) -> Predicate:
    return Predicate(field_name, Operator.EQUALS, value)


def substring(field_name: str, value: str) -> Predicate:
    return Predicate(field_name, Operator.CONTAINS, value)


def any_field_contains(fields: Sequence[str], terms: Iterable[str]) -> AnyOf | None:
    """Match when any of ``fields`` contains any of ``terms``."""

    predicates = tuple(
        substring(field_name, term) for term in terms for field_name in fields
    )
    return AnyOf(predicates) if predicates else None


def any_element(field_name: str, values: Iterable[str]) -> AnyOf | None:
    """Match when the list field holds at least one of ``values``."""

    predicates = tuple(
        Predicate(field_name, Operator.HAS_ELEMENT, value) for value in values
    )
    return AnyOf(predicates) if predicates else None


def any_value(field_name: str, values: Sequence[str]) -> Criterion | None:
    """Exact match against one value, or an OR-group of exact matches."""

    if not values:
        return None
    if len(values) == 1:
        return exact_match(field_name, values[0])
    return AnyOf(tuple(exact_match(field_name, value) for value in values))


def _compact(criteria: Iterable[Criterion | None]) -> tuple[Criterion, ...]:
    return tuple(criterion for criterion in criteria if criterion is not None)


@dataclass(frozen=True)
class ListingFilters:
    """Normalized input of the plain listing."""

    category: str | None = None
    is_active: bool | None = None
    search: str | None = None
    page: int = 1
    per_page: int = 15

    @classmethod
    def from_raw(
        cls,
        *,
        category: RawValue = None,
        is_active: RawValue = None,
        search: RawValue = None,
        page: RawValue = None,
        per_page: RawValue = None,
        default_per_page: int = 15,
        max_per_page: int = 100,
    ) -> "ListingFilters":
        return cls(
            category=clean_string(category),
            is_active=parse_bool(is_active),
            search=clean_string(search),
            page=parse_int(page, default=1),
            per_page=parse_int(
                per_page, default=default_per_page, maximum=max_per_page
            ),
        )

    def criteria(self) -> tuple[Criterion, ...]:
        return _compact(
            (
                exact_match("category", self.category) if self.category else None,
                exact_match("is_active", self.is_active)
                if self.is_active is not None
                else None,
                substring("name", self.search) if self.search else None,
            )
        )

    def to_query(self) -> KitQuery:
        return KitQuery(
            criteria=self.criteria(),
            page=PageRequest(page=self.page, per_page=self.per_page),
        )


@dataclass(frozen=True)
class SearchFilters:
    """Normalized input of the marketplace compatible search."""

    extension_type: str | None = None
    categories: tuple[str, ...] = field(default_factory=tuple)
    industries: tuple[str, ...] = field(default_factory=tuple)
    search_terms: tuple[str, ...] = field(default_factory=tuple)
    tags: tuple[str, ...] = field(default_factory=tuple)
    page: int = 1

    @classmethod
    def from_raw(
        cls,
        *,
        extension_type: RawValue = None,
        categories: RawValue = None,
        industries: RawValue = None,
        search_terms: RawValue = None,
        tags: RawValue = None,
        page: RawValue = None,
    ) -> "SearchFilters":
        return cls(
            extension_type=clean_string(extension_type),
            # Category names may legitimately contain commas.
            categories=tuple(to_string_list(categories, split_commas=False)),
            industries=tuple(to_string_list(industries)),
            search_terms=tuple(to_string_list(search_terms, split_commas=False)),
            tags=tuple(to_string_list(tags)),
            page=parse_int(page, default=1, maximum=SEARCH_MAX_PAGE),
        )

    @property
    def is_supported_type(self) -> bool:
        return (
            self.extension_type is None
            or self.extension_type == SUPPORTED_EXTENSION_TYPE
        )

    def criteria(self) -> tuple[Criterion, ...]:
        return _compact(
            (
                any_value("category", self.categories),
                any_element("industries", self.industries),
                any_field_contains(TEXT_SEARCH_FIELDS, self.search_terms),
                any_element("tags", self.tags),
                exact_match("is_active", True),
            )
        )

    def to_query(self) -> KitQuery:
        return KitQuery(
            criteria=self.criteria(),
            page=PageRequest(page=self.page, per_page=SEARCH_PER_PAGE),
        )


__all__ = [
    "ListingFilters",
    "SEARCH_MAX_PAGE",
    "SEARCH_PER_PAGE",
    "SUPPORTED_EXTENSION_TYPE",
    "SearchFilters",
    "TEXT_SEARCH_FIELDS",
    "any_element",
    "any_field_contains",
    "any_value",
    "exact_match",
    "substring",
]
