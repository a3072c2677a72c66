"""Store-agnostic descriptors for filtering and paginating template kits.

A query is an explicit, immutable value: a tuple of criteria that must all
hold plus the page to fetch. Each criterion is either a single
:class:`Predicate` or an :class:`AnyOf` group whose predicates are combined
with a logical OR. Repositories translate these descriptors into their own
query language; nothing here knows about SQL.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Union


class Operator(str, Enum):
    """Comparison applied by a :class:`Predicate`."""

    EQUALS = "equals"
    CONTAINS = "contains"
    HAS_ELEMENT = "has_element"


@dataclass(frozen=True)
class Predicate:
    """A single ``field <operator> value`` condition."""

    field: str
    operator: Operator
    value: object


@dataclass(frozen=True)
class AnyOf:
    """Matches when at least one of ``predicates`` matches."""

    predicates: tuple[Predicate, ...]

    def __post_init__(self) -> None:
        if not self.predicates:
            raise ValueError("AnyOf requires at least one predicate")


Criterion = Union[Predicate, AnyOf]


@dataclass(frozen=True)
class PageRequest:
    """1-based page number and page size."""

    page: int = 1
    per_page: int = 15

    def __post_init__(self) -> None:
        if self.page < 1:
            raise ValueError("page must be greater than or equal to 1")
        if self.per_page < 1:
            raise ValueError("per_page must be greater than or equal to 1")

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.per_page


@dataclass(frozen=True)
class KitQuery:
    """All criteria (AND-ed) plus the requested page."""

    criteria: tuple[Criterion, ...] = ()
    page: PageRequest = field(default_factory=PageRequest)


__all__ = ["AnyOf", "Criterion", "KitQuery", "Operator", "PageRequest", "Predicate"]
