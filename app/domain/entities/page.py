"""Domain entity describing one page of a paginated result."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Page(Generic[T]):
    """A bounded slice of results plus its position in the full result set."""

    items: Sequence[T]
    page: int
    per_page: int
    total: int

    @property
    def last_page(self) -> int:
        return max(1, math.ceil(self.total / self.per_page))

    @property
    def first_position(self) -> int | None:
        """1-based position of the first item on this page."""

        if not self.items:
            return None
        return (self.page - 1) * self.per_page + 1

    @property
    def last_position(self) -> int | None:
        if not self.items:
            return None
        return (self.page - 1) * self.per_page + len(self.items)

    @classmethod
    def empty(cls, *, page: int = 1, per_page: int) -> "Page[T]":
        return cls(items=(), page=page, per_page=per_page, total=0)


__all__ = ["Page"]
