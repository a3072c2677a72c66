"""Domain entity representing a template kit."""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal


@dataclass
class TemplateKit:
    """Packaged website template offered in the catalog."""

    id: int | None
    name: str
    description: str | None = None
    category: str | None = None
    author: str | None = None
    version: str | None = None
    thumbnail: str | None = None
    tags: list[str] | None = None
    industries: list[str] | None = None
    files: list[str] | None = None
    price: Decimal | None = None
    is_active: bool = True
    created_at: datetime | None = None
    updated_at: datetime | None = field(default=None)


__all__ = ["TemplateKit"]
