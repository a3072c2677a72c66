"""Use case for creating template kits."""

import logging
from collections.abc import Sequence
from decimal import Decimal

from sqlalchemy.orm import Session

from app.domain.entities import TemplateKit
from app.infrastructure.repositories import TemplateKitRepository

from .validators import (
    normalize_name,
    normalize_optional_string,
    normalize_price,
    normalize_string_list,
)

logger = logging.getLogger(__name__)


def create_template_kit(
    session: Session,
    *,
    name: str,
    description: str | None = None,
    category: str | None = None,
    author: str | None = None,
    version: str | None = None,
    thumbnail: str | None = None,
    tags: Sequence[str] | None = None,
    industries: Sequence[str] | None = None,
    files: Sequence[str] | None = None,
    price: Decimal | float | str | None = None,
    is_active: bool | None = None,
) -> TemplateKit:
    """Create a kit; it is active unless ``is_active`` is explicitly false."""

    kit = TemplateKit(
        id=None,
        name=normalize_name(name),
        description=normalize_optional_string("description", description),
        category=normalize_optional_string("category", category),
        author=normalize_optional_string("author", author),
        version=normalize_optional_string("version", version),
        thumbnail=normalize_optional_string("thumbnail", thumbnail),
        tags=normalize_string_list("tags", tags),
        industries=normalize_string_list("industries", industries),
        files=normalize_string_list("files", files),
        price=normalize_price(price),
        is_active=True if is_active is None else bool(is_active),
    )

    saved = TemplateKitRepository(session).create(kit)
    logger.info("Template kit %s created", saved.id)
    return saved
