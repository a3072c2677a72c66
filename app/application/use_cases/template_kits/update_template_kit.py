"""Use case for updating template kits."""

import logging
from collections.abc import Mapping
from dataclasses import replace

from sqlalchemy.orm import Session

from app.domain.entities import TemplateKit
from app.domain.errors import TemplateKitNotFoundError
from app.infrastructure.repositories import TemplateKitRepository

from .validators import normalize_changes

logger = logging.getLogger(__name__)


def update_template_kit(
    session: Session, kit_id: int, changes: Mapping[str, object]
) -> TemplateKit:
    """Apply ``changes`` to the kit, leaving every omitted field untouched.

    Raises:
        TemplateKitNotFoundError: If the kit does not exist.
        ValidationFailed: If a supplied field is invalid.
    """

    repository = TemplateKitRepository(session)
    current = repository.get(kit_id)
    if current is None:
        raise TemplateKitNotFoundError(kit_id)

    normalized = normalize_changes(changes)
    if not normalized:
        return current

    saved = repository.update(replace(current, **normalized))
    logger.info("Template kit %s updated (%s)", kit_id, ", ".join(sorted(normalized)))
    return saved
