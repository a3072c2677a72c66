"""Use case for deleting template kits."""

import logging

from sqlalchemy.orm import Session

from app.domain.errors import TemplateKitNotFoundError
from app.infrastructure.repositories import TemplateKitRepository

logger = logging.getLogger(__name__)


def delete_template_kit(session: Session, kit_id: int) -> None:
    """Permanently remove the kit identified by ``kit_id``."""

    repository = TemplateKitRepository(session)
    if repository.get(kit_id) is None:
        raise TemplateKitNotFoundError(kit_id)

    repository.delete(kit_id)
    logger.info("Template kit %s deleted", kit_id)
