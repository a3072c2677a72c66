"""Use case for retrieving a template kit."""

from sqlalchemy.orm import Session

from app.domain.entities import TemplateKit
from app.domain.errors import TemplateKitNotFoundError
from app.infrastructure.repositories import TemplateKitRepository


def get_template_kit(session: Session, kit_id: int) -> TemplateKit:
    """Return the kit identified by ``kit_id`` or raise an error."""

    kit = TemplateKitRepository(session).get(kit_id)
    if kit is None:
        raise TemplateKitNotFoundError(kit_id)
    return kit
