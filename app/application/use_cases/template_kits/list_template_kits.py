"""Use case for the plain template kit listing."""

import logging

from sqlalchemy.orm import Session

from app.config import get_settings
from app.domain.entities import Page, TemplateKit
from app.infrastructure.repositories import TemplateKitRepository

from .filters import ListingFilters
from .normalization import RawValue

logger = logging.getLogger(__name__)


def list_template_kits(
    session: Session,
    *,
    category: RawValue = None,
    is_active: RawValue = None,
    search: RawValue = None,
    page: RawValue = None,
    per_page: RawValue = None,
) -> Page[TemplateKit]:
    """Return one page of kits filtered by category, status and name."""

    settings = get_settings()
    filters = ListingFilters.from_raw(
        category=category,
        is_active=is_active,
        search=search,
        page=page,
        per_page=per_page,
        default_per_page=settings.default_per_page,
        max_per_page=settings.max_per_page,
    )
    kit_query = filters.to_query()
    logger.debug("Listing template kits with %s", kit_query)
    return TemplateKitRepository(session).paginate(kit_query)
