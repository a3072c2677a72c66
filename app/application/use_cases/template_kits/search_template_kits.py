"""Use case for the marketplace compatible extension search."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from sqlalchemy.orm import Session

from app.domain.entities import Page, TemplateKit
from app.infrastructure.repositories import TemplateKitRepository

from .filters import SEARCH_PER_PAGE, SearchFilters
from .normalization import RawValue

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ExtensionSearchResult:
    """Search page plus whether the request was answered without the store."""

    page: Page[TemplateKit]
    type_rejected: bool = False


def search_template_kits(
    session: Session,
    *,
    extension_type: RawValue = None,
    categories: RawValue = None,
    industries: RawValue = None,
    search_terms: RawValue = None,
    tags: RawValue = None,
    page: RawValue = None,
) -> ExtensionSearchResult:
    """Search active kits the way the marketplace extension search does.

    Only the ``wordpress`` extension type holds template kits; any other type
    yields an empty first page without querying the database.
    """

    filters = SearchFilters.from_raw(
        extension_type=extension_type,
        categories=categories,
        industries=industries,
        search_terms=search_terms,
        tags=tags,
        page=page,
    )
    if not filters.is_supported_type:
        logger.debug("Extension type %r has no template kits", filters.extension_type)
        return ExtensionSearchResult(
            page=Page.empty(per_page=SEARCH_PER_PAGE), type_rejected=True
        )

    kit_query = filters.to_query()
    logger.debug("Searching template kits with %s", kit_query)
    return ExtensionSearchResult(page=TemplateKitRepository(session).paginate(kit_query))
