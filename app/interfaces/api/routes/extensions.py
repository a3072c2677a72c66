"""Marketplace compatible extension search."""

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from app.application.use_cases.template_kits import search_template_kits
from app.infrastructure.database import get_db
from app.interfaces.api.routes.template_kits import to_read_model
from app.interfaces.api.schemas import ExtensionSearchMeta, ExtensionSearchResponse

router = APIRouter(prefix="/extensions", tags=["extensions"])


def _list_query(description: str) -> list[str]:
    return Query([], description=description)


def _bracket_query(name: str) -> list[str]:
    # PHP style ``name[]=value`` parameters sent by marketplace clients.
    return Query([], alias=f"{name}[]", include_in_schema=False)


@router.get("/search", response_model=ExtensionSearchResponse)
def search_extensions(
    extension_type: str | None = Query(
        None, alias="type", description="Only 'wordpress' holds template kits"
    ),
    categories: list[str] = _list_query("Exact category match"),
    categories_brackets: list[str] = _bracket_query("categories"),
    industries: list[str] = _list_query("Comma separated or repeated industries"),
    industries_brackets: list[str] = _bracket_query("industries"),
    search_terms: list[str] = _list_query("Matched against name, description and author"),
    search_terms_brackets: list[str] = _bracket_query("search_terms"),
    tags: list[str] = _list_query("Comma separated or repeated tags"),
    tags_brackets: list[str] = _bracket_query("tags"),
    page: str | None = Query(None, description="1-based page number, at most 50"),
    db: Session = Depends(get_db),
) -> ExtensionSearchResponse:
    """Search active template kits using the marketplace query contract."""

    result = search_template_kits(
        db,
        extension_type=extension_type,
        categories=categories + categories_brackets,
        industries=industries + industries_brackets,
        search_terms=search_terms + search_terms_brackets,
        tags=tags + tags_brackets,
        page=page,
    )
    found = result.page
    meta = ExtensionSearchMeta(
        current_page=found.page,
        total=found.total,
        per_page=found.per_page,
        last_page=None if result.type_rejected else found.last_page,
    )
    return ExtensionSearchResponse(
        data=[to_read_model(kit) for kit in found.items], meta=meta
    )
