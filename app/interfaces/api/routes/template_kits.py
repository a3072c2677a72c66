"""Routes to manage the template kit catalog."""

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from app.application.use_cases.template_kits import (
    create_template_kit as create_template_kit_uc,
    delete_template_kit as delete_template_kit_uc,
    get_template_kit as get_template_kit_uc,
    list_template_kits as list_template_kits_uc,
    update_template_kit as update_template_kit_uc,
)
from app.domain.entities import Page, TemplateKit, User
from app.domain.errors import TemplateKitNotFoundError
from app.infrastructure.database import get_db
from app.interfaces.api.dependencies import get_current_user
from app.interfaces.api.schemas import (
    MessageResponse,
    TemplateKitCreate,
    TemplateKitEnvelope,
    TemplateKitMessageEnvelope,
    TemplateKitPage,
    TemplateKitRead,
    TemplateKitUpdate,
)

router = APIRouter(prefix="/template-kits", tags=["template-kits"])


def to_read_model(kit: TemplateKit) -> TemplateKitRead:
    return TemplateKitRead.model_validate(kit)


def _not_found(exc: TemplateKitNotFoundError) -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc))


def _parse_kit_id(raw_id: str) -> int:
    """Return the numeric id; ids that cannot exist are reported as not found."""

    try:
        return int(raw_id)
    except ValueError as exc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Template Kit not found"
        ) from exc


def _to_page_model(page: Page[TemplateKit]) -> TemplateKitPage:
    return TemplateKitPage(
        data=[to_read_model(kit) for kit in page.items],
        current_page=page.page,
        per_page=page.per_page,
        total=page.total,
        last_page=page.last_page,
        from_=page.first_position,
        to=page.last_position,
    )


@router.get("", response_model=TemplateKitPage)
def list_template_kits(
    category: str | None = Query(None, description="Exact category match"),
    is_active: str | None = Query(
        None, description="1/true/on/yes for active kits, anything else for inactive"
    ),
    search: str | None = Query(None, description="Case-insensitive match on the name"),
    per_page: str | None = Query(None, description="Kits per page (default 15)"),
    page: str | None = Query(None, description="1-based page number"),
    db: Session = Depends(get_db),
) -> TemplateKitPage:
    """Return a page of template kits filtered by the given parameters."""

    result = list_template_kits_uc(
        db,
        category=category,
        is_active=is_active,
        search=search,
        page=page,
        per_page=per_page,
    )
    return _to_page_model(result)


@router.get("/{kit_id}", response_model=TemplateKitEnvelope)
def read_template_kit(kit_id: str, db: Session = Depends(get_db)) -> TemplateKitEnvelope:
    """Return a single template kit."""

    try:
        kit = get_template_kit_uc(db, _parse_kit_id(kit_id))
    except TemplateKitNotFoundError as exc:
        raise _not_found(exc) from exc
    return TemplateKitEnvelope(data=to_read_model(kit))


@router.post(
    "",
    response_model=TemplateKitMessageEnvelope,
    status_code=status.HTTP_201_CREATED,
)
def create_template_kit(
    kit_in: TemplateKitCreate,
    db: Session = Depends(get_db),
    _: User = Depends(get_current_user),
) -> TemplateKitMessageEnvelope:
    """Register a new template kit."""

    kit = create_template_kit_uc(db, **kit_in.model_dump())
    return TemplateKitMessageEnvelope(
        message="Template Kit created successfully", data=to_read_model(kit)
    )


@router.put("/{kit_id}", response_model=TemplateKitMessageEnvelope)
def update_template_kit(
    kit_id: str,
    kit_in: TemplateKitUpdate,
    db: Session = Depends(get_db),
    _: User = Depends(get_current_user),
) -> TemplateKitMessageEnvelope:
    """Update only the fields present in the request body."""

    try:
        kit = update_template_kit_uc(
            db, _parse_kit_id(kit_id), kit_in.model_dump(exclude_unset=True)
        )
    except TemplateKitNotFoundError as exc:
        raise _not_found(exc) from exc
    return TemplateKitMessageEnvelope(
        message="Template Kit updated successfully", data=to_read_model(kit)
    )


@router.delete("/{kit_id}", response_model=MessageResponse)
def delete_template_kit(
    kit_id: str,
    _: User = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> MessageResponse:
    """Permanently remove a template kit."""

    try:
        delete_template_kit_uc(db, _parse_kit_id(kit_id))
    except TemplateKitNotFoundError as exc:
        raise _not_found(exc) from exc
    return MessageResponse(message="Template Kit deleted successfully")
