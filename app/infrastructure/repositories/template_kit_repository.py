"""Persistence layer for template kits."""

from __future__ import annotations

import json
import logging

from sqlalchemy import exists, literal, or_, select
from sqlalchemy.orm import Session
from sqlalchemy.sql import func
from sqlalchemy.sql.elements import ColumnElement

from app.domain.entities import Page, TemplateKit
from app.domain.query import AnyOf, Criterion, KitQuery, Operator, Predicate
from app.infrastructure.models import TemplateKitModel

logger = logging.getLogger(__name__)

_LIKE_ESCAPE = "\\"

_SCALAR_COLUMNS = {
    "name": TemplateKitModel.name,
    "description": TemplateKitModel.description,
    "category": TemplateKitModel.category,
    "author": TemplateKitModel.author,
    "version": TemplateKitModel.version,
    "is_active": TemplateKitModel.is_active,
}
_LIST_COLUMNS = {
    "tags": TemplateKitModel.tags,
    "industries": TemplateKitModel.industries,
}


def escape_like(value: str, *, dialect: str = "default") -> str:
    """Escape ``value`` so it is matched literally inside a ``LIKE`` pattern."""

    escaped = (
        value.replace(_LIKE_ESCAPE, _LIKE_ESCAPE * 2)
        .replace("%", _LIKE_ESCAPE + "%")
        .replace("_", _LIKE_ESCAPE + "_")
    )
    if dialect == "mssql":
        # SQL Server also treats bracket expressions as wildcards.
        escaped = escaped.replace("[", _LIKE_ESCAPE + "[")
    return escaped


class TemplateKitRepository:
    """Provide CRUD and filtered pagination for template kits."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def paginate(self, kit_query: KitQuery) -> Page[TemplateKit]:
        """Return the page of kits matching every criterion of ``kit_query``."""

        conditions = [self._criterion_to_clause(c) for c in kit_query.criteria]
        query = self.session.query(TemplateKitModel).filter(*conditions)

        total = query.order_by(None).count()
        page_request = kit_query.page
        models: list[TemplateKitModel] = []
        if page_request.offset < total:
            models = (
                query.order_by(TemplateKitModel.id.asc())
                .offset(page_request.offset)
                .limit(page_request.per_page)
                .all()
            )
        return Page(
            items=[self._to_entity(model) for model in models],
            page=page_request.page,
            per_page=page_request.per_page,
            total=total,
        )

    def get(self, kit_id: int) -> TemplateKit | None:
        model = self.session.get(TemplateKitModel, kit_id)
        return self._to_entity(model) if model else None

    def create(self, kit: TemplateKit) -> TemplateKit:
        model = TemplateKitModel()
        self._apply_entity_to_model(model, kit)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def update(self, kit: TemplateKit) -> TemplateKit:
        model = self.session.get(TemplateKitModel, kit.id)
        if not model:
            msg = f"Template kit with id {kit.id} not found"
            raise ValueError(msg)
        self._apply_entity_to_model(model, kit)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def delete(self, kit_id: int) -> None:
        model = self.session.get(TemplateKitModel, kit_id)
        if not model:
            msg = f"Template kit with id {kit_id} not found"
            raise ValueError(msg)
        self.session.delete(model)
        self.session.commit()

    def _dialect_name(self) -> str:
        return self.session.get_bind().dialect.name

    def _criterion_to_clause(self, criterion: Criterion) -> ColumnElement[bool]:
        if isinstance(criterion, AnyOf):
            return or_(*(self._predicate_to_clause(p) for p in criterion.predicates))
        return self._predicate_to_clause(criterion)

    def _predicate_to_clause(self, predicate: Predicate) -> ColumnElement[bool]:
        if predicate.operator is Operator.HAS_ELEMENT:
            column = _LIST_COLUMNS.get(predicate.field)
            if column is None:
                raise ValueError(f"Field '{predicate.field}' is not a list field")
            return self._has_element(column, str(predicate.value))

        column = _SCALAR_COLUMNS.get(predicate.field)
        if column is None:
            raise ValueError(f"Field '{predicate.field}' cannot be filtered")
        if predicate.operator is Operator.EQUALS:
            return column == predicate.value
        if predicate.operator is Operator.CONTAINS:
            pattern = escape_like(str(predicate.value), dialect=self._dialect_name())
            return column.ilike(f"%{pattern}%", escape=_LIKE_ESCAPE)
        raise ValueError(f"Unsupported operator {predicate.operator!r}")

    def _has_element(self, column, value: str) -> ColumnElement[bool]:
        """Return a clause matching rows whose JSON array ``column`` holds ``value``."""

        dialect = self._dialect_name()
        if dialect == "postgresql":
            return column.contains([value])
        if dialect in {"mysql", "mariadb"}:
            return func.json_contains(column, json.dumps(value)) == 1

        table_function = func.openjson if dialect == "mssql" else func.json_each
        elements = table_function(column).table_valued("value", joins_implicitly=True)
        return exists(
            select(literal(1)).select_from(elements).where(elements.c.value == value)
        )

    @staticmethod
    def _to_entity(model: TemplateKitModel) -> TemplateKit:
        return TemplateKit(
            id=model.id,
            name=model.name,
            description=model.description,
            category=model.category,
            author=model.author,
            version=model.version,
            thumbnail=model.thumbnail,
            tags=_copy_list(model.tags),
            industries=_copy_list(model.industries),
            files=_copy_list(model.files),
            price=model.price,
            is_active=bool(model.is_active),
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    @staticmethod
    def _apply_entity_to_model(model: TemplateKitModel, kit: TemplateKit) -> None:
        model.name = kit.name
        model.description = kit.description
        model.category = kit.category
        model.author = kit.author
        model.version = kit.version
        model.thumbnail = kit.thumbnail
        model.tags = _copy_list(kit.tags)
        model.industries = _copy_list(kit.industries)
        model.files = _copy_list(kit.files)
        model.price = kit.price
        model.is_active = kit.is_active


def _copy_list(values: list[str] | None) -> list[str] | None:
    return list(values) if values is not None else None


__all__ = ["TemplateKitRepository", "escape_like"]
