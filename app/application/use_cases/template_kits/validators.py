"""Validation helpers shared by the template kit write use cases."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from app.domain.errors import ValidationFailed

PRICE_QUANTUM = Decimal("0.01")
# Largest value a NUMERIC(10, 2) column holds.
MAX_PRICE = Decimal("99999999.99")

MAX_LENGTHS: Mapping[str, int] = {
    "name": 255,
    "category": 255,
    "author": 255,
    "version": 50,
    "thumbnail": 500,
}
LIST_FIELDS = ("tags", "industries", "files")
EDITABLE_FIELDS = frozenset(
    {
        "name",
        "description",
        "category",
        "author",
        "version",
        "thumbnail",
        "tags",
        "industries",
        "files",
        "price",
        "is_active",
    }
)


def normalize_name(name: object) -> str:
    """Return the trimmed kit name or raise when it is missing or blank."""

    if name is None:
        raise ValidationFailed.for_field("name", "The name field is required.")
    normalized = str(name).strip()
    if not normalized:
        raise ValidationFailed.for_field("name", "The name field is required.")
    _ensure_max_length("name", normalized)
    return normalized


def normalize_optional_string(field: str, value: object) -> str | None:
    if value is None:
        return None
    normalized = str(value)
    _ensure_max_length(field, normalized)
    return normalized


def normalize_string_list(field: str, values: Iterable[object] | None) -> list[str] | None:
    if values is None:
        return None
    if isinstance(values, (str, bytes)):
        raise ValidationFailed.for_field(field, f"The {field} field must be an array.")
    return [str(value) for value in values]


def normalize_price(price: object) -> Decimal | None:
    """Round ``price`` half-up to two decimals, rejecting values a NUMERIC(10, 2) cannot hold."""

    if price is None:
        return None
    try:
        amount = Decimal(str(price))
    except InvalidOperation as exc:
        raise ValidationFailed.for_field("price", "The price field must be a number.") from exc
    if not amount.is_finite():
        raise ValidationFailed.for_field("price", "The price field must be a number.")
    if amount < 0:
        raise ValidationFailed.for_field("price", "The price field must be at least 0.")
    if amount >= MAX_PRICE + PRICE_QUANTUM / 2:
        raise ValidationFailed.for_field(
            "price", f"The price field must not be greater than {MAX_PRICE}."
        )
    return amount.quantize(PRICE_QUANTUM, rounding=ROUND_HALF_UP)


def normalize_changes(changes: Mapping[str, object]) -> dict[str, object]:
    """Validate a partial set of kit fields and return their normalized values."""

    unknown = sorted(set(changes) - EDITABLE_FIELDS)
    if unknown:
        raise ValidationFailed(
            {field: [f"The {field} field is not editable."] for field in unknown}
        )

    normalized: dict[str, object] = {}
    for field, value in changes.items():
        if field == "name":
            normalized[field] = normalize_name(value)
        elif field == "price":
            normalized[field] = normalize_price(value)
        elif field in LIST_FIELDS:
            normalized[field] = normalize_string_list(field, value)  # type: ignore[arg-type]
        elif field == "is_active":
            if value is not None:
                normalized[field] = bool(value)
        else:
            normalized[field] = normalize_optional_string(field, value)
    return normalized


def _ensure_max_length(field: str, value: str) -> None:
    limit = MAX_LENGTHS.get(field)
    if limit is not None and len(value) > limit:
        raise ValidationFailed.for_field(
            field, f"The {field} field must not be greater than {limit} characters."
        )


__all__ = [
    "EDITABLE_FIELDS",
    "LIST_FIELDS",
    "normalize_changes",
    "normalize_name",
    "normalize_optional_string",
    "normalize_price",
    "normalize_string_list",
]
