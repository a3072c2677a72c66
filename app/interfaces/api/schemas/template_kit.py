"""Schemas for template kit and extension search endpoints."""

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_serializer

MAX_PRICE = Decimal("99999999.99")


def _reject_blank_name(value: str | None) -> str | None:
    if value is None or not value.strip():
        raise ValueError("The name field is required.")
    return value


class TemplateKitFields(BaseModel):
    """Optional attributes shared by create and update payloads."""

    description: str | None = None
    category: str | None = Field(default=None, max_length=255)
    author: str | None = Field(default=None, max_length=255)
    version: str | None = Field(default=None, max_length=50)
    thumbnail: str | None = Field(default=None, max_length=500)
    tags: list[str] | None = None
    industries: list[str] | None = None
    files: list[str] | None = None
    price: Decimal | None = Field(default=None, ge=0, le=MAX_PRICE)
    is_active: bool | None = None


class TemplateKitCreate(TemplateKitFields):
    """Payload required to create a template kit."""

    name: str = Field(..., max_length=255)

    @field_validator("name")
    @classmethod
    def _validate_name(cls, value: str) -> str:
        return _reject_blank_name(value)


class TemplateKitUpdate(TemplateKitFields):
    """Partial payload; only the fields present in the request are applied."""

    name: str | None = Field(default=None, max_length=255)

    # Read-only keys such as ``id`` are dropped so fetched data can be sent back.
    model_config = ConfigDict(extra="ignore")

    # Runs only when ``name`` is supplied, so omitting it stays valid.
    @field_validator("name")
    @classmethod
    def _validate_name(cls, value: str | None) -> str | None:
        return _reject_blank_name(value)


class TemplateKitRead(BaseModel):
    id: int
    name: str
    description: str | None
    category: str | None
    author: str | None
    version: str | None
    thumbnail: str | None
    tags: list[str] | None
    industries: list[str] | None
    files: list[str] | None
    price: Decimal | None
    is_active: bool
    created_at: datetime | None
    updated_at: datetime | None

    model_config = ConfigDict(from_attributes=True)


class TemplateKitEnvelope(BaseModel):
    data: TemplateKitRead


class TemplateKitMessageEnvelope(BaseModel):
    message: str
    data: TemplateKitRead


class MessageResponse(BaseModel):
    message: str


class TemplateKitPage(BaseModel):
    """Page object returned by the plain listing."""

    data: list[TemplateKitRead]
    current_page: int
    per_page: int
    total: int
    last_page: int
    from_: int | None = Field(default=None, alias="from")
    to: int | None = None

    model_config = ConfigDict(populate_by_name=True)


class ExtensionSearchMeta(BaseModel):
    current_page: int
    total: int
    per_page: int
    last_page: int | None = None

    @model_serializer(mode="wrap")
    def _omit_unknown_last_page(self, handler):
        data = handler(self)
        if self.last_page is None:
            data.pop("last_page", None)
        return data


class ExtensionSearchResponse(BaseModel):
    data: list[TemplateKitRead]
    meta: ExtensionSearchMeta
