"""SQLAlchemy model for template kits."""

from sqlalchemy import Boolean, Column, DateTime, Integer, Numeric, String, Text, func
from sqlalchemy.dialects.mssql import JSON as MSSQLJSON
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.sql import expression
from sqlalchemy.types import JSON

from app.infrastructure.database import Base

_string_list_type = (
    JSONB(none_as_null=True)
    .with_variant(JSON(none_as_null=True), "sqlite")
    .with_variant(MSSQLJSON(none_as_null=True), "mssql")
    .with_variant(JSON(none_as_null=True), "mysql", "mariadb")
)


class TemplateKitModel(Base):
    """Database representation of a template kit."""

    __tablename__ = "template_kit"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    category = Column(String(255), nullable=True, index=True)
    author = Column(String(255), nullable=True)
    version = Column(String(50), nullable=True)
    thumbnail = Column(String(500), nullable=True)
    tags = Column(_string_list_type, nullable=True)
    industries = Column(_string_list_type, nullable=True)
    files = Column(_string_list_type, nullable=True)
    price = Column(Numeric(10, 2, asdecimal=True), nullable=True)
    is_active = Column(
        Boolean,
        nullable=False,
        default=True,
        server_default=expression.true(),
        index=True,
    )
    created_at = Column(DateTime, nullable=False, server_default=func.now())
    updated_at = Column(
        DateTime, nullable=False, server_default=func.now(), onupdate=func.now()
    )


__all__ = ["TemplateKitModel"]
