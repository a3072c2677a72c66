"""Domain entity representing a user."""

from dataclasses import dataclass
from datetime import datetime


@dataclass
class User:
    """Account allowed to manage the template kit catalog."""

    id: int | None
    name: str
    email: str
    password: str
    token_version: int
    is_active: bool
    created_at: datetime | None
    updated_at: datetime | None


__all__ = ["User"]
