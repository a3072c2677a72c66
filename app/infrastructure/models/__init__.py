"""ORM models used by the application infrastructure."""

from .template_kit import TemplateKitModel
from .user import UserModel

__all__ = [
    "TemplateKitModel",
    "UserModel",
]
