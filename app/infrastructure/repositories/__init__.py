"""Repository implementations for infrastructure layer."""

from .template_kit_repository import TemplateKitRepository
from .user_repository import UserRepository

__all__ = [
    "TemplateKitRepository",
    "UserRepository",
]
