"""Domain entities exposed by the application."""

from .page import Page
from .template_kit import TemplateKit
from .user import User

__all__ = [
    "Page",
    "TemplateKit",
    "User",
]
