"""Aggregate application use cases."""

from .template_kits import (
    create_template_kit,
    delete_template_kit,
    get_template_kit,
    list_template_kits,
    search_template_kits,
    update_template_kit,
)
from .users import authenticate_user, create_user, logout_user

__all__ = [
    "authenticate_user",
    "create_template_kit",
    "create_user",
    "delete_template_kit",
    "get_template_kit",
    "list_template_kits",
    "logout_user",
    "search_template_kits",
    "update_template_kit",
]
