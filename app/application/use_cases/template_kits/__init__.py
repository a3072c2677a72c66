"""Template kit use cases."""

from .create_template_kit import create_template_kit
from .delete_template_kit import delete_template_kit
from .get_template_kit import get_template_kit
from .list_template_kits import list_template_kits
from .search_template_kits import ExtensionSearchResult, search_template_kits
from .update_template_kit import update_template_kit

__all__ = [
    "ExtensionSearchResult",
    "create_template_kit",
    "delete_template_kit",
    "get_template_kit",
    "list_template_kits",
    "search_template_kits",
    "update_template_kit",
]
