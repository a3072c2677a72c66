"""Domain level exceptions raised by use cases."""

from __future__ import annotations

from collections.abc import Mapping, Sequence


class TemplateKitNotFoundError(ValueError):
    """Raised when a template kit id does not exist."""

    def __init__(self, kit_id: int) -> None:
        self.kit_id = kit_id
        super().__init__("Template Kit not found")


class ValidationFailed(ValueError):
    """Raised when input data is rejected; carries messages keyed by field."""

    def __init__(self, errors: Mapping[str, Sequence[str]]) -> None:
        self.errors = {field: list(messages) for field, messages in errors.items()}
        super().__init__("Validation error")

    @classmethod
    def for_field(cls, field: str, message: str) -> "ValidationFailed":
        return cls({field: [message]})


__all__ = ["TemplateKitNotFoundError", "ValidationFailed"]
