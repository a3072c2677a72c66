"""Common validation helpers for user use cases."""

from app.domain.errors import ValidationFailed

MAX_NAME_LENGTH = 255


def normalize_email(email: str) -> str:
    """Return a lower-cased address or raise ``ValidationFailed``."""

    normalized = email.strip()
    if normalized.count("@") != 1:
        raise ValidationFailed.for_field("email", "The email field must be a valid email address.")

    local_part, domain = normalized.split("@", 1)
    if not local_part or not domain:
        raise ValidationFailed.for_field("email", "The email field must be a valid email address.")

    return f"{local_part}@{domain}".lower()


def normalize_user_name(name: str) -> str:
    normalized = name.strip()
    if not normalized:
        raise ValidationFailed.for_field("name", "The name field is required.")
    if len(normalized) > MAX_NAME_LENGTH:
        raise ValidationFailed.for_field(
            "name", f"The name field must not be greater than {MAX_NAME_LENGTH} characters."
        )
    return normalized
