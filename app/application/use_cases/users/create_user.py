"""Use case for creating users."""

import logging

from sqlalchemy.orm import Session

from app.domain.entities import User
from app.domain.errors import ValidationFailed
from app.infrastructure.repositories import UserRepository
from app.infrastructure.security import get_password_hash

from .validators import normalize_email, normalize_user_name

logger = logging.getLogger(__name__)

MIN_PASSWORD_LENGTH = 8


def create_user(
    session: Session,
    *,
    name: str,
    email: str,
    password: str,
) -> User:
    """Create a new user ensuring unique email addresses."""

    repository = UserRepository(session)

    normalized_email = normalize_email(email)
    if repository.get_by_email(normalized_email):
        raise ValidationFailed.for_field("email", "The email has already been taken.")

    if len(password) < MIN_PASSWORD_LENGTH:
        raise ValidationFailed.for_field(
            "password",
            f"The password field must be at least {MIN_PASSWORD_LENGTH} characters.",
        )

    user = User(
        id=None,
        name=normalize_user_name(name),
        email=normalized_email,
        password=get_password_hash(password),
        token_version=0,
        is_active=True,
        created_at=None,
        updated_at=None,
    )

    saved = repository.create(user)
    logger.info("User %s registered", saved.id)
    return saved
