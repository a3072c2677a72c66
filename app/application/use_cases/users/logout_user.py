"""Use case for revoking a user's issued access tokens."""

import logging

from sqlalchemy.orm import Session

from app.domain.entities import User
from app.infrastructure.repositories import UserRepository

logger = logging.getLogger(__name__)


def logout_user(session: Session, user_id: int) -> User:
    """Invalidate every token issued to the user so far."""

    user = UserRepository(session).increment_token_version(user_id)
    logger.info("User %s logged out", user_id)
    return user
