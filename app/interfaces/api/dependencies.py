"""FastAPI dependency utilities."""

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from app.domain.entities import User
from app.infrastructure.database import get_db
from app.infrastructure.repositories import UserRepository
from app.infrastructure.security import decode_access_token

UNAUTHENTICATED_MESSAGE = "Unauthenticated."

# ``/login`` takes a JSON body, so the docs only offer pasting a bearer token.
bearer_scheme = HTTPBearer(auto_error=False)


def _unauthenticated() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=UNAUTHENTICATED_MESSAGE,
        headers={"WWW-Authenticate": "Bearer"},
    )


def resolve_current_user(token: str, db: Session) -> User:
    """Resolve the authenticated user for the provided token."""

    try:
        payload = decode_access_token(token)
    except ValueError as exc:
        raise _unauthenticated() from exc

    subject = payload.get("sub")
    token_version = payload.get("ver")
    if subject is None or not isinstance(token_version, int):
        raise _unauthenticated()

    try:
        user_id = int(subject)
    except (TypeError, ValueError) as exc:
        raise _unauthenticated() from exc

    user = UserRepository(db).get(user_id)
    if user is None or not user.is_active:
        raise _unauthenticated()

    if token_version != user.token_version:
        raise _unauthenticated()

    return user


def get_current_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    db: Session = Depends(get_db),
) -> User:
    """Return the authenticated user from the bearer token."""

    if credentials is None or not credentials.credentials:
        raise _unauthenticated()
    return resolve_current_user(credentials.credentials, db)
