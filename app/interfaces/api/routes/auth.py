"""Endpoints for registering, logging in and logging out API users."""

import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from app.application.use_cases.users import (
    AuthenticationStatus,
    authenticate_user,
    create_user,
    logout_user,
)
from app.domain.entities import User
from app.infrastructure.database import get_db
from app.infrastructure.security import create_access_token
from app.interfaces.api.dependencies import get_current_user
from app.interfaces.api.schemas import (
    LoginRequest,
    MessageResponse,
    RegisterRequest,
    TokenResponse,
    UserRead,
)

router = APIRouter(tags=["auth"])
logger = logging.getLogger(__name__)

INVALID_CREDENTIALS_MESSAGE = "Invalid credentials"


def _issue_token(user: User) -> str:
    return create_access_token(data={"sub": str(user.id), "ver": user.token_version})


def _to_read_model(user: User) -> UserRead:
    return UserRead.model_validate(user)


@router.post("/register", response_model=TokenResponse, status_code=status.HTTP_201_CREATED)
def register(payload: RegisterRequest, db: Session = Depends(get_db)) -> TokenResponse:
    """Create an account and return an access token for it."""

    user = create_user(
        db, name=payload.name, email=str(payload.email), password=payload.password
    )
    return TokenResponse(
        message="User registered successfully",
        user=_to_read_model(user),
        access_token=_issue_token(user),
    )


@router.post("/login", response_model=TokenResponse)
def login(payload: LoginRequest, db: Session = Depends(get_db)) -> TokenResponse:
    """Exchange email and password for a bearer token."""

    user, auth_status = authenticate_user(db, str(payload.email), payload.password)
    if auth_status is not AuthenticationStatus.SUCCESS or user is None:
        logger.info("Rejected login for %s (%s)", payload.email, auth_status.name)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=INVALID_CREDENTIALS_MESSAGE,
            headers={"WWW-Authenticate": "Bearer"},
        )

    return TokenResponse(
        message="Login successful",
        user=_to_read_model(user),
        access_token=_issue_token(user),
    )


@router.post("/logout", response_model=MessageResponse)
def logout(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> MessageResponse:
    """Revoke every token issued to the authenticated user."""

    logout_user(db, current_user.id)
    return MessageResponse(message="Logged out successfully")


@router.get("/user", response_model=UserRead)
def read_current_user(current_user: User = Depends(get_current_user)) -> UserRead:
    """Return the authenticated user."""

    return _to_read_model(current_user)
