"""Use cases for managing users."""

from .authenticate_user import AuthenticationStatus, authenticate_user
from .create_user import create_user
from .logout_user import logout_user

__all__ = [
    "AuthenticationStatus",
    "authenticate_user",
    "create_user",
    "logout_user",
]
