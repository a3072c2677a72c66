"""Persistence layer for user data."""

from __future__ import annotations

from sqlalchemy import func
from sqlalchemy.orm import Session

from app.domain.entities import User
from app.infrastructure.models import UserModel


class UserRepository:
    """Provide lookups and writes for user entities."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, user_id: int) -> User | None:
        model = self.session.get(UserModel, user_id)
        return self._to_entity(model) if model else None

    def get_by_email(self, email: str) -> User | None:
        normalized_email = email.strip().lower()
        model = (
            self.session.query(UserModel)
            .filter(func.lower(UserModel.email) == normalized_email)
            .first()
        )
        return self._to_entity(model) if model else None

    def create(self, user: User) -> User:
        model = UserModel()
        self._apply_entity_to_model(model, user)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def increment_token_version(self, user_id: int) -> User:
        """Bump the token version so previously issued tokens stop validating."""

        model = self.session.get(UserModel, user_id)
        if not model:
            msg = f"User with id {user_id} not found"
            raise ValueError(msg)
        model.token_version = UserModel.token_version + 1
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    @staticmethod
    def _to_entity(model: UserModel) -> User:
        return User(
            id=model.id,
            name=model.name,
            email=model.email,
            password=model.password,
            token_version=model.token_version,
            is_active=bool(model.is_active),
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    @staticmethod
    def _apply_entity_to_model(model: UserModel, user: User) -> None:
        model.name = user.name
        model.email = user.email
        model.password = user.password
        model.token_version = user.token_version
        model.is_active = user.is_active


__all__ = ["UserRepository"]
