"""Persistence layer for user data."""

from __future__ import annotations

from sqlalchemy.orm import Session

from tasktrail.domain.entities import User
from tasktrail.infrastructure.models import UserModel
from tasktrail.utils import ensure_utc, now_utc


class UserRepository:
    """Provide lookup and creation of user entities.

    Writes are flushed, not committed; the calling use case owns the
    transaction.
    """

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, user_id: int) -> User | None:
        model = self.session.get(UserModel, user_id)
        return self._to_entity(model) if model else None

    def get_by_email(self, email: str) -> User | None:
        model = self.session.query(UserModel).filter_by(email=email).first()
        return self._to_entity(model) if model else None

    def create(self, user: User) -> User:
        model = UserModel(
            email=user.email,
            password=user.password,
            created_at=user.created_at or now_utc(),
        )
        self.session.add(model)
        self.session.flush()
        return self._to_entity(model)

    @staticmethod
    def _to_entity(model: UserModel) -> User:
        return User(
            id=model.id,
            email=model.email,
            password=model.password,
            created_at=ensure_utc(model.created_at),
        )


__all__ = ["UserRepository"]
