"""SQLAlchemy model for the users table."""

from sqlalchemy import Column, DateTime, Integer, String

from tasktrail.infrastructure.database import Base
from tasktrail.utils import now_utc


class UserModel(Base):
    """Database representation of a registered user."""

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String(255), nullable=False, unique=True, index=True)
    password = Column(String(255), nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False, default=now_utc)


__all__ = ["UserModel"]
