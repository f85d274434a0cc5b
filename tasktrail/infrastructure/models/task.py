"""SQLAlchemy model for the todos table."""

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.sql import expression

from tasktrail.infrastructure.database import Base
from tasktrail.utils import now_utc


class TaskModel(Base):
    """Database representation of a user's task."""

    __tablename__ = "todos"
    # Ids must never be reused: audit entries keep pointing at deleted tasks.
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(200), nullable=False)
    description = Column(Text, nullable=True)
    completed = Column(
        Boolean,
        nullable=False,
        default=False,
        server_default=expression.false(),
    )
    user_id = Column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    created_at = Column(DateTime(timezone=True), nullable=False, default=now_utc)


__all__ = ["TaskModel"]
