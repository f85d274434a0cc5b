"""SQLAlchemy model for audit records of task mutations."""

from sqlalchemy import Column, DateTime, ForeignKey, Index, Integer, String
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.types import JSON

from tasktrail.infrastructure.database import Base
from tasktrail.utils import now_utc

_audit_json_type = JSON().with_variant(JSONB(), "postgresql")


class AuditLogModel(Base):
    """Database representation of audit events.

    ``todo_id`` has no foreign key: entries outlive the task they describe.
    """

    __tablename__ = "audit_logs"
    __table_args__ = (
        Index("ix_audit_logs_user_id_created_at_id", "user_id", "created_at", "id"),
    )

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False)
    todo_id = Column(Integer, nullable=False, index=True)
    action = Column(String(10), nullable=False)
    details = Column(_audit_json_type, nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False, default=now_utc)


__all__ = ["AuditLogModel"]
