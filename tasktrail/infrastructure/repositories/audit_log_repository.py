"""Persistence layer for audit log records."""

from __future__ import annotations

from typing import Any

from sqlalchemy import desc
from sqlalchemy.orm import Session

from tasktrail.domain.entities import AuditAction, AuditLog
from tasktrail.infrastructure.models import AuditLogModel, TaskModel
from tasktrail.utils import ensure_utc, now_utc


class AuditLogRepository:
    """Append and read :class:`AuditLog` entries.

    The log is append-only, so there is deliberately no update or delete.
    """

    def __init__(self, session: Session) -> None:
        self.session = session

    def create(self, entry: AuditLog) -> AuditLog:
        model = AuditLogModel(
            user_id=entry.user_id,
            todo_id=entry.todo_id,
            action=AuditAction(entry.action).value,
            details=dict(entry.details),
            created_at=entry.created_at or now_utc(),
        )
        self.session.add(model)
        self.session.flush()
        return self._to_entity(model)

    def list_for_user(
        self,
        user_id: int,
        *,
        action: AuditAction | None = None,
        limit: int | None = None,
        offset: int = 0,
    ) -> list[AuditLog]:
        """Return the entries of ``user_id``, newest first.

        Each entry carries the current title of its task; entries of deleted
        tasks come back with ``todo_title`` set to ``None``.
        """

        query = (
            self.session.query(AuditLogModel, TaskModel.title)
            .outerjoin(TaskModel, AuditLogModel.todo_id == TaskModel.id)
            .filter(AuditLogModel.user_id == user_id)
        )
        if action is not None:
            query = query.filter(AuditLogModel.action == AuditAction(action).value)

        query = query.order_by(desc(AuditLogModel.created_at), desc(AuditLogModel.id))
        if offset:
            query = query.offset(offset)
        if limit is not None:
            query = query.limit(limit)
        return [self._to_entity(model, title) for model, title in query.all()]

    @staticmethod
    def _to_entity(model: AuditLogModel, todo_title: str | None = None) -> AuditLog:
        details: dict[str, Any] = dict(model.details) if model.details else {}
        return AuditLog(
            id=model.id,
            user_id=model.user_id,
            todo_id=model.todo_id,
            action=AuditAction(model.action),
            details=details,
            created_at=ensure_utc(model.created_at),
            todo_title=todo_title,
        )


__all__ = ["AuditLogRepository"]
