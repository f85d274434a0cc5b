"""Use cases for recording and reading task audit entries.

Recording functions never commit: they append to the session of the task
mutation that triggered them so both writes land in one transaction.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from sqlalchemy.orm import Session

from tasktrail.domain.entities import TASK_AUDITED_FIELDS, AuditAction, AuditLog, Task
from tasktrail.infrastructure.repositories import AuditLogRepository

logger = logging.getLogger(__name__)


def _differs(old: Any, new: Any) -> bool:
    # ``True == 1`` in Python, so the type takes part in the comparison.
    return type(old) is not type(new) or old != new


def compute_task_changes(
    current: Task, changes: Mapping[str, Any]
) -> dict[str, dict[str, Any]]:
    """Return ``{field: {"from": old, "to": new}}`` for fields that change.

    Fields missing from ``changes`` and fields whose value is unchanged are
    left out, so an empty result means the update is a no-op.
    """

    delta: dict[str, dict[str, Any]] = {}
    for field in TASK_AUDITED_FIELDS:
        if field not in changes:
            continue
        old_value = getattr(current, field)
        new_value = changes[field]
        if _differs(old_value, new_value):
            delta[field] = {"from": old_value, "to": new_value}
    return delta


def record_audit_entry(
    session: Session,
    *,
    user_id: int,
    todo_id: int,
    action: AuditAction,
    details: Mapping[str, Any],
) -> AuditLog:
    """Append one entry to the audit log inside the current transaction."""

    entry = AuditLogRepository(session).create(
        AuditLog(
            id=None,
            user_id=user_id,
            todo_id=todo_id,
            action=action,
            details=dict(details),
            created_at=None,
        )
    )
    logger.info(
        "Audit entry %s recorded",
        action.value,
        extra={"user_id": user_id, "todo_id": todo_id, "action": action.value},
    )
    return entry


def record_task_created(session: Session, task: Task) -> AuditLog:
    return record_audit_entry(
        session,
        user_id=task.user_id,
        todo_id=task.id,
        action=AuditAction.CREATE,
        details=task.snapshot(),
    )


def record_task_updated(
    session: Session, task: Task, delta: Mapping[str, Mapping[str, Any]]
) -> AuditLog | None:
    """Record an ``UPDATE`` entry, or nothing when ``delta`` is empty."""

    if not delta:
        return None
    return record_audit_entry(
        session,
        user_id=task.user_id,
        todo_id=task.id,
        action=AuditAction.UPDATE,
        details={field: dict(change) for field, change in delta.items()},
    )


def record_task_deleted(session: Session, task: Task) -> AuditLog:
    """Record a ``DELETE`` entry from the task state read before removal."""

    return record_audit_entry(
        session,
        user_id=task.user_id,
        todo_id=task.id,
        action=AuditAction.DELETE,
        details=task.snapshot(),
    )


def list_audit_logs(
    session: Session,
    *,
    user_id: int,
    action: AuditAction | None = None,
    limit: int | None = None,
    offset: int = 0,
) -> list[AuditLog]:
    """Return the audit entries of ``user_id`` newest first.

    Entries with equal timestamps are ordered by id, highest first.
    """

    repository = AuditLogRepository(session)
    return repository.list_for_user(user_id, action=action, limit=limit, offset=offset)


__all__ = [
    "compute_task_changes",
    "list_audit_logs",
    "record_audit_entry",
    "record_task_created",
    "record_task_deleted",
    "record_task_updated",
]
