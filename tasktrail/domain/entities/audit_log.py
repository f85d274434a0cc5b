"""Domain entity representing an audit entry for task mutations."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any


class AuditAction(str, Enum):
    """Kinds of task mutations that are recorded."""

    CREATE = "CREATE"
    UPDATE = "UPDATE"
    DELETE = "DELETE"


@dataclass
class AuditLog:
    """Captured information about one task mutation.

    ``details`` depends on ``action``: a snapshot of the task for ``CREATE``
    and ``DELETE`` and a ``{field: {"from": ..., "to": ...}}`` mapping for
    ``UPDATE``. ``todo_title`` is only filled by listing queries and is
    ``None`` once the task has been deleted.
    """

    id: int | None
    user_id: int
    todo_id: int
    action: AuditAction
    details: dict[str, Any]
    created_at: datetime | None
    todo_title: str | None = None


__all__ = ["AuditAction", "AuditLog"]
