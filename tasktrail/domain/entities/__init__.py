"""Domain entities exposed by the application."""

from .audit_log import AuditAction, AuditLog
from .task import TASK_AUDITED_FIELDS, Task
from .user import User

__all__ = [
    "AuditAction",
    "AuditLog",
    "TASK_AUDITED_FIELDS",
    "Task",
    "User",
]
