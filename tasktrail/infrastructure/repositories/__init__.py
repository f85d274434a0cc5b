"""Repository implementations for infrastructure layer."""

from .audit_log_repository import AuditLogRepository
from .task_repository import TaskRepository
from .user_repository import UserRepository

__all__ = [
    "AuditLogRepository",
    "TaskRepository",
    "UserRepository",
]
