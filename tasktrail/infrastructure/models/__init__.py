"""ORM models used by the application infrastructure."""

from .audit_log import AuditLogModel
from .task import TaskModel
from .user import UserModel

__all__ = [
    "AuditLogModel",
    "TaskModel",
    "UserModel",
]
