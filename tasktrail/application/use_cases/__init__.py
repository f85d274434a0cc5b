"""Aggregate application use cases."""

from .audit_logs import list_audit_logs
from .tasks import create_task, delete_task, get_task, list_tasks, update_task
from .users import authenticate_user, register_user

__all__ = [
    "authenticate_user",
    "create_task",
    "delete_task",
    "get_task",
    "list_audit_logs",
    "list_tasks",
    "register_user",
    "update_task",
]
