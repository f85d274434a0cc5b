"""Schemas for audit log endpoints."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from tasktrail.domain.entities import AuditAction


class AuditLogRead(BaseModel):
    """Representation of an audit log entry returned by the API."""

    id: int
    user_id: int
    todo_id: int
    action: AuditAction
    details: dict[str, Any] = Field(
        ...,
        description=(
            "Task snapshot for CREATE and DELETE, "
            '{field: {"from": old, "to": new}} for UPDATE'
        ),
    )
    created_at: datetime | None
    todo_title: str | None = Field(
        default=None, description="Current task title, null once the task is deleted"
    )

    model_config = ConfigDict(from_attributes=True)


__all__ = ["AuditLogRead"]
