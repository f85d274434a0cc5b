"""Domain entity representing a task owned by a single user."""

from dataclasses import dataclass
from datetime import datetime
from typing import Any

TASK_AUDITED_FIELDS = ("title", "description", "completed")


@dataclass
class Task:
    """Core attributes describing a task."""

    id: int | None
    title: str
    description: str | None
    completed: bool
    user_id: int
    created_at: datetime | None

    def snapshot(self) -> dict[str, Any]:
        """Return the user editable fields as a JSON friendly mapping."""

        return {field: getattr(self, field) for field in TASK_AUDITED_FIELDS}


__all__ = ["TASK_AUDITED_FIELDS", "Task"]
