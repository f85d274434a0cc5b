"""Common validation helpers for task use cases."""

from collections.abc import Mapping
from typing import Any

from tasktrail.domain.entities import TASK_AUDITED_FIELDS
from tasktrail.domain.exceptions import InvalidTaskDataError

TITLE_MAX_LENGTH = 200
DESCRIPTION_MAX_LENGTH = 2000


def normalize_title(title: Any) -> str:
    """Return the trimmed title or raise :class:`InvalidTaskDataError`."""

    if not isinstance(title, str):
        raise InvalidTaskDataError("Title is required")
    normalized = title.strip()
    if not normalized:
        raise InvalidTaskDataError("Title is required")
    if len(normalized) > TITLE_MAX_LENGTH:
        raise InvalidTaskDataError(
            f"Title must be at most {TITLE_MAX_LENGTH} characters"
        )
    return normalized


def normalize_description(description: Any) -> str | None:
    """Return the trimmed description, ``None`` when blank."""

    if description is None:
        return None
    if not isinstance(description, str):
        raise InvalidTaskDataError("Description must be text")
    normalized = description.strip()
    if len(normalized) > DESCRIPTION_MAX_LENGTH:
        raise InvalidTaskDataError(
            f"Description must be at most {DESCRIPTION_MAX_LENGTH} characters"
        )
    return normalized or None


def ensure_completed_flag(completed: Any) -> bool:
    if not isinstance(completed, bool):
        raise InvalidTaskDataError("Completed must be true or false")
    return completed


def normalize_task_changes(changes: Mapping[str, Any]) -> dict[str, Any]:
    """Validate a partial update, keeping only the fields that were sent."""

    unknown = set(changes) - set(TASK_AUDITED_FIELDS)
    if unknown:
        raise InvalidTaskDataError(
            f"Unsupported fields: {', '.join(sorted(unknown))}"
        )

    normalized: dict[str, Any] = {}
    if "title" in changes:
        normalized["title"] = normalize_title(changes["title"])
    if "description" in changes:
        normalized["description"] = normalize_description(changes["description"])
    if "completed" in changes:
        normalized["completed"] = ensure_completed_flag(changes["completed"])
    return normalized
