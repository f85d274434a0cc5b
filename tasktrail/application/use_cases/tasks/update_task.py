"""Use case for updating tasks."""

import logging
from collections.abc import Mapping
from dataclasses import replace
from typing import Any

from sqlalchemy.orm import Session

from tasktrail.application.use_cases.audit_logs import (
    compute_task_changes,
    record_task_updated,
)
from tasktrail.domain.entities import Task
from tasktrail.domain.exceptions import TaskNotFoundError
from tasktrail.infrastructure.database import transaction
from tasktrail.infrastructure.repositories import TaskRepository
from .validators import normalize_task_changes

logger = logging.getLogger(__name__)


def update_task(
    session: Session,
    *,
    user_id: int,
    task_id: int,
    changes: Mapping[str, Any],
) -> Task:
    """Apply ``changes`` to an owned task.

    ``changes`` holds only the fields the caller sent. Every sent field is
    written; an ``UPDATE`` audit entry is appended only for the fields whose
    value actually changed, in the same transaction as the row update.
    Concurrent updates of the same task are last-writer-wins, each one
    diffed against the state it read.
    """

    normalized = normalize_task_changes(changes)

    repository = TaskRepository(session)
    with transaction(session):
        current = repository.get_for_user(task_id, user_id)
        if current is None:
            raise TaskNotFoundError()

        delta = compute_task_changes(current, normalized)
        task = repository.update(replace(current, **normalized))
        record_task_updated(session, task, delta)

    if delta:
        logger.info(
            "Task %s updated (%s)",
            task.id,
            ", ".join(sorted(delta)),
            extra={"user_id": user_id, "todo_id": task.id},
        )
    return task
