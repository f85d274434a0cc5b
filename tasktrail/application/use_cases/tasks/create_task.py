"""Use case for creating tasks."""

import logging

from sqlalchemy.orm import Session

from tasktrail.application.use_cases.audit_logs import record_task_created
from tasktrail.domain.entities import Task
from tasktrail.infrastructure.database import transaction
from tasktrail.infrastructure.repositories import TaskRepository
from .validators import normalize_description, normalize_title

logger = logging.getLogger(__name__)


def create_task(
    session: Session,
    *,
    user_id: int,
    title: str,
    description: str | None = None,
) -> Task:
    """Create a task for ``user_id`` and record its ``CREATE`` audit entry."""

    entity = Task(
        id=None,
        title=normalize_title(title),
        description=normalize_description(description),
        completed=False,
        user_id=user_id,
        created_at=None,
    )

    repository = TaskRepository(session)
    with transaction(session):
        task = repository.create(entity)
        record_task_created(session, task)

    logger.info("Task %s created", task.id, extra={"user_id": user_id, "todo_id": task.id})
    return task
