"""Use case for deleting tasks."""

import logging

from sqlalchemy.orm import Session

from tasktrail.application.use_cases.audit_logs import record_task_deleted
from tasktrail.domain.exceptions import TaskNotFoundError
from tasktrail.infrastructure.database import transaction
from tasktrail.infrastructure.repositories import TaskRepository

logger = logging.getLogger(__name__)


def delete_task(session: Session, *, user_id: int, task_id: int) -> None:
    """Delete an owned task after recording its final state."""

    repository = TaskRepository(session)
    with transaction(session):
        task = repository.get_for_user(task_id, user_id)
        if task is None:
            raise TaskNotFoundError()
        # The snapshot has to be taken before the row disappears.
        record_task_deleted(session, task)
        repository.delete(task_id, user_id)

    logger.info("Task %s deleted", task_id, extra={"user_id": user_id, "todo_id": task_id})
