"""Use case for retrieving a task."""

from sqlalchemy.orm import Session

from tasktrail.domain.entities import Task
from tasktrail.domain.exceptions import TaskNotFoundError
from tasktrail.infrastructure.repositories import TaskRepository


def get_task(session: Session, *, user_id: int, task_id: int) -> Task:
    """Return the task ``task_id`` owned by ``user_id`` or raise an error."""

    task = TaskRepository(session).get_for_user(task_id, user_id)
    if task is None:
        raise TaskNotFoundError()
    return task
