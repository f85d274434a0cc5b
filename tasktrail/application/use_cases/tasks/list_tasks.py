"""Use case for listing tasks."""

from collections.abc import Sequence

from sqlalchemy.orm import Session

from tasktrail.domain.entities import Task
from tasktrail.infrastructure.repositories import TaskRepository


def list_tasks(session: Session, *, user_id: int) -> Sequence[Task]:
    """Return the tasks owned by ``user_id`` ordered by id."""

    return TaskRepository(session).list_for_user(user_id)
