"""Persistence layer for tasks."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.orm import Session

from tasktrail.domain.entities import Task
from tasktrail.infrastructure.models import TaskModel
from tasktrail.utils import ensure_utc, now_utc


class TaskRepository:
    """Provide CRUD operations for tasks, always scoped to their owner.

    Writes are flushed, not committed; the calling use case owns the
    transaction.
    """

    def __init__(self, session: Session) -> None:
        self.session = session

    def list_for_user(self, user_id: int) -> Sequence[Task]:
        query = (
            self.session.query(TaskModel)
            .filter(TaskModel.user_id == user_id)
            .order_by(TaskModel.id)
        )
        return [self._to_entity(model) for model in query.all()]

    def get_for_user(self, task_id: int, user_id: int) -> Task | None:
        model = self._get_model(task_id, user_id)
        return self._to_entity(model) if model else None

    def create(self, task: Task) -> Task:
        model = TaskModel(created_at=task.created_at or now_utc())
        self._apply_entity_to_model(model, task)
        self.session.add(model)
        self.session.flush()
        return self._to_entity(model)

    def update(self, task: Task) -> Task:
        model = self._get_model(task.id, task.user_id)
        if model is None:
            msg = f"Task with id {task.id} not found"
            raise ValueError(msg)
        self._apply_entity_to_model(model, task)
        self.session.flush()
        return self._to_entity(model)

    def delete(self, task_id: int, user_id: int) -> bool:
        """Delete an owned task.

        Returns ``True`` when a row was removed and ``False`` when the task
        does not exist for ``user_id``.
        """

        model = self._get_model(task_id, user_id)
        if model is None:
            return False
        self.session.delete(model)
        self.session.flush()
        return True

    def _get_model(self, task_id: int | None, user_id: int) -> TaskModel | None:
        return (
            self.session.query(TaskModel)
            .filter(TaskModel.id == task_id, TaskModel.user_id == user_id)
            .first()
        )

    @staticmethod
    def _to_entity(model: TaskModel) -> Task:
        return Task(
            id=model.id,
            title=model.title,
            description=model.description,
            completed=bool(model.completed),
            user_id=model.user_id,
            created_at=ensure_utc(model.created_at),
        )

    @staticmethod
    def _apply_entity_to_model(model: TaskModel, task: Task) -> None:
        model.title = task.title
        model.description = task.description
        model.completed = bool(task.completed)
        model.user_id = task.user_id


__all__ = ["TaskRepository"]
