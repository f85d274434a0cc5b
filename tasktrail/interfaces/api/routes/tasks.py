"""Routes for managing the authenticated user's tasks."""

from fastapi import APIRouter, Depends, HTTPException, Path, status
from sqlalchemy.orm import Session

from tasktrail.application.use_cases.tasks import (
    create_task as create_task_uc,
    delete_task as delete_task_uc,
    get_task as get_task_uc,
    list_tasks as list_tasks_uc,
    update_task as update_task_uc,
)
from tasktrail.domain.entities import Task, User
from tasktrail.domain.exceptions import InvalidTaskDataError, TaskNotFoundError
from tasktrail.infrastructure.database import get_db
from tasktrail.interfaces.api.dependencies import get_current_user
from tasktrail.interfaces.api.schemas import (
    MessageResponse,
    TaskCreate,
    TaskRead,
    TaskUpdate,
)

router = APIRouter(prefix="/api/todos", tags=["todos"])

# Largest value a signed 64-bit INTEGER column can hold.
MAX_TASK_ID = 2**63 - 1


def _to_read_model(task: Task) -> TaskRead:
    return TaskRead.model_validate(task)


@router.get("", response_model=list[TaskRead])
def list_tasks(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> list[TaskRead]:
    """Return every task owned by the caller."""

    tasks = list_tasks_uc(db, user_id=current_user.id)
    return [_to_read_model(task) for task in tasks]


@router.post("", response_model=TaskRead, status_code=status.HTTP_201_CREATED)
def create_task(
    task_in: TaskCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> TaskRead:
    """Create a task and record its ``CREATE`` audit entry."""

    try:
        task = create_task_uc(
            db,
            user_id=current_user.id,
            title=task_in.title,
            description=task_in.description,
        )
    except InvalidTaskDataError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    return _to_read_model(task)


@router.get("/{task_id}", response_model=TaskRead)
def read_task(
    task_id: int = Path(..., ge=1, le=MAX_TASK_ID),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> TaskRead:
    """Return the task identified by ``task_id``."""

    try:
        task = get_task_uc(db, user_id=current_user.id, task_id=task_id)
    except TaskNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    return _to_read_model(task)


@router.put("/{task_id}", response_model=TaskRead)
def update_task(
    task_in: TaskUpdate,
    task_id: int = Path(..., ge=1, le=MAX_TASK_ID),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> TaskRead:
    """Apply a partial update; unchanged fields produce no audit entry."""

    try:
        task = update_task_uc(
            db,
            user_id=current_user.id,
            task_id=task_id,
            changes=task_in.model_dump(exclude_unset=True),
        )
    except TaskNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    except InvalidTaskDataError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    return _to_read_model(task)


@router.delete("/{task_id}", response_model=MessageResponse)
def delete_task(
    task_id: int = Path(..., ge=1, le=MAX_TASK_ID),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> MessageResponse:
    """Delete the task identified by ``task_id``."""

    try:
        delete_task_uc(db, user_id=current_user.id, task_id=task_id)
    except TaskNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    return MessageResponse(message="Todo deleted successfully")


__all__ = ["router"]
