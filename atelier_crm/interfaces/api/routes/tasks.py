"""Routes for managing tasks."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from sqlalchemy.orm import Session

from atelier_crm.application.use_cases.tasks import (
    TASK_NOT_FOUND,
    create_task as create_task_uc,
    delete_task as delete_task_uc,
    get_task as get_task_uc,
    list_tasks as list_tasks_uc,
    update_task as update_task_uc,
)
from atelier_crm.domain.entities import Task
from atelier_crm.interfaces.api.dependencies import get_db
from atelier_crm.interfaces.api.routes_helpers import http_error_from_value_error
from atelier_crm.interfaces.api.schemas import TaskCreate, TaskRead, TaskUpdate

router = APIRouter(prefix="/tasks", tags=["tasks"])


def _to_read_model(task: Task) -> TaskRead:
    return TaskRead.model_validate(task)


def _error(exc: ValueError) -> HTTPException:
    return http_error_from_value_error(exc, not_found=TASK_NOT_FOUND)


@router.get("/", response_model=list[TaskRead])
def list_tasks(
    client_id: str | None = Query(None, description="Only tasks for this client"),
    skip: int = Query(0, ge=0),
    limit: int | None = Query(None, ge=1, le=500),
    db: Session = Depends(get_db),
) -> list[TaskRead]:
    """Return tasks, soonest due first."""

    tasks = list_tasks_uc(db, client_id=client_id, skip=skip, limit=limit)
    return [_to_read_model(task) for task in tasks]


@router.post("/", response_model=TaskRead, status_code=status.HTTP_201_CREATED)
def create_task(task_in: TaskCreate, db: Session = Depends(get_db)) -> TaskRead:
    """Create a task."""

    try:
        task = create_task_uc(db, fields=task_in.model_dump())
    except ValueError as exc:
        raise _error(exc) from exc
    return _to_read_model(task)


@router.get("/{task_id}", response_model=TaskRead)
def read_task(task_id: str, db: Session = Depends(get_db)) -> TaskRead:
    """Return the task identified by ``task_id``."""

    try:
        task = get_task_uc(db, task_id)
    except ValueError as exc:
        raise _error(exc) from exc
    return _to_read_model(task)


@router.put("/{task_id}", response_model=TaskRead)
def update_task(
    task_id: str,
    task_in: TaskUpdate,
    db: Session = Depends(get_db),
) -> TaskRead:
    """Update an existing task; omitted fields are left untouched."""

    try:
        task = update_task_uc(
            db, task_id=task_id, changes=task_in.model_dump(exclude_unset=True)
        )
    except ValueError as exc:
        raise _error(exc) from exc
    return _to_read_model(task)


@router.delete("/{task_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_task(task_id: str, db: Session = Depends(get_db)) -> Response:
    """Delete a task."""

    try:
        delete_task_uc(db, task_id)
    except ValueError as exc:
        raise _error(exc) from exc
    return Response(status_code=status.HTTP_204_NO_CONTENT)


__all__ = ["router"]
