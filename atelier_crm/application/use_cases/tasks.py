"""Use cases for managing tasks."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from dataclasses import replace
from typing import Any, Final

from sqlalchemy.orm import Session

from atelier_crm.domain.entities import TASK_PRIORITIES, TASK_STATUSES, TASK_TYPES, Task
from atelier_crm.infrastructure.repositories import (
    ClientRepository,
    SaleRepository,
    TaskRepository,
)
from atelier_crm.utils import now_in_app_timezone

logger = logging.getLogger(__name__)

TASK_NOT_FOUND = "Task not found"


_VOCABULARIES: Final[dict[str, tuple[str, ...]]] = {
    "type": TASK_TYPES,
    "status": TASK_STATUSES,
    "priority": TASK_PRIORITIES,
}


def _validate(session: Session, fields: Mapping[str, Any]) -> None:
    for name, allowed in _VOCABULARIES.items():
        value = fields.get(name)
        if value is not None and value not in allowed:
            msg = f"Unsupported task {name} '{value}'"
            raise ValueError(msg)
    client_id = fields.get("client_id")
    if client_id is not None and not ClientRepository(session).exists(client_id):
        raise ValueError("Linked client does not exist")
    sale_id = fields.get("sale_id")
    if sale_id is not None and SaleRepository(session).get(sale_id) is None:
        raise ValueError("Linked sale does not exist")


def list_tasks(
    session: Session,
    *,
    client_id: str | None = None,
    skip: int = 0,
    limit: int | None = None,
) -> Sequence[Task]:
    """Return tasks ordered by due date, optionally for one client."""

    repository = TaskRepository(session)
    return repository.list(client_id=client_id, skip=skip, limit=limit)


def get_task(session: Session, task_id: str) -> Task:
    """Return the task identified by ``task_id`` or raise an error."""

    task = TaskRepository(session).get(task_id)
    if task is None:
        raise ValueError(TASK_NOT_FOUND)
    return task


def create_task(session: Session, *, fields: Mapping[str, Any]) -> Task:
    """Create a task from canonical ``fields``."""

    _validate(session, fields)
    entity = replace(
        Task(id=None, **fields), created_at=now_in_app_timezone(), updated_at=None
    )
    created = TaskRepository(session).create(entity)
    logger.info("Created task %s", created.id)
    return created


def update_task(
    session: Session, *, task_id: str, changes: Mapping[str, Any]
) -> Task:
    """Apply canonical ``changes`` to an existing task."""

    repository = TaskRepository(session)
    current = repository.get(task_id)
    if current is None:
        raise ValueError(TASK_NOT_FOUND)
    _validate(session, changes)

    now = now_in_app_timezone()
    completed_at = changes.get("completed_at", current.completed_at)
    if changes.get("status") == "completed" and completed_at is None:
        completed_at = now

    updated = replace(
        current,
        **{**changes, "completed_at": completed_at},
        updated_at=now,
    )
    return repository.update(updated)


def delete_task(session: Session, task_id: str) -> None:
    """Remove a task or raise an error if it does not exist."""

    if not TaskRepository(session).delete(task_id):
        raise ValueError(TASK_NOT_FOUND)
    logger.info("Deleted task %s", task_id)


__all__ = [
    "TASK_NOT_FOUND",
    "create_task",
    "delete_task",
    "get_task",
    "list_tasks",
    "update_task",
]
