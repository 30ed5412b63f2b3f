"""Persistence layer for tasks."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy import asc
from sqlalchemy.orm import Session

from atelier_crm.domain.entities import Task
from atelier_crm.infrastructure.models import TaskModel
from atelier_crm.utils import ensure_app_naive_datetime, ensure_app_timezone


class TaskRepository:
    """Provide CRUD operations for tasks."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list(
        self,
        *,
        client_id: str | None = None,
        skip: int = 0,
        limit: int | None = None,
    ) -> Sequence[Task]:
        query = self.session.query(TaskModel)
        if client_id is not None:
            query = query.filter(TaskModel.client_id == client_id)
        # Soonest due first; undated tasks go last.
        query = query.order_by(
            TaskModel.due_date.is_(None),
            asc(TaskModel.due_date),
            asc(TaskModel.created_at),
        )
        if skip:
            query = query.offset(skip)
        if limit is not None:
            query = query.limit(limit)
        return [self._to_entity(model) for model in query.all()]

    def get(self, task_id: str) -> Task | None:
        model = self._get_model(task_id)
        return self._to_entity(model) if model else None

    def create(self, task: Task) -> Task:
        model = TaskModel()
        if task.id:
            model.id = task.id
        self._apply_entity_to_model(model, task)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def update(self, task: Task) -> Task:
        model = self._get_model(task.id)
        if not model:
            msg = f"Task with id {task.id} not found"
            raise ValueError(msg)
        self._apply_entity_to_model(model, task)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def delete(self, task_id: str) -> bool:
        model = self._get_model(task_id)
        if not model:
            return False
        self.session.delete(model)
        self.session.commit()
        return True

    def _get_model(self, task_id: str | None) -> TaskModel | None:
        if task_id is None:
            return None
        return self.session.get(TaskModel, task_id)

    @staticmethod
    def _to_entity(model: TaskModel) -> Task:
        return Task(
            id=model.id,
            title=model.title,
            description=model.description,
            type=model.type,
            status=model.status,
            priority=model.priority,
            due_date=ensure_app_timezone(model.due_date),
            client_id=model.client_id,
            sale_id=model.sale_id,
            assigned_to=model.assigned_to,
            completed_at=ensure_app_timezone(model.completed_at),
            created_at=ensure_app_timezone(model.created_at),
            updated_at=ensure_app_timezone(model.updated_at),
        )

    @staticmethod
    def _apply_entity_to_model(model: TaskModel, task: Task) -> None:
        model.title = task.title or ""
        model.description = task.description
        model.type = task.type or "other"
        model.status = task.status or "not_started"
        model.priority = task.priority or "medium"
        model.due_date = ensure_app_naive_datetime(task.due_date)
        model.client_id = task.client_id
        model.sale_id = task.sale_id
        model.assigned_to = task.assigned_to
        model.completed_at = ensure_app_naive_datetime(task.completed_at)
        if task.created_at is not None:
            model.created_at = ensure_app_naive_datetime(task.created_at)
        model.updated_at = ensure_app_naive_datetime(task.updated_at)


__all__ = ["TaskRepository"]
