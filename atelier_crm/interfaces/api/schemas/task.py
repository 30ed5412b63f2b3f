"""Schemas for task endpoints."""

from __future__ import annotations

from collections.abc import Mapping
from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from atelier_crm.infrastructure.normalization import normalize_task_payload


class _NormalizedTaskPayload(BaseModel):
    @model_validator(mode="before")
    @classmethod
    def _normalize_wire_schema(cls, data: Any) -> Any:
        if isinstance(data, Mapping):
            return normalize_task_payload(data)
        return data


class TaskCreate(_NormalizedTaskPayload):
    """Payload required to create a task."""

    title: str = Field(..., min_length=1, max_length=255)
    description: str | None = None
    type: str = "other"
    status: str = "not_started"
    priority: str = "medium"
    due_date: datetime | None = None
    client_id: str | None = None
    sale_id: str | None = None
    assigned_to: str | None = None
    completed_at: datetime | None = None


class TaskUpdate(_NormalizedTaskPayload):
    title: str | None = Field(None, min_length=1, max_length=255)
    description: str | None = None
    type: str | None = None
    status: str | None = None
    priority: str | None = None
    due_date: datetime | None = None
    client_id: str | None = None
    sale_id: str | None = None
    assigned_to: str | None = None
    completed_at: datetime | None = None

    @field_validator("title", "type", "status", "priority")
    @classmethod
    def _reject_null(cls, value: str | None) -> str:
        if value is None:
            raise ValueError("may be omitted but not null")
        return value


class TaskRead(BaseModel):
    id: str
    title: str | None
    description: str | None
    type: str | None
    status: str | None
    priority: str | None
    due_date: datetime | None
    client_id: str | None
    sale_id: str | None
    assigned_to: str | None
    completed_at: datetime | None
    created_at: datetime | None
    updated_at: datetime | None

    model_config = ConfigDict(from_attributes=True)


__all__ = ["TaskCreate", "TaskRead", "TaskUpdate"]
