"""Domain entity representing a follow-up task."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

TASK_STATUS_NOT_STARTED = "not_started"
TASK_STATUS_IN_PROGRESS = "in_progress"
TASK_STATUS_COMPLETED = "completed"
TASK_STATUS_CANCELLED = "cancelled"

TASK_STATUSES = (
    TASK_STATUS_NOT_STARTED,
    TASK_STATUS_IN_PROGRESS,
    TASK_STATUS_COMPLETED,
    TASK_STATUS_CANCELLED,
)
CLOSED_TASK_STATUSES = frozenset({TASK_STATUS_COMPLETED, TASK_STATUS_CANCELLED})

TASK_TYPES = (
    "call",
    "email",
    "meeting",
    "follow_up",
    "quote",
    "measurement",
    "design",
    "presentation",
    "order",
    "delivery",
    "other",
)
TASK_PRIORITIES = ("low", "medium", "high", "urgent")


@dataclass
class Task:
    """Work item tied to a client or a sale."""

    id: str | None
    title: str | None = None
    description: str | None = None
    type: str | None = "other"
    status: str | None = TASK_STATUS_NOT_STARTED
    priority: str | None = "medium"
    due_date: datetime | None = None
    client_id: str | None = None
    sale_id: str | None = None
    assigned_to: str | None = None
    completed_at: datetime | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


__all__ = [
    "CLOSED_TASK_STATUSES",
    "TASK_PRIORITIES",
    "TASK_STATUSES",
    "TASK_STATUS_CANCELLED",
    "TASK_STATUS_COMPLETED",
    "TASK_STATUS_IN_PROGRESS",
    "TASK_STATUS_NOT_STARTED",
    "TASK_TYPES",
    "Task",
]
