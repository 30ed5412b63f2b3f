"""Domain entities exposed by the application."""

from .activity import Activity, ActivityKind
from .client import (
    CLIENT_STATUSES,
    CLIENT_STATUS_ACTIVE,
    CLIENT_STATUS_INACTIVE,
    CLIENT_STATUS_LEAD,
    CLIENT_STATUS_PROJECT,
    UNNAMED_CLIENT,
    Client,
)
from .sale import (
    SALE_STATUSES,
    SALE_STATUS_CLOSED_LOST,
    SALE_STATUS_CLOSED_WON,
    SALE_STATUS_LEAD,
    WON_SALE_STATUSES,
    Sale,
)
from .snapshot import EntitySnapshot
from .task import (
    CLOSED_TASK_STATUSES,
    TASK_PRIORITIES,
    TASK_STATUSES,
    TASK_STATUS_CANCELLED,
    TASK_STATUS_COMPLETED,
    TASK_STATUS_IN_PROGRESS,
    TASK_STATUS_NOT_STARTED,
    TASK_TYPES,
    Task,
)

__all__ = [
    "Activity",
    "ActivityKind",
    "CLIENT_STATUSES",
    "CLIENT_STATUS_ACTIVE",
    "CLIENT_STATUS_INACTIVE",
    "CLIENT_STATUS_LEAD",
    "CLIENT_STATUS_PROJECT",
    "CLOSED_TASK_STATUSES",
    "Client",
    "EntitySnapshot",
    "SALE_STATUSES",
    "SALE_STATUS_CLOSED_LOST",
    "SALE_STATUS_CLOSED_WON",
    "SALE_STATUS_LEAD",
    "Sale",
    "TASK_PRIORITIES",
    "TASK_STATUSES",
    "TASK_STATUS_CANCELLED",
    "TASK_STATUS_COMPLETED",
    "TASK_STATUS_IN_PROGRESS",
    "TASK_STATUS_NOT_STARTED",
    "TASK_TYPES",
    "Task",
    "UNNAMED_CLIENT",
    "WON_SALE_STATUSES",
]
