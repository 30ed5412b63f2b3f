"""Domain entity representing a CRM client."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

CLIENT_STATUS_LEAD = "lead"
CLIENT_STATUS_ACTIVE = "active"
CLIENT_STATUS_INACTIVE = "inactive"
CLIENT_STATUS_PROJECT = "project"

CLIENT_STATUSES = (
    CLIENT_STATUS_LEAD,
    CLIENT_STATUS_ACTIVE,
    CLIENT_STATUS_INACTIVE,
    CLIENT_STATUS_PROJECT,
)

UNNAMED_CLIENT = "Unnamed Client"


@dataclass
class Client:
    """A person or household the designer works with."""

    id: str | None
    first_name: str | None = None
    last_name: str | None = None
    email: str | None = None
    phone: str | None = None
    status: str | None = CLIENT_STATUS_LEAD
    source: str | None = None
    budget: float | None = None
    style_preferences: list[str] = field(default_factory=list)
    room_types: list[str] = field(default_factory=list)
    last_contact_date: datetime | None = None
    next_follow_up_date: datetime | None = None
    notes: str | None = None
    address: dict[str, Any] = field(default_factory=dict)
    total_sales: float | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @property
    def full_name(self) -> str:
        joined = f"{self.first_name or ''} {self.last_name or ''}".strip()
        return joined or UNNAMED_CLIENT


__all__ = [
    "CLIENT_STATUSES",
    "CLIENT_STATUS_ACTIVE",
    "CLIENT_STATUS_INACTIVE",
    "CLIENT_STATUS_LEAD",
    "CLIENT_STATUS_PROJECT",
    "Client",
    "UNNAMED_CLIENT",
]
