"""Schemas for the dashboard endpoint."""

from pydantic import BaseModel, ConfigDict, Field

from .activity import ActivityRead


class StatCardRead(BaseModel):
    title: str
    value: str
    change: str

    model_config = ConfigDict(from_attributes=True)


class DashboardStatsRead(BaseModel):
    open_tasks: int = Field(..., description="Tasks neither completed nor cancelled")
    active_clients: int = Field(..., description="Clients with status active")
    total_clients: int = Field(..., description="Clients on record")
    revenue_total: float = Field(..., description="Sum of every sale amount")
    monthly_sales: float = Field(
        ..., description="Revenue from won sales over the trailing month"
    )
    recent_activity: int = Field(..., description="Entries in the activity feed")
    cards: list[StatCardRead]

    model_config = ConfigDict(from_attributes=True)


class SourceStatusRead(BaseModel):
    loading: bool
    error: str | None

    model_config = ConfigDict(from_attributes=True)


class DashboardRead(BaseModel):
    stats: DashboardStatsRead
    activities: list[ActivityRead]
    sources: dict[str, SourceStatusRead]

    model_config = ConfigDict(from_attributes=True)


__all__ = [
    "DashboardRead",
    "DashboardStatsRead",
    "SourceStatusRead",
    "StatCardRead",
]
