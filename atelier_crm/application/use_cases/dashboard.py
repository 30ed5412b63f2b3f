"""Use case assembling the dashboard: counters plus the recent activity feed."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from sqlalchemy.orm import Session

from atelier_crm.application.providers import fetch_clients, fetch_sales, fetch_tasks
from atelier_crm.domain.entities import Activity, EntitySnapshot

from .activity import DEFAULT_ACTIVITY_LIMIT, aggregate_recent_activity
from .stats import DashboardStats, summarize


@dataclass
class SourceStatus:
    """Loading and error flags of one entity provider."""

    loading: bool
    error: str | None


@dataclass
class DashboardReport:
    """Everything the dashboard page renders."""

    stats: DashboardStats
    activities: list[Activity]
    sources: dict[str, SourceStatus]


def _source_status(snapshot: EntitySnapshot) -> SourceStatus:
    return SourceStatus(
        loading=snapshot.loading,
        error=str(snapshot.error) if snapshot.error is not None else None,
    )


def get_dashboard(
    session: Session,
    *,
    limit: int = DEFAULT_ACTIVITY_LIMIT,
    now: datetime | None = None,
) -> DashboardReport:
    """Read every provider once and derive the counters and the feed from it."""

    clients = fetch_clients(session)
    tasks = fetch_tasks(session)
    sales = fetch_sales(session)

    activities = aggregate_recent_activity(
        clients.items, tasks.items, sales.items, limit=limit, now=now
    )
    stats = summarize(
        clients.items,
        tasks.items,
        sales.items,
        recent_activity=len(activities),
        now=now,
    )
    return DashboardReport(
        stats=stats,
        activities=activities,
        sources={
            "clients": _source_status(clients),
            "tasks": _source_status(tasks),
            "sales": _source_status(sales),
        },
    )


__all__ = ["DashboardReport", "SourceStatus", "get_dashboard"]
