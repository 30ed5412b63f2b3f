"""Use case for computing the dashboard counters."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import datetime, timedelta
from decimal import Decimal
from typing import Any, Final

from atelier_crm.domain.entities import (
    CLIENT_STATUS_ACTIVE,
    CLOSED_TASK_STATUSES,
    WON_SALE_STATUSES,
)
from atelier_crm.utils import (
    ensure_app_timezone,
    field_value,
    first_datetime,
    now_in_app_timezone,
    number_or_zero,
)

SALES_PERIODS: Final[tuple[str, ...]] = ("day", "week", "month", "year")


@dataclass
class StatCard:
    """One headline figure of the dashboard."""

    title: str
    value: str
    change: str


@dataclass
class DashboardStats:
    """Counters derived from the client, task and sale collections."""

    open_tasks: int
    active_clients: int
    total_clients: int
    revenue_total: float
    monthly_sales: float
    recent_activity: int
    cards: list[StatCard]


def _records(source: Iterable[Any] | None) -> list[Any]:
    return list(source) if source else []


def count_open_tasks(tasks: Iterable[Any] | None) -> int:
    """Count tasks that are neither completed nor cancelled."""

    return sum(
        1
        for task in _records(tasks)
        if field_value(task, "status") not in CLOSED_TASK_STATUSES
    )


def count_active_clients(clients: Iterable[Any] | None) -> int:
    """Count clients whose status is ``active``."""

    return sum(
        1
        for client in _records(clients)
        if field_value(client, "status") == CLIENT_STATUS_ACTIVE
    )


def total_sales_amount(sales: Iterable[Any] | None) -> Decimal:
    """Sum every sale amount, treating missing amounts as zero."""

    return sum(
        (number_or_zero(field_value(sale, "amount")) for sale in _records(sales)),
        Decimal(0),
    )


def period_start(period: str, reference: datetime) -> datetime:
    """Return the start of the trailing ``period`` window ending at ``reference``."""

    if period == "day":
        return reference - timedelta(days=1)
    if period == "week":
        return reference - timedelta(days=7)
    if period == "month":
        if reference.month == 1:
            target_year, target_month = reference.year - 1, 12
        else:
            target_year, target_month = reference.year, reference.month - 1
        day = min(reference.day, _days_in_month(target_year, target_month))
        return reference.replace(year=target_year, month=target_month, day=day)
    if period == "year":
        try:
            return reference.replace(year=reference.year - 1)
        except ValueError:
            # 29 February
            return reference.replace(year=reference.year - 1, day=28)
    msg = f"Unsupported sales period '{period}'. Use one of: {', '.join(SALES_PERIODS)}"
    raise ValueError(msg)


def _days_in_month(year: int, month: int) -> int:
    if month == 12:
        following = datetime(year + 1, 1, 1)
    else:
        following = datetime(year, month + 1, 1)
    return (following - timedelta(days=1)).day


def sales_total_for_period(
    sales: Iterable[Any] | None,
    period: str = "month",
    *,
    now: datetime | None = None,
) -> Decimal:
    """Sum won sales created within the trailing ``period`` window."""

    reference = ensure_app_timezone(now) or now_in_app_timezone()
    start = period_start(period, reference)
    total = Decimal(0)
    for sale in _records(sales):
        if field_value(sale, "status") not in WON_SALE_STATUSES:
            continue
        created_at = first_datetime(field_value(sale, "created_at"))
        if created_at is None or created_at < start:
            continue
        total += number_or_zero(field_value(sale, "amount"))
    return total


def _format_currency(value: Decimal) -> str:
    return f"${value:,.2f}"


def summarize(
    clients: Iterable[Any] | None,
    tasks: Iterable[Any] | None,
    sales: Iterable[Any] | None,
    *,
    recent_activity: int = 0,
    now: datetime | None = None,
) -> DashboardStats:
    """Compute the dashboard counters and their headline cards."""

    client_records = _records(clients)
    sale_records = _records(sales)

    open_tasks = count_open_tasks(tasks)
    active_clients = count_active_clients(client_records)
    revenue = total_sales_amount(sale_records)
    monthly = sales_total_for_period(sale_records, "month", now=now)

    cards = [
        StatCard(
            title="Open Tasks",
            value=str(open_tasks),
            change="All caught up!" if open_tasks == 0 else f"{open_tasks} to complete",
        ),
        StatCard(
            title="Active Clients",
            value=str(active_clients),
            change=f"{active_clients} of {len(client_records)} active",
        ),
        StatCard(
            title="Monthly Sales",
            value=_format_currency(monthly),
            change="Total revenue this month",
        ),
        StatCard(
            title="Recent Activity",
            value=str(recent_activity),
            change="Latest updates" if recent_activity > 0 else "No recent activity",
        ),
    ]

    return DashboardStats(
        open_tasks=open_tasks,
        active_clients=active_clients,
        total_clients=len(client_records),
        revenue_total=float(revenue),
        monthly_sales=float(monthly),
        recent_activity=recent_activity,
        cards=cards,
    )


__all__ = [
    "DashboardStats",
    "SALES_PERIODS",
    "StatCard",
    "count_active_clients",
    "count_open_tasks",
    "period_start",
    "sales_total_for_period",
    "summarize",
    "total_sales_amount",
]
