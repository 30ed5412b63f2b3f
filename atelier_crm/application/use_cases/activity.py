"""Use cases for aggregating recent activity across clients, tasks and sales."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime, timezone
from typing import Any, Final

from sqlalchemy.orm import Session

from atelier_crm.application.providers import fetch_clients, fetch_sales, fetch_tasks
from atelier_crm.domain.entities import UNNAMED_CLIENT, Activity
from atelier_crm.utils import (
    ensure_app_timezone,
    field_value,
    first_datetime,
    now_in_app_timezone,
    number_or_zero,
    text_or,
)

DEFAULT_ACTIVITY_LIMIT: Final[int] = 10
CLIENT_ACTIVITY_CAP: Final[int] = 3
TASK_ACTIVITY_CAP: Final[int] = 5
SALE_ACTIVITY_CAP: Final[int] = 2

_OLDEST: Final[datetime] = datetime.min.replace(tzinfo=timezone.utc)


def _records(source: Iterable[Any] | None) -> list[Any]:
    return list(source) if source else []


def _created_at_or_oldest(record: Any) -> datetime:
    return first_datetime(field_value(record, "created_at")) or _OLDEST


def _newest_first(records: list[Any]) -> list[Any]:
    # ``sorted`` copies and is stable, so equal timestamps keep provider order.
    return sorted(records, key=_created_at_or_oldest, reverse=True)


def _full_name(record: Any) -> str:
    first = field_value(record, "first_name", "")
    last = field_value(record, "last_name", "")
    return f"{first} {last}".strip() or UNNAMED_CLIENT


def _client_activity(record: Any, now: datetime) -> Activity:
    client_id = str(field_value(record, "id", ""))
    return Activity(
        id=client_id,
        kind="client",
        title=f"New Client: {_full_name(record)}",
        description=text_or(field_value(record, "email"), "No email"),
        timestamp=first_datetime(field_value(record, "created_at")) or now,
        link=f"/clients/{client_id}",
    )


def _task_activity(record: Any, now: datetime) -> Activity:
    task_id = str(field_value(record, "id", ""))
    status = field_value(record, "status")
    if text_or(status, ""):
        # Only the first underscore is replaced.
        description = f"Status: {str(status).replace('_', ' ', 1)}"
    else:
        description = "No status"
    return Activity(
        id=task_id,
        kind="task",
        title=f"Task: {text_or(field_value(record, 'title'), 'Untitled')}",
        description=description,
        timestamp=first_datetime(
            field_value(record, "due_date"), field_value(record, "created_at")
        )
        or now,
        link=f"/tasks/{task_id}",
    )


def _sale_activity(record: Any, now: datetime) -> Activity:
    sale_id = str(field_value(record, "id", ""))
    amount = number_or_zero(field_value(record, "amount"))
    return Activity(
        id=sale_id,
        kind="sale",
        title=f"New Sale: ${amount:.2f}",
        description=text_or(field_value(record, "client_name"), "No client"),
        timestamp=first_datetime(field_value(record, "created_at")) or now,
        link=f"/sales/{sale_id}",
    )


def aggregate_recent_activity(
    clients: Iterable[Any] | None,
    tasks: Iterable[Any] | None,
    sales: Iterable[Any] | None,
    *,
    limit: int = DEFAULT_ACTIVITY_LIMIT,
    now: datetime | None = None,
) -> list[Activity]:
    """Merge the three collections into one newest-first feed of at most ``limit``.

    Clients are taken in the order given (providers return them newest first);
    tasks and sales are re-sorted by creation time on a copy before being
    capped. Records without any usable timestamp are stamped with ``now``,
    which is resolved once per call. Missing collections count as empty and
    missing fields fall back to placeholder text, so this never raises on
    incomplete data.
    """

    moment = ensure_app_timezone(now) or now_in_app_timezone()

    activities: list[Activity] = [
        _client_activity(record, moment)
        for record in _records(clients)[:CLIENT_ACTIVITY_CAP]
    ]
    activities.extend(
        _task_activity(record, moment)
        for record in _newest_first(_records(tasks))[:TASK_ACTIVITY_CAP]
    )
    activities.extend(
        _sale_activity(record, moment)
        for record in _newest_first(_records(sales))[:SALE_ACTIVITY_CAP]
    )

    activities.sort(key=lambda activity: activity.timestamp, reverse=True)
    return activities[: max(limit, 0)]


def get_recent_activity(
    session: Session, *, limit: int = DEFAULT_ACTIVITY_LIMIT
) -> list[Activity]:
    """Fetch clients, tasks and sales and return the merged activity feed."""

    return aggregate_recent_activity(
        fetch_clients(session).items,
        fetch_tasks(session).items,
        fetch_sales(session).items,
        limit=limit,
    )


__all__ = [
    "CLIENT_ACTIVITY_CAP",
    "DEFAULT_ACTIVITY_LIMIT",
    "SALE_ACTIVITY_CAP",
    "TASK_ACTIVITY_CAP",
    "aggregate_recent_activity",
    "get_recent_activity",
]
