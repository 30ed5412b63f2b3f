"""Entity providers feeding the dashboard.

Each provider reads one collection through its repository and wraps the result
in an :class:`EntitySnapshot`. Store failures are logged and reported through
``snapshot.error`` instead of being raised, so a broken table only empties its
own part of the dashboard.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from typing import TypeVar

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from atelier_crm.domain.entities import Client, EntitySnapshot, Sale, Task
from atelier_crm.infrastructure.repositories import (
    ClientRepository,
    SaleRepository,
    TaskRepository,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _snapshot(
    session: Session, label: str, fetch: Callable[[], Sequence[T]]
) -> EntitySnapshot[T]:
    try:
        items = list(fetch())
    except SQLAlchemyError as exc:
        logger.exception("Error fetching %s: %s", label, exc)
        session.rollback()
        return EntitySnapshot(items=None, loading=False, error=exc)
    return EntitySnapshot(items=items, loading=False, error=None)


def fetch_clients(session: Session) -> EntitySnapshot[Client]:
    """Return every client, most recently created first."""

    repository = ClientRepository(session)
    return _snapshot(session, "clients", repository.list)


def fetch_tasks(
    session: Session, *, client_id: str | None = None
) -> EntitySnapshot[Task]:
    """Return tasks ordered by due date, optionally for a single client."""

    repository = TaskRepository(session)
    return _snapshot(session, "tasks", lambda: repository.list(client_id=client_id))


def fetch_sales(
    session: Session, *, client_id: str | None = None
) -> EntitySnapshot[Sale]:
    """Return sales, most recently created first, optionally for a single client."""

    repository = SaleRepository(session)
    return _snapshot(session, "sales", lambda: repository.list(client_id=client_id))


__all__ = ["fetch_clients", "fetch_sales", "fetch_tasks"]
