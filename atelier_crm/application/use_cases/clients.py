"""Use cases for managing clients."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from dataclasses import replace
from typing import Any

from sqlalchemy.orm import Session

from atelier_crm.domain.entities import CLIENT_STATUSES, Client
from atelier_crm.infrastructure.repositories import ClientRepository
from atelier_crm.utils import now_in_app_timezone

logger = logging.getLogger(__name__)

CLIENT_NOT_FOUND = "Client not found"


def _ensure_status(status: str | None) -> None:
    if status is not None and status not in CLIENT_STATUSES:
        msg = f"Unsupported client status '{status}'"
        raise ValueError(msg)


def list_clients(
    session: Session,
    *,
    status: str | None = None,
    skip: int = 0,
    limit: int | None = None,
) -> Sequence[Client]:
    """Return clients, newest first, optionally filtered by status."""

    repository = ClientRepository(session)
    return repository.list(status=status, skip=skip, limit=limit)


def get_client(session: Session, client_id: str) -> Client:
    """Return the client identified by ``client_id`` or raise an error."""

    repository = ClientRepository(session)
    client = repository.get(client_id)
    if client is None:
        raise ValueError(CLIENT_NOT_FOUND)
    return client


def create_client(session: Session, *, fields: Mapping[str, Any]) -> Client:
    """Create a client from canonical ``fields``."""

    _ensure_status(fields.get("status"))
    entity = Client(id=None, **fields)
    entity = replace(entity, created_at=now_in_app_timezone(), updated_at=None)
    created = ClientRepository(session).create(entity)
    logger.info("Created client %s", created.id)
    return created


def update_client(
    session: Session, *, client_id: str, changes: Mapping[str, Any]
) -> Client:
    """Apply canonical ``changes`` to an existing client."""

    repository = ClientRepository(session)
    current = repository.get(client_id)
    if current is None:
        raise ValueError(CLIENT_NOT_FOUND)
    _ensure_status(changes.get("status"))

    updated = replace(current, **changes, updated_at=now_in_app_timezone())
    return repository.update(updated)


def update_client_status(session: Session, *, client_id: str, status: str) -> Client:
    """Move a client to another stage of the relationship."""

    _ensure_status(status)
    return update_client(session, client_id=client_id, changes={"status": status})


def delete_client(session: Session, client_id: str) -> None:
    """Remove a client; linked tasks and sales are kept but unlinked."""

    repository = ClientRepository(session)
    if not repository.delete(client_id):
        raise ValueError(CLIENT_NOT_FOUND)
    logger.info("Deleted client %s", client_id)


__all__ = [
    "CLIENT_NOT_FOUND",
    "create_client",
    "delete_client",
    "get_client",
    "list_clients",
    "update_client",
    "update_client_status",
]
