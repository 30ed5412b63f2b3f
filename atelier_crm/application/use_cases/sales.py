"""Use cases for managing the sales pipeline."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from dataclasses import replace
from decimal import Decimal
from typing import Any

from sqlalchemy.orm import Session

from atelier_crm.domain.entities import SALE_STATUSES, WON_SALE_STATUSES, Sale
from atelier_crm.infrastructure.repositories import ClientRepository, SaleRepository
from atelier_crm.utils import now_in_app_timezone

from .stats import period_start, sales_total_for_period

logger = logging.getLogger(__name__)

SALE_NOT_FOUND = "Sale not found"
_ACCEPTED_STATUSES = frozenset(SALE_STATUSES) | WON_SALE_STATUSES


def _validate(session: Session, fields: Mapping[str, Any]) -> None:
    status = fields.get("status")
    if status is not None and status not in _ACCEPTED_STATUSES:
        msg = f"Unsupported sale status '{status}'"
        raise ValueError(msg)
    client_id = fields.get("client_id")
    if client_id is not None and not ClientRepository(session).exists(client_id):
        raise ValueError("Linked client does not exist")


def list_sales(
    session: Session,
    *,
    client_id: str | None = None,
    skip: int = 0,
    limit: int | None = None,
) -> Sequence[Sale]:
    """Return sales, newest first, optionally for one client."""

    repository = SaleRepository(session)
    return repository.list(client_id=client_id, skip=skip, limit=limit)


def get_sale(session: Session, sale_id: str) -> Sale:
    """Return the sale identified by ``sale_id`` or raise an error."""

    sale = SaleRepository(session).get(sale_id)
    if sale is None:
        raise ValueError(SALE_NOT_FOUND)
    return sale


def create_sale(session: Session, *, fields: Mapping[str, Any]) -> Sale:
    """Create a sale from canonical ``fields``."""

    _validate(session, fields)
    entity = replace(
        Sale(id=None, **fields), created_at=now_in_app_timezone(), updated_at=None
    )
    created = SaleRepository(session).create(entity)
    logger.info("Created sale %s", created.id)
    return created


def update_sale(
    session: Session, *, sale_id: str, changes: Mapping[str, Any]
) -> Sale:
    """Apply canonical ``changes`` to an existing sale."""

    repository = SaleRepository(session)
    current = repository.get(sale_id)
    if current is None:
        raise ValueError(SALE_NOT_FOUND)
    _validate(session, changes)

    updated = replace(current, **changes, updated_at=now_in_app_timezone())
    return repository.update(updated)


def delete_sale(session: Session, sale_id: str) -> None:
    """Remove a sale or raise an error if it does not exist."""

    if not SaleRepository(session).delete(sale_id):
        raise ValueError(SALE_NOT_FOUND)
    logger.info("Deleted sale %s", sale_id)


def get_sales_total(session: Session, *, period: str = "month") -> Decimal:
    """Return revenue from won sales created in the trailing ``period``."""

    now = now_in_app_timezone()
    sales = SaleRepository(session).list(created_since=period_start(period, now))
    return sales_total_for_period(sales, period, now=now)


__all__ = [
    "SALE_NOT_FOUND",
    "create_sale",
    "delete_sale",
    "get_sale",
    "get_sales_total",
    "list_sales",
    "update_sale",
]
