"""Persistence layer for sales."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime

from sqlalchemy import desc
from sqlalchemy.orm import Session

from atelier_crm.domain.entities import Client, Sale
from atelier_crm.infrastructure.models import SaleModel, TaskModel
from atelier_crm.utils import ensure_app_naive_datetime, ensure_app_timezone


class SaleRepository:
    """Provide CRUD operations for sales."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list(
        self,
        *,
        client_id: str | None = None,
        created_since: datetime | None = None,
        skip: int = 0,
        limit: int | None = None,
    ) -> Sequence[Sale]:
        query = self.session.query(SaleModel)
        if client_id is not None:
            query = query.filter(SaleModel.client_id == client_id)
        if created_since is not None:
            query = query.filter(
                SaleModel.created_at >= ensure_app_naive_datetime(created_since)
            )
        query = query.order_by(desc(SaleModel.created_at), desc(SaleModel.id))
        if skip:
            query = query.offset(skip)
        if limit is not None:
            query = query.limit(limit)
        return [self._to_entity(model) for model in query.all()]

    def get(self, sale_id: str) -> Sale | None:
        model = self._get_model(sale_id)
        return self._to_entity(model) if model else None

    def create(self, sale: Sale) -> Sale:
        model = SaleModel()
        if sale.id:
            model.id = sale.id
        self._apply_entity_to_model(model, sale)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def update(self, sale: Sale) -> Sale:
        model = self._get_model(sale.id)
        if not model:
            msg = f"Sale with id {sale.id} not found"
            raise ValueError(msg)
        self._apply_entity_to_model(model, sale)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def delete(self, sale_id: str) -> bool:
        model = self._get_model(sale_id)
        if not model:
            return False
        self.session.query(TaskModel).filter(TaskModel.sale_id == sale_id).update(
            {TaskModel.sale_id: None}, synchronize_session=False
        )
        self.session.delete(model)
        self.session.commit()
        return True

    def _get_model(self, sale_id: str | None) -> SaleModel | None:
        if sale_id is None:
            return None
        return self.session.get(SaleModel, sale_id)

    @staticmethod
    def _client_name(model: SaleModel) -> str | None:
        client = model.client
        if client is None:
            return None
        return Client(
            id=client.id, first_name=client.first_name, last_name=client.last_name
        ).full_name

    @classmethod
    def _to_entity(cls, model: SaleModel) -> Sale:
        return Sale(
            id=model.id,
            client_id=model.client_id,
            client_name=cls._client_name(model),
            status=model.status,
            amount=model.amount,
            probability=model.probability,
            expected_close_date=ensure_app_timezone(model.expected_close_date),
            notes=model.notes,
            created_at=ensure_app_timezone(model.created_at),
            updated_at=ensure_app_timezone(model.updated_at),
        )

    @staticmethod
    def _apply_entity_to_model(model: SaleModel, sale: Sale) -> None:
        model.client_id = sale.client_id
        model.status = sale.status or "lead"
        model.amount = sale.amount
        model.probability = sale.probability
        model.expected_close_date = ensure_app_naive_datetime(sale.expected_close_date)
        model.notes = sale.notes
        if sale.created_at is not None:
            model.created_at = ensure_app_naive_datetime(sale.created_at)
        model.updated_at = ensure_app_naive_datetime(sale.updated_at)


__all__ = ["SaleRepository"]
