"""Persistence layer for clients."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy import desc
from sqlalchemy.orm import Session

from atelier_crm.domain.entities import Client
from atelier_crm.infrastructure.models import ClientModel, SaleModel, TaskModel
from atelier_crm.infrastructure.normalization import normalize_address
from atelier_crm.utils import ensure_app_naive_datetime, ensure_app_timezone


class ClientRepository:
    """Provide CRUD operations for clients."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list(
        self,
        *,
        status: str | None = None,
        skip: int = 0,
        limit: int | None = None,
    ) -> Sequence[Client]:
        query = self.session.query(ClientModel)
        if status is not None:
            query = query.filter(ClientModel.status == status)
        query = query.order_by(desc(ClientModel.created_at), desc(ClientModel.id))
        if skip:
            query = query.offset(skip)
        if limit is not None:
            query = query.limit(limit)
        return [self._to_entity(model) for model in query.all()]

    def get(self, client_id: str) -> Client | None:
        model = self._get_model(client_id)
        return self._to_entity(model) if model else None

    def exists(self, client_id: str) -> bool:
        return self._get_model(client_id) is not None

    def create(self, client: Client) -> Client:
        model = ClientModel()
        if client.id:
            model.id = client.id
        self._apply_entity_to_model(model, client)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def update(self, client: Client) -> Client:
        model = self._get_model(client.id)
        if not model:
            msg = f"Client with id {client.id} not found"
            raise ValueError(msg)
        self._apply_entity_to_model(model, client)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def delete(self, client_id: str) -> bool:
        model = self._get_model(client_id)
        if not model:
            return False
        # Linked tasks and sales outlive the client.
        self.session.query(TaskModel).filter(TaskModel.client_id == client_id).update(
            {TaskModel.client_id: None}, synchronize_session=False
        )
        self.session.query(SaleModel).filter(SaleModel.client_id == client_id).update(
            {SaleModel.client_id: None}, synchronize_session=False
        )
        self.session.delete(model)
        self.session.commit()
        return True

    def _get_model(self, client_id: str | None) -> ClientModel | None:
        if client_id is None:
            return None
        return self.session.get(ClientModel, client_id)

    @staticmethod
    def _to_entity(model: ClientModel) -> Client:
        return Client(
            id=model.id,
            first_name=model.first_name,
            last_name=model.last_name,
            email=model.email,
            phone=model.phone,
            status=model.status,
            source=model.source,
            budget=model.budget,
            style_preferences=list(model.style_preferences or []),
            room_types=list(model.room_types or []),
            last_contact_date=ensure_app_timezone(model.last_contact_date),
            next_follow_up_date=ensure_app_timezone(model.next_follow_up_date),
            notes=model.notes,
            address=normalize_address(model.address),
            total_sales=model.total_sales,
            created_at=ensure_app_timezone(model.created_at),
            updated_at=ensure_app_timezone(model.updated_at),
        )

    @staticmethod
    def _apply_entity_to_model(model: ClientModel, client: Client) -> None:
        model.first_name = client.first_name or ""
        model.last_name = client.last_name or ""
        model.email = client.email
        model.phone = client.phone
        model.status = client.status or "lead"
        model.source = client.source
        model.budget = client.budget
        model.style_preferences = list(client.style_preferences or [])
        model.room_types = list(client.room_types or [])
        model.last_contact_date = ensure_app_naive_datetime(client.last_contact_date)
        model.next_follow_up_date = ensure_app_naive_datetime(client.next_follow_up_date)
        model.notes = client.notes
        model.address = dict(client.address or {})
        model.total_sales = client.total_sales
        if client.created_at is not None:
            model.created_at = ensure_app_naive_datetime(client.created_at)
        model.updated_at = ensure_app_naive_datetime(client.updated_at)


__all__ = ["ClientRepository"]
