"""Routes for managing clients."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from sqlalchemy.orm import Session

from atelier_crm.application.use_cases.clients import (
    CLIENT_NOT_FOUND,
    create_client as create_client_uc,
    delete_client as delete_client_uc,
    get_client as get_client_uc,
    list_clients as list_clients_uc,
    update_client as update_client_uc,
    update_client_status as update_client_status_uc,
)
from atelier_crm.domain.entities import Client
from atelier_crm.interfaces.api.dependencies import get_db
from atelier_crm.interfaces.api.routes_helpers import http_error_from_value_error
from atelier_crm.interfaces.api.schemas import (
    ClientCreate,
    ClientRead,
    ClientStatusUpdate,
    ClientUpdate,
)

router = APIRouter(prefix="/clients", tags=["clients"])


def _to_read_model(client: Client) -> ClientRead:
    return ClientRead.model_validate(client)


def _error(exc: ValueError) -> HTTPException:
    return http_error_from_value_error(exc, not_found=CLIENT_NOT_FOUND)


@router.get("/", response_model=list[ClientRead])
def list_clients(
    status_filter: str | None = Query(None, alias="status", description="Client status"),
    skip: int = Query(0, ge=0),
    limit: int | None = Query(None, ge=1, le=500),
    db: Session = Depends(get_db),
) -> list[ClientRead]:
    """Return clients, newest first."""

    clients = list_clients_uc(db, status=status_filter, skip=skip, limit=limit)
    return [_to_read_model(client) for client in clients]


@router.post("/", response_model=ClientRead, status_code=status.HTTP_201_CREATED)
def create_client(
    client_in: ClientCreate,
    db: Session = Depends(get_db),
) -> ClientRead:
    """Create a client."""

    try:
        client = create_client_uc(db, fields=client_in.model_dump())
    except ValueError as exc:
        raise _error(exc) from exc
    return _to_read_model(client)


@router.get("/{client_id}", response_model=ClientRead)
def read_client(client_id: str, db: Session = Depends(get_db)) -> ClientRead:
    """Return the client identified by ``client_id``."""

    try:
        client = get_client_uc(db, client_id)
    except ValueError as exc:
        raise _error(exc) from exc
    return _to_read_model(client)


@router.put("/{client_id}", response_model=ClientRead)
def update_client(
    client_id: str,
    client_in: ClientUpdate,
    db: Session = Depends(get_db),
) -> ClientRead:
    """Update an existing client; omitted fields are left untouched."""

    try:
        client = update_client_uc(
            db, client_id=client_id, changes=client_in.model_dump(exclude_unset=True)
        )
    except ValueError as exc:
        raise _error(exc) from exc
    return _to_read_model(client)


@router.patch("/{client_id}/status", response_model=ClientRead)
def update_client_status(
    client_id: str,
    status_in: ClientStatusUpdate,
    db: Session = Depends(get_db),
) -> ClientRead:
    """Move a client to another status."""

    try:
        client = update_client_status_uc(db, client_id=client_id, status=status_in.status)
    except ValueError as exc:
        raise _error(exc) from exc
    return _to_read_model(client)


@router.delete("/{client_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_client(client_id: str, db: Session = Depends(get_db)) -> Response:
    """Delete a client."""

    try:
        delete_client_uc(db, client_id)
    except ValueError as exc:
        raise _error(exc) from exc
    return Response(status_code=status.HTTP_204_NO_CONTENT)


__all__ = ["router"]
