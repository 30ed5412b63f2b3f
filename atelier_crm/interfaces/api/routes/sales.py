"""Routes for managing the sales pipeline."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from sqlalchemy.orm import Session

from atelier_crm.application.use_cases.sales import (
    SALE_NOT_FOUND,
    create_sale as create_sale_uc,
    delete_sale as delete_sale_uc,
    get_sale as get_sale_uc,
    get_sales_total as get_sales_total_uc,
    list_sales as list_sales_uc,
    update_sale as update_sale_uc,
)
from atelier_crm.application.use_cases.stats import SALES_PERIODS
from atelier_crm.domain.entities import Sale
from atelier_crm.interfaces.api.dependencies import get_db
from atelier_crm.interfaces.api.routes_helpers import http_error_from_value_error
from atelier_crm.interfaces.api.schemas import (
    SaleCreate,
    SaleRead,
    SalesTotalRead,
    SaleUpdate,
)

router = APIRouter(prefix="/sales", tags=["sales"])


def _to_read_model(sale: Sale) -> SaleRead:
    return SaleRead.model_validate(sale)


def _error(exc: ValueError) -> HTTPException:
    return http_error_from_value_error(exc, not_found=SALE_NOT_FOUND)


@router.get("/", response_model=list[SaleRead])
def list_sales(
    client_id: str | None = Query(None, description="Only sales for this client"),
    skip: int = Query(0, ge=0),
    limit: int | None = Query(None, ge=1, le=500),
    db: Session = Depends(get_db),
) -> list[SaleRead]:
    """Return sales, newest first."""

    sales = list_sales_uc(db, client_id=client_id, skip=skip, limit=limit)
    return [_to_read_model(sale) for sale in sales]


@router.post("/", response_model=SaleRead, status_code=status.HTTP_201_CREATED)
def create_sale(sale_in: SaleCreate, db: Session = Depends(get_db)) -> SaleRead:
    """Record a sale."""

    try:
        sale = create_sale_uc(db, fields=sale_in.model_dump())
    except ValueError as exc:
        raise _error(exc) from exc
    return _to_read_model(sale)


@router.get("/total", response_model=SalesTotalRead)
def read_sales_total(
    period: str = Query("month", description=f"One of: {', '.join(SALES_PERIODS)}"),
    db: Session = Depends(get_db),
) -> SalesTotalRead:
    """Return revenue from won sales over the trailing period."""

    try:
        total = get_sales_total_uc(db, period=period)
    except ValueError as exc:
        raise _error(exc) from exc
    return SalesTotalRead(period=period, total=float(total))


@router.get("/{sale_id}", response_model=SaleRead)
def read_sale(sale_id: str, db: Session = Depends(get_db)) -> SaleRead:
    """Return the sale identified by ``sale_id``."""

    try:
        sale = get_sale_uc(db, sale_id)
    except ValueError as exc:
        raise _error(exc) from exc
    return _to_read_model(sale)


@router.put("/{sale_id}", response_model=SaleRead)
def update_sale(
    sale_id: str,
    sale_in: SaleUpdate,
    db: Session = Depends(get_db),
) -> SaleRead:
    """Update an existing sale; omitted fields are left untouched."""

    try:
        sale = update_sale_uc(
            db, sale_id=sale_id, changes=sale_in.model_dump(exclude_unset=True)
        )
    except ValueError as exc:
        raise _error(exc) from exc
    return _to_read_model(sale)


@router.delete("/{sale_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_sale(sale_id: str, db: Session = Depends(get_db)) -> Response:
    """Delete a sale."""

    try:
        delete_sale_uc(db, sale_id)
    except ValueError as exc:
        raise _error(exc) from exc
    return Response(status_code=status.HTTP_204_NO_CONTENT)


__all__ = ["router"]
