"""Endpoint returning the dashboard summary."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from atelier_crm.application.use_cases.dashboard import get_dashboard
from atelier_crm.config import Settings
from atelier_crm.interfaces.api.dependencies import get_app_settings, get_db
from atelier_crm.interfaces.api.schemas import DashboardRead

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


@router.get("/", response_model=DashboardRead)
def read_dashboard(
    limit: int | None = Query(None, ge=1, le=50, description="Activity feed size"),
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_app_settings),
) -> DashboardRead:
    """Return the counters, stat cards and recent activity feed."""

    report = get_dashboard(db, limit=limit or settings.activity_limit)
    return DashboardRead.model_validate(report)


__all__ = ["router"]
