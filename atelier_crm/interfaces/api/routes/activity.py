"""Endpoints providing recent activity information."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from atelier_crm.application.use_cases.activity import get_recent_activity
from atelier_crm.config import Settings
from atelier_crm.interfaces.api.dependencies import get_app_settings, get_db
from atelier_crm.interfaces.api.schemas import ActivityRead

router = APIRouter(prefix="/activity", tags=["activity"])


@router.get("/recent", response_model=list[ActivityRead])
def read_recent_activity(
    limit: int | None = Query(None, ge=1, le=50, description="Maximum number of entries"),
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_app_settings),
) -> list[ActivityRead]:
    """Return the merged, newest-first feed of client, task and sale activity."""

    events = get_recent_activity(db, limit=limit or settings.activity_limit)
    return [ActivityRead.model_validate(event) for event in events]


__all__ = ["router"]
