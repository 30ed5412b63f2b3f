"""Domain entity representing an opportunity in the sales pipeline."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

SALE_STATUS_LEAD = "lead"
SALE_STATUS_CLOSED_WON = "closed_won"
SALE_STATUS_CLOSED_LOST = "closed_lost"

SALE_STATUSES = (
    SALE_STATUS_LEAD,
    "needs_quote",
    "quote_sent",
    "follow_up",
    "measurement",
    "design",
    "presentation",
    "negotiation",
    SALE_STATUS_CLOSED_WON,
    SALE_STATUS_CLOSED_LOST,
)

# ``completed`` predates the pipeline vocabulary and still appears in old rows.
WON_SALE_STATUSES = frozenset({SALE_STATUS_CLOSED_WON, "completed"})


@dataclass
class Sale:
    """A quote or order for a client."""

    id: str | None
    client_id: str | None = None
    client_name: str | None = None
    status: str | None = SALE_STATUS_LEAD
    amount: float | None = None
    probability: int | None = None
    expected_close_date: datetime | None = None
    notes: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


__all__ = [
    "SALE_STATUSES",
    "SALE_STATUS_CLOSED_LOST",
    "SALE_STATUS_CLOSED_WON",
    "SALE_STATUS_LEAD",
    "Sale",
    "WON_SALE_STATUSES",
]
