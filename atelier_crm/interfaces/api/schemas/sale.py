"""Schemas for sales endpoints."""

from __future__ import annotations

from collections.abc import Mapping
from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from atelier_crm.infrastructure.normalization import normalize_sale_payload


class _NormalizedSalePayload(BaseModel):
    @model_validator(mode="before")
    @classmethod
    def _normalize_wire_schema(cls, data: Any) -> Any:
        if isinstance(data, Mapping):
            return normalize_sale_payload(data)
        return data


class SaleCreate(_NormalizedSalePayload):
    """Payload required to record a sale."""

    client_id: str | None = None
    status: str = "lead"
    amount: float | None = Field(None, ge=0)
    probability: int | None = Field(None, ge=0, le=100)
    expected_close_date: datetime | None = None
    notes: str | None = None


class SaleUpdate(_NormalizedSalePayload):
    client_id: str | None = None
    status: str | None = None
    amount: float | None = Field(None, ge=0)
    probability: int | None = Field(None, ge=0, le=100)
    expected_close_date: datetime | None = None
    notes: str | None = None

    @field_validator("status")
    @classmethod
    def _reject_null(cls, value: str | None) -> str:
        if value is None:
            raise ValueError("may be omitted but not null")
        return value


class SaleRead(BaseModel):
    id: str
    client_id: str | None
    client_name: str | None
    status: str | None
    amount: float | None
    probability: int | None
    expected_close_date: datetime | None
    notes: str | None
    created_at: datetime | None
    updated_at: datetime | None

    model_config = ConfigDict(from_attributes=True)


class SalesTotalRead(BaseModel):
    period: str = Field(..., description="Trailing window the total covers")
    total: float = Field(..., description="Revenue from won sales in the window")


__all__ = ["SaleCreate", "SaleRead", "SaleUpdate", "SalesTotalRead"]
