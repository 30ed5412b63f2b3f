"""Schemas for client endpoints."""

from __future__ import annotations

from collections.abc import Mapping
from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from atelier_crm.infrastructure.normalization import normalize_client_payload


class _NormalizedClientPayload(BaseModel):
    """Accepts both the legacy and the current client wire schema."""

    @model_validator(mode="before")
    @classmethod
    def _normalize_wire_schema(cls, data: Any) -> Any:
        if isinstance(data, Mapping):
            return normalize_client_payload(data)
        return data


class AddressSchema(BaseModel):
    street: str | None = None
    city: str | None = None
    state: str | None = None
    zip: str | None = None
    country: str | None = None
    delivery_notes: str | None = None


class ClientCreate(_NormalizedClientPayload):
    """Payload required to create a client."""

    first_name: str = Field("", max_length=120)
    last_name: str = Field("", max_length=120)
    email: str | None = Field(None, max_length=255)
    phone: str | None = Field(None, max_length=50)
    status: str = Field("lead", description="lead, active, inactive or project")
    source: str | None = None
    budget: float | None = Field(None, ge=0)
    style_preferences: list[str] = Field(default_factory=list)
    room_types: list[str] = Field(default_factory=list)
    last_contact_date: datetime | None = None
    next_follow_up_date: datetime | None = None
    notes: str | None = None
    address: AddressSchema = Field(default_factory=AddressSchema)
    total_sales: float | None = Field(None, ge=0)


class ClientUpdate(_NormalizedClientPayload):
    first_name: str | None = Field(None, max_length=120)
    last_name: str | None = Field(None, max_length=120)
    email: str | None = Field(None, max_length=255)
    phone: str | None = Field(None, max_length=50)
    status: str | None = None
    source: str | None = None
    budget: float | None = Field(None, ge=0)
    style_preferences: list[str] | None = None
    room_types: list[str] | None = None
    last_contact_date: datetime | None = None
    next_follow_up_date: datetime | None = None
    notes: str | None = None
    address: AddressSchema | None = None
    total_sales: float | None = Field(None, ge=0)

    @field_validator("status")
    @classmethod
    def _reject_null(cls, value: str | None) -> str:
        if value is None:
            raise ValueError("may be omitted but not null")
        return value


class ClientStatusUpdate(BaseModel):
    status: str = Field(..., description="lead, active, inactive or project")


class ClientRead(BaseModel):
    id: str
    first_name: str | None
    last_name: str | None
    full_name: str
    email: str | None
    phone: str | None
    status: str | None
    source: str | None
    budget: float | None
    style_preferences: list[str]
    room_types: list[str]
    last_contact_date: datetime | None
    next_follow_up_date: datetime | None
    notes: str | None
    address: dict[str, Any]
    total_sales: float | None
    created_at: datetime | None
    updated_at: datetime | None

    model_config = ConfigDict(from_attributes=True)


__all__ = [
    "AddressSchema",
    "ClientCreate",
    "ClientRead",
    "ClientStatusUpdate",
    "ClientUpdate",
]
