"""Pydantic schemas for activity feed endpoints."""

from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class ActivityRead(BaseModel):
    id: str = Field(..., description="Identifier of the source record")
    kind: Literal["client", "task", "sale"] = Field(
        ..., description="Type of record the activity comes from"
    )
    title: str = Field(..., description="One-line summary")
    description: str = Field(..., description="Secondary line")
    timestamp: datetime = Field(..., description="Moment used to order the feed")
    link: str = Field(..., description="Path of the source record")
    key: str = Field(..., description="Unique key for display rows")

    model_config = ConfigDict(from_attributes=True)


__all__ = ["ActivityRead"]
