"""Null-tolerant accessors shared by the read-side projections.

Every fallback used when a record is missing a value is declared through these
helpers so that a dirty record degrades to placeholder text instead of raising.
"""

from __future__ import annotations

from collections.abc import Mapping
from datetime import datetime
from decimal import Decimal, InvalidOperation
from typing import Any

from .datetime import parse_app_datetime


def field_value(record: Any, name: str, default: Any = None) -> Any:
    """Read ``name`` from ``record`` whether it is a mapping or an object."""

    if record is None:
        return default
    if isinstance(record, Mapping):
        value = record.get(name, default)
    else:
        value = getattr(record, name, default)
    return default if value is None else value


def text_or(value: Any, fallback: str) -> str:
    """Return ``value`` as text, or ``fallback`` when it is missing or blank."""

    if value is None:
        return fallback
    text = value if isinstance(value, str) else str(value)
    return text if text.strip() else fallback


def number_or_zero(value: Any) -> Decimal:
    """Return ``value`` as a ``Decimal`` treating missing or invalid numbers as 0."""

    if value is None or isinstance(value, bool):
        return Decimal(0)
    try:
        number = Decimal(str(value))
    except (InvalidOperation, ValueError):
        return Decimal(0)
    if not number.is_finite():
        return Decimal(0)
    return number


def first_datetime(*candidates: Any) -> datetime | None:
    """Return the first candidate that can be read as a datetime."""

    for candidate in candidates:
        parsed = parse_app_datetime(candidate)
        if parsed is not None:
            return parsed
    return None


__all__ = ["field_value", "first_datetime", "number_or_zero", "text_or"]
