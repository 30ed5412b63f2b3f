"""Utility helpers for reusable functionality."""

from .accessors import field_value, first_datetime, number_or_zero, text_or
from .datetime import (
    configure_app_timezone,
    ensure_app_naive_datetime,
    ensure_app_timezone,
    get_app_timezone,
    now_in_app_naive_datetime,
    now_in_app_timezone,
    parse_app_datetime,
    reset_app_timezone,
)

__all__ = [
    "configure_app_timezone",
    "ensure_app_naive_datetime",
    "ensure_app_timezone",
    "field_value",
    "first_datetime",
    "get_app_timezone",
    "now_in_app_naive_datetime",
    "now_in_app_timezone",
    "number_or_zero",
    "parse_app_datetime",
    "reset_app_timezone",
    "text_or",
]
