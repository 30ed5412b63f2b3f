"""Tests for the null-tolerant accessors."""

from __future__ import annotations

from datetime import date, datetime, timezone
from decimal import Decimal
from types import SimpleNamespace

import pytest

from atelier_crm.utils import field_value, first_datetime, number_or_zero, text_or


def test_field_value_reads_mappings_objects_and_none() -> None:
    assert field_value({"email": "a@b.co"}, "email") == "a@b.co"
    assert field_value(SimpleNamespace(email="a@b.co"), "email") == "a@b.co"
    assert field_value(None, "email", "fallback") == "fallback"
    assert field_value({"email": None}, "email", "fallback") == "fallback"
    assert field_value(SimpleNamespace(), "email") is None


@pytest.mark.parametrize(
    "value,expected",
    [(None, "No email"), ("", "No email"), ("   ", "No email"), ("x@y.z", "x@y.z"), (42, "42")],
)
def test_text_or(value, expected) -> None:
    assert text_or(value, "No email") == expected


@pytest.mark.parametrize(
    "value,expected",
    [
        (None, Decimal(0)),
        ("abc", Decimal(0)),
        (float("nan"), Decimal(0)),
        (True, Decimal(0)),
        (12.5, Decimal("12.5")),
        ("7", Decimal(7)),
    ],
)
def test_number_or_zero(value, expected) -> None:
    assert number_or_zero(value) == expected


def test_first_datetime_skips_unusable_candidates() -> None:
    expected = datetime(2024, 1, 1, tzinfo=timezone.utc)

    assert first_datetime(None, "garbage", "2024-01-01T00:00:00Z") == expected
    assert first_datetime(date(2024, 1, 1)) == expected
    assert first_datetime(None, "") is None
