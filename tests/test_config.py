"""Tests for the settings model and how the app applies it."""

from __future__ import annotations

from datetime import timedelta

import pytest
from fastapi.testclient import TestClient
from pydantic import ValidationError

from atelier_crm.config import Settings
from atelier_crm.main import create_app
from atelier_crm.utils import now_in_app_timezone


def test_defaults() -> None:
    settings = Settings(_env_file=None)

    assert settings.activity_limit == 10
    assert settings.app_timezone == "UTC"


def test_log_level_is_normalized() -> None:
    assert Settings(_env_file=None, log_level=" debug ").log_level == "DEBUG"


def test_invalid_values_are_rejected() -> None:
    with pytest.raises(ValidationError):
        Settings(_env_file=None, log_level="chatty")
    with pytest.raises(ValidationError):
        Settings(_env_file=None, activity_limit=0)


def test_app_uses_the_timezone_it_was_built_with(tmp_path) -> None:
    """Timestamps are produced and stored in the zone of the injected settings."""

    settings = Settings(
        _env_file=None,
        database_url=f"sqlite:///{tmp_path / 'crm.db'}",
        app_timezone="UTC-05:00",
    )

    app = create_app(settings)

    assert now_in_app_timezone().utcoffset() == timedelta(hours=-5)
    with TestClient(app) as api:
        created = api.post(
            "/clients/",
            json={"first_name": "Ana", "lastContactDate": "2024-01-15T10:00:00Z"},
        ).json()
        fetched = api.get(f"/clients/{created['id']}").json()

    assert fetched["last_contact_date"] == "2024-01-15T05:00:00-05:00"
    assert fetched["created_at"].endswith("-05:00")
