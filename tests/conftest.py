"""Shared fixtures: a throwaway SQLite database per test."""

from __future__ import annotations

from collections.abc import Iterator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from atelier_crm.config import Settings
from atelier_crm.infrastructure.database import (
    build_engine,
    build_session_factory,
    initialize_database,
)
from atelier_crm.main import create_app
from atelier_crm.utils import reset_app_timezone


@pytest.fixture(autouse=True)
def _default_timezone() -> Iterator[None]:
    """Undo any timezone an app instance configured during the test."""

    yield
    reset_app_timezone()


@pytest.fixture()
def settings(tmp_path) -> Settings:
    """Settings pointing at a database file inside the test's temp directory."""

    return Settings(
        _env_file=None,
        database_url=f"sqlite:///{tmp_path / 'crm.db'}",
        activity_limit=10,
    )


@pytest.fixture()
def session(settings: Settings) -> Iterator[Session]:
    """Return a session bound to a freshly created schema."""

    engine = build_engine(settings)
    initialize_database(engine)
    db = build_session_factory(engine)()
    try:
        yield db
    finally:
        db.close()
        engine.dispose()


@pytest.fixture()
def api(settings: Settings) -> Iterator[TestClient]:
    """Return a test client bound to a clean application instance."""

    app = create_app(settings)
    with TestClient(app) as test_client:
        yield test_client
