"""Database configuration and session management.

The engine and session factory are built explicitly from ``Settings`` and
handed to whoever needs them; nothing here connects at import time.
"""

from __future__ import annotations

import logging

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

from atelier_crm.config import Settings

logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    """Base class for SQLAlchemy models."""


def build_engine(settings: Settings) -> Engine:
    """Create the SQLAlchemy engine described by ``settings.database_url``."""

    database_url = settings.database_url
    connect_args: dict[str, object] = {}
    if database_url.startswith("sqlite"):
        # FastAPI runs sync endpoints in a threadpool.
        connect_args["check_same_thread"] = False
    logger.debug("Creating database engine for %s", database_url.split("://", 1)[0])
    return create_engine(database_url, pool_pre_ping=True, connect_args=connect_args)


def build_session_factory(engine: Engine) -> sessionmaker[Session]:
    """Return a session factory bound to ``engine``."""

    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


def initialize_database(engine: Engine) -> None:
    """Ensure all ORM models have corresponding database tables."""

    from atelier_crm.infrastructure import models  # noqa: F401  # ensure models are imported

    Base.metadata.create_all(bind=engine, checkfirst=True)


__all__ = [
    "Base",
    "build_engine",
    "build_session_factory",
    "initialize_database",
]
