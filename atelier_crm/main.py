"""FastAPI application factory."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from atelier_crm.config import Settings, get_settings
from atelier_crm.infrastructure.database import (
    build_engine,
    build_session_factory,
    initialize_database,
)
from atelier_crm.interfaces.api.routes import register_routes
from atelier_crm.utils import configure_app_timezone

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(settings: Settings) -> None:
    """Apply the configured level to the root logger."""

    logging.basicConfig(level=settings.log_level, format=LOG_FORMAT)
    logging.getLogger("atelier_crm").setLevel(settings.log_level)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    ``settings`` defaults to the environment-derived ones; tests pass their own
    to point the app at a throwaway database.
    """

    settings = settings or get_settings()
    configure_logging(settings)
    configure_app_timezone(settings)

    engine = build_engine(settings)
    initialize_database(engine)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        yield
        engine.dispose()
        logger.info("Database engine disposed")

    app = FastAPI(title="Atelier CRM", lifespan=lifespan)
    app.state.settings = settings
    app.state.engine = engine
    app.state.session_factory = build_session_factory(engine)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_routes(app)
    return app


__all__ = ["configure_logging", "create_app"]
