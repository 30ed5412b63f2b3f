"""FastAPI dependency utilities."""

from collections.abc import Generator

from fastapi import Request
from sqlalchemy.orm import Session

from atelier_crm.config import Settings


def get_db(request: Request) -> Generator[Session, None, None]:
    """Yield a database session from the application's factory and close it afterwards."""

    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()


def get_app_settings(request: Request) -> Settings:
    """Return the settings the running application was created with."""

    return request.app.state.settings
