from fastapi import FastAPI

from .activity import router as activity_router
from .clients import router as clients_router
from .dashboard import router as dashboard_router
from .sales import router as sales_router
from .tasks import router as tasks_router


def register_routes(app: FastAPI) -> None:
    """Register every API router on the FastAPI application."""

    app.include_router(clients_router)
    app.include_router(tasks_router)
    app.include_router(sales_router)
    app.include_router(activity_router)
    app.include_router(dashboard_router)
