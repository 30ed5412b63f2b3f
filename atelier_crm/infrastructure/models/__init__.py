"""ORM models used by the application infrastructure."""

from .client import ClientModel
from .sale import SaleModel
from .task import TaskModel

__all__ = [
    "ClientModel",
    "SaleModel",
    "TaskModel",
]
