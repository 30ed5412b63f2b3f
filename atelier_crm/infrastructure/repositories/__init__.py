"""Repository implementations for infrastructure layer."""

from .client_repository import ClientRepository
from .sale_repository import SaleRepository
from .task_repository import TaskRepository

__all__ = [
    "ClientRepository",
    "SaleRepository",
    "TaskRepository",
]
