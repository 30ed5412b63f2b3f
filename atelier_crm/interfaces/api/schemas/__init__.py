from .activity import ActivityRead
from .client import (
    AddressSchema,
    ClientCreate,
    ClientRead,
    ClientStatusUpdate,
    ClientUpdate,
)
from .dashboard import (
    DashboardRead,
    DashboardStatsRead,
    SourceStatusRead,
    StatCardRead,
)
from .sale import SaleCreate, SaleRead, SalesTotalRead, SaleUpdate
from .task import TaskCreate, TaskRead, TaskUpdate

__all__ = [
    "ActivityRead",
    "AddressSchema",
    "ClientCreate",
    "ClientRead",
    "ClientStatusUpdate",
    "ClientUpdate",
    "DashboardRead",
    "DashboardStatsRead",
    "SaleCreate",
    "SaleRead",
    "SaleUpdate",
    "SalesTotalRead",
    "SourceStatusRead",
    "StatCardRead",
    "TaskCreate",
    "TaskRead",
    "TaskUpdate",
]
