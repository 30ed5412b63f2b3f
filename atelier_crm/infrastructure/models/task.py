"""SQLAlchemy model for tasks."""

from sqlalchemy import Column, DateTime, ForeignKey, String, Text

from atelier_crm.infrastructure.database import Base
from atelier_crm.utils import now_in_app_naive_datetime

from ._columns import generate_id


class TaskModel(Base):
    """Database representation of tasks."""

    __tablename__ = "tasks"

    id = Column(String(36), primary_key=True, default=generate_id)
    title = Column(String(255), nullable=False, default="")
    description = Column(Text, nullable=True)
    type = Column(String(30), nullable=False, default="other")
    status = Column(String(30), nullable=False, default="not_started", index=True)
    priority = Column(String(20), nullable=False, default="medium")
    due_date = Column(DateTime(), nullable=True)
    client_id = Column(
        String(36), ForeignKey("clients.id", ondelete="SET NULL"), nullable=True, index=True
    )
    sale_id = Column(
        String(36), ForeignKey("sales.id", ondelete="SET NULL"), nullable=True
    )
    assigned_to = Column(String(120), nullable=True)
    completed_at = Column(DateTime(), nullable=True)
    created_at = Column(
        DateTime(), nullable=False, default=now_in_app_naive_datetime
    )
    updated_at = Column(
        DateTime(), nullable=True, onupdate=now_in_app_naive_datetime
    )


__all__ = ["TaskModel"]
