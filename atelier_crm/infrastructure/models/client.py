"""SQLAlchemy model for clients."""

from sqlalchemy import Column, DateTime, Float, String, Text

from atelier_crm.infrastructure.database import Base
from atelier_crm.utils import now_in_app_naive_datetime

from ._columns import generate_id, json_type


class ClientModel(Base):
    """Database representation of clients."""

    __tablename__ = "clients"

    id = Column(String(36), primary_key=True, default=generate_id)
    first_name = Column(String(120), nullable=False, default="")
    last_name = Column(String(120), nullable=False, default="")
    email = Column(String(255), nullable=True, index=True)
    phone = Column(String(50), nullable=True)
    status = Column(String(30), nullable=False, default="lead", index=True)
    source = Column(String(120), nullable=True)
    budget = Column(Float, nullable=True)
    style_preferences = Column(json_type, nullable=False, default=list)
    room_types = Column(json_type, nullable=False, default=list)
    last_contact_date = Column(DateTime(), nullable=True)
    next_follow_up_date = Column(DateTime(), nullable=True)
    notes = Column(Text, nullable=True)
    address = Column(json_type, nullable=False, default=dict)
    total_sales = Column(Float, nullable=True)
    created_at = Column(
        DateTime(), nullable=False, default=now_in_app_naive_datetime
    )
    updated_at = Column(
        DateTime(), nullable=True, onupdate=now_in_app_naive_datetime
    )


__all__ = ["ClientModel"]
