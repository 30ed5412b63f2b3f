"""SQLAlchemy model for sales."""

from sqlalchemy import Column, DateTime, Float, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from atelier_crm.infrastructure.database import Base
from atelier_crm.utils import now_in_app_naive_datetime

from ._columns import generate_id


class SaleModel(Base):
    """Database representation of sales pipeline entries."""

    __tablename__ = "sales"

    id = Column(String(36), primary_key=True, default=generate_id)
    client_id = Column(
        String(36), ForeignKey("clients.id", ondelete="SET NULL"), nullable=True, index=True
    )
    status = Column(String(30), nullable=False, default="lead", index=True)
    amount = Column(Float, nullable=True)
    probability = Column(Integer, nullable=True)
    expected_close_date = Column(DateTime(), nullable=True)
    notes = Column(Text, nullable=True)
    created_at = Column(
        DateTime(), nullable=False, default=now_in_app_naive_datetime
    )
    updated_at = Column(
        DateTime(), nullable=True, onupdate=now_in_app_naive_datetime
    )

    client = relationship("ClientModel", lazy="joined")


__all__ = ["SaleModel"]
