"""
transport_model.py — Transport Request ORM Model
-------------------------------------------------

Table:
- `transport_requests`: a logistics record moving a produce batch between two
  locations on a scheduled date, with optional vehicle and driver details

Dependencies:
- SQLAlchemy ORM

"""

from sqlalchemy import Column, Date, DateTime, ForeignKey, String, Text
from sqlalchemy.orm import relationship

from db.db import Base, new_id, utcnow
from db.produce_model import ProduceBatch

TRANSPORT_STATUSES = ("pending", "confirmed", "in_progress", "completed", "cancelled")


class TransportRequest(Base):
    __tablename__ = "transport_requests"

    id = Column(String(36), primary_key=True, default=new_id)
    batch_id = Column(String(36), ForeignKey("produce_batches.id"), index=True)

    from_location = Column(Text, nullable=False)
    to_location = Column(Text, nullable=False)
    transport_date = Column(Date, nullable=False)

    vehicle_type = Column(Text)
    driver_name = Column(Text)
    driver_contact = Column(Text)

    # Plain text column in the hosted schema, not an enum
    status = Column(String(32), default="pending")
    created_at = Column(DateTime(timezone=True), default=utcnow)

    batch = relationship(ProduceBatch, backref="transport_requests")
