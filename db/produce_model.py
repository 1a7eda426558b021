"""
produce_model.py — Produce Batch ORM Model
-------------------------------------------

Defines the SQLAlchemy ORM model for harvested produce lots.

Table:
- `produce_batches`

Purpose:
- Tracks each harvested lot by a generated traceability code
- Links the lot to the storage unit holding it
- Stores harvest date and expected shelf life for expiry tracking

Dependencies:
- SQLAlchemy ORM

"""

from sqlalchemy import Column, Date, DateTime, Enum, Float, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from db.db import Base, new_id, utcnow
from db.storage_model import StorageUnit

PRODUCE_TYPES = ("vegetables", "fruits", "grains", "dairy", "other")
BATCH_STATUSES = ("in_storage", "in_transit", "delivered", "spoiled")


class ProduceBatch(Base):
    __tablename__ = "produce_batches"

    id = Column(String(36), primary_key=True, default=new_id)
    storage_unit_id = Column(String(36), ForeignKey("storage_units.id"), index=True)

    produce_name = Column(Text, nullable=False)
    produce_type = Column(Enum(*PRODUCE_TYPES, name="produce_type"), nullable=False)
    quantity_kg = Column(Float, nullable=False)
    harvest_date = Column(Date, nullable=False)
    expected_shelf_life_days = Column(Integer, nullable=False)

    farmer_name = Column(Text, nullable=False)
    farmer_contact = Column(Text, nullable=False)

    qr_code = Column(String(64), unique=True, nullable=False)
    status = Column(Enum(*BATCH_STATUSES, name="batch_status"), default="in_storage")

    created_at = Column(DateTime(timezone=True), default=utcnow)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow)

    storage_unit = relationship(StorageUnit)
