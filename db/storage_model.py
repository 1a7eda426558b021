"""
storage_model.py — Cold Storage ORM Models
-------------------------------------------

This module defines the SQLAlchemy ORM models for cold-storage units and the
IoT sensor samples recorded against them.

Tables:
- `storage_units`: Physical cold-storage locations with capacity and status
- `sensor_readings`: Timestamped temperature / humidity / weight samples

Dependencies:
- SQLAlchemy ORM

"""

from sqlalchemy import Column, DateTime, Enum, Float, ForeignKey, String, Text
from sqlalchemy.orm import relationship

from db.db import Base, new_id, utcnow

STORAGE_STATUSES = ("active", "inactive", "maintenance")


class StorageUnit(Base):
    """
    Table: storage_units

    Fields:
    - name, location: Display name and physical address
    - capacity_kg: Rated capacity
    - current_load_kg: Optional load as reported by the site
    - status: active / inactive / maintenance
    """
    __tablename__ = "storage_units"

    id = Column(String(36), primary_key=True, default=new_id)
    name = Column(Text, nullable=False)
    location = Column(Text, nullable=False)
    capacity_kg = Column(Float, nullable=False)
    current_load_kg = Column(Float)
    status = Column(Enum(*STORAGE_STATUSES, name="storage_status"), default="active")

    created_at = Column(DateTime(timezone=True), default=utcnow)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow)

    readings = relationship("SensorReading", back_populates="storage_unit", cascade="all, delete-orphan")


class SensorReading(Base):
    __tablename__ = "sensor_readings"

    id = Column(String(36), primary_key=True, default=new_id)
    storage_unit_id = Column(String(36), ForeignKey("storage_units.id"), nullable=False, index=True)
    temperature_celsius = Column(Float, nullable=False)
    humidity_percent = Column(Float, nullable=False)
    weight_kg = Column(Float)
    recorded_at = Column(DateTime(timezone=True), default=utcnow, index=True)

    storage_unit = relationship("StorageUnit", back_populates="readings")
