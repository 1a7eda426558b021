"""
alert_model.py — Alert ORM Model
---------------------------------

Table:
- `alerts`: severity-tagged notifications, optionally linked to a produce batch
  or a storage unit

Dependencies:
- SQLAlchemy ORM

"""

from sqlalchemy import Boolean, Column, DateTime, Enum, ForeignKey, String, Text
from sqlalchemy.orm import relationship

from db.db import Base, new_id, utcnow
from db.produce_model import ProduceBatch
from db.storage_model import StorageUnit

ALERT_SEVERITIES = ("info", "warning", "critical")


class Alert(Base):
    __tablename__ = "alerts"

    id = Column(String(36), primary_key=True, default=new_id)
    batch_id = Column(String(36), ForeignKey("produce_batches.id"))
    storage_unit_id = Column(String(36), ForeignKey("storage_units.id"))

    title = Column(Text, nullable=False)
    message = Column(Text, nullable=False)
    severity = Column(Enum(*ALERT_SEVERITIES, name="alert_severity"), nullable=False)
    is_read = Column(Boolean, default=False)
    created_at = Column(DateTime(timezone=True), default=utcnow, index=True)

    batch = relationship(ProduceBatch)
    storage_unit = relationship(StorageUnit)
