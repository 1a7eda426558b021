"""
storage.py — Cold Storage Queries & Sensor Status
--------------------------------------------------

Query and insert helpers behind the cold-storage monitoring view, plus the
threshold checks used to colour the latest temperature and humidity sample.

Features:
- List storage units (newest first), optionally filtered by status
- Latest reading per unit and a short reading history for charts
- Insert storage units and sensor readings
- Raise a warning alert when a reading lands outside the cold-chain window

Dependencies:
- SQLAlchemy ORM session (callers own the transaction)
- config.settings thresholds

"""

import logging
from typing import Iterable, Optional

from config import settings
from core.alerts import add_alert
from core.schemas import NewSensorReading, NewStorageUnit
from db.storage_model import SensorReading, StorageUnit

logger = logging.getLogger(__name__)

OPTIMAL = "Optimal"


def list_storage_units(session, status: Optional[str] = None) -> list[StorageUnit]:
    query = session.query(StorageUnit)
    if status:
        query = query.filter(StorageUnit.status == status)
    return query.order_by(StorageUnit.created_at.desc()).all()


def latest_reading(session, unit_id: str) -> Optional[SensorReading]:
    return (
        session.query(SensorReading)
        .filter(SensorReading.storage_unit_id == unit_id)
        .order_by(SensorReading.recorded_at.desc())
        .first()
    )


def latest_readings(session, unit_ids: Iterable[str]) -> dict[str, SensorReading]:
    """Map unit id -> most recent reading; units without data are left out."""
    readings = {}
    for unit_id in unit_ids:
        reading = latest_reading(session, unit_id)
        if reading is not None:
            readings[unit_id] = reading
    return readings


def reading_history(session, unit_id: str, limit: int = settings.HISTORY_LIMIT) -> list[SensorReading]:
    """Most recent `limit` readings, returned oldest first for plotting."""
    rows = (
        session.query(SensorReading)
        .filter(SensorReading.storage_unit_id == unit_id)
        .order_by(SensorReading.recorded_at.desc())
        .limit(limit)
        .all()
    )
    return list(reversed(rows))


def add_storage_unit(session, payload: NewStorageUnit) -> StorageUnit:
    unit = StorageUnit(**payload.model_dump())
    session.add(unit)
    session.flush()
    logger.info("Added storage unit %s (%s)", unit.name, unit.id)
    return unit


def add_sensor_reading(session, payload: NewSensorReading) -> SensorReading:
    """
    Insert a reading. Out-of-range temperature or humidity also records a
    warning alert against the unit in the same transaction.
    """
    reading = SensorReading(**payload.model_dump())
    session.add(reading)
    session.flush()

    problems = []
    temp_status = temperature_status(reading.temperature_celsius)
    if temp_status != OPTIMAL:
        problems.append(f"temperature {reading.temperature_celsius}°C ({temp_status.lower()})")
    humidity_label = humidity_status(reading.humidity_percent)
    if humidity_label != OPTIMAL:
        problems.append(f"humidity {reading.humidity_percent}% ({humidity_label.lower()})")

    if problems:
        unit = session.get(StorageUnit, reading.storage_unit_id)
        unit_name = unit.name if unit else reading.storage_unit_id
        add_alert(
            session,
            title=f"{unit_name}: reading out of range",
            message="Latest sample reported " + " and ".join(problems) + ".",
            severity="warning",
            storage_unit_id=reading.storage_unit_id,
        )
    return reading


def temperature_status(temp: float) -> str:
    if temp < settings.COLD_MIN_C:
        return "Too Cold"
    if temp > settings.COLD_MAX_C:
        return "Too Warm"
    return OPTIMAL


def humidity_status(humidity: float) -> str:
    if humidity < settings.HUMIDITY_MIN_PCT:
        return "Low"
    if humidity > settings.HUMIDITY_MAX_PCT:
        return "High"
    return OPTIMAL
