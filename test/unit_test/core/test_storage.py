from datetime import timedelta

import pytest

from core import storage
from core.alerts import list_alerts
from core.schemas import NewSensorReading, NewStorageUnit
from core.storage import (
    add_sensor_reading,
    add_storage_unit,
    humidity_status,
    latest_reading,
    latest_readings,
    list_storage_units,
    reading_history,
    temperature_status,
)


def _reading(unit_id, temp=4.5, humidity=90.0, weight=850.0):
    return NewSensorReading(storage_unit_id=unit_id, temperature_celsius=temp, humidity_percent=humidity,
                            weight_kg=weight)


@pytest.mark.parametrize(
    "temp, label",
    [(1.9, "Too Cold"), (2.0, "Optimal"), (5.0, "Optimal"), (8.0, "Optimal"), (8.1, "Too Warm")],
)
def test_temperature_status(temp, label):
    assert temperature_status(temp) == label


@pytest.mark.parametrize(
    "humidity, label",
    [(84.9, "Low"), (85, "Optimal"), (95, "Optimal"), (95.5, "High")],
)
def test_humidity_status(humidity, label):
    assert humidity_status(humidity) == label


def test_thresholds_come_from_settings(monkeypatch):
    monkeypatch.setattr(storage.settings, "COLD_MAX_C", 4.0)
    assert temperature_status(5.0) == "Too Warm"


def test_add_storage_unit_defaults_to_active(db_session):
    unit = add_storage_unit(db_session, NewStorageUnit(name="Cold Storage B", location="Azadpur", capacity_kg=2500))
    db_session.commit()

    assert unit.id
    assert unit.status == "active"
    assert [u.name for u in list_storage_units(db_session)] == ["Cold Storage B"]


def test_list_storage_units_newest_first_and_filtered(db_session):
    first = add_storage_unit(db_session, NewStorageUnit(name="Old", location="A", capacity_kg=10))
    second = add_storage_unit(db_session, NewStorageUnit(name="New", location="B", capacity_kg=10,
                                                         status="maintenance"))
    second.created_at = first.created_at + timedelta(seconds=1)
    db_session.commit()

    assert [u.name for u in list_storage_units(db_session)] == ["New", "Old"]
    assert [u.name for u in list_storage_units(db_session, status="active")] == ["Old"]


def test_latest_reading_and_history(db_session, storage_unit):
    older = add_sensor_reading(db_session, _reading(storage_unit.id, temp=3.0))
    newer = add_sensor_reading(db_session, _reading(storage_unit.id, temp=5.0))
    older.recorded_at = newer.recorded_at - timedelta(hours=1)
    db_session.commit()

    assert latest_reading(db_session, storage_unit.id).temperature_celsius == 5.0
    assert [r.temperature_celsius for r in reading_history(db_session, storage_unit.id)] == [3.0, 5.0]
    assert [r.temperature_celsius for r in reading_history(db_session, storage_unit.id, limit=1)] == [5.0]


def test_latest_readings_skips_units_without_data(db_session, storage_unit):
    other = add_storage_unit(db_session, NewStorageUnit(name="Empty", location="B", capacity_kg=10))
    add_sensor_reading(db_session, _reading(storage_unit.id))
    db_session.commit()

    readings = latest_readings(db_session, [storage_unit.id, other.id])
    assert set(readings) == {storage_unit.id}


def test_in_range_reading_raises_no_alert(db_session, storage_unit):
    add_sensor_reading(db_session, _reading(storage_unit.id, temp=4.5, humidity=90))
    db_session.commit()

    assert list_alerts(db_session) == []


def test_out_of_range_reading_raises_warning(db_session, storage_unit):
    add_sensor_reading(db_session, _reading(storage_unit.id, temp=11.2, humidity=70))
    db_session.commit()

    alerts = list_alerts(db_session)
    assert len(alerts) == 1
    assert alerts[0].severity == "warning"
    assert alerts[0].storage_unit_id == storage_unit.id
    assert "Cold Storage A" in alerts[0].title
    assert "too warm" in alerts[0].message and "low" in alerts[0].message


def test_sensor_reading_rejects_humidity_above_100():
    with pytest.raises(ValueError):
        NewSensorReading(storage_unit_id="u1", temperature_celsius=4, humidity_percent=120)
