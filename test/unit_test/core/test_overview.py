from datetime import date, timedelta

from core.alerts import add_alert
from core.overview import overview_stats
from core.produce import add_batch, set_batch_status
from core.schemas import NewProduceBatch, NewStorageUnit
from core.storage import add_storage_unit

TODAY = date(2024, 6, 10)


def _batch(session, unit_id, age, shelf):
    return add_batch(session, NewProduceBatch(
        storage_unit_id=unit_id,
        produce_name="Lot",
        produce_type="other",
        quantity_kg=10,
        harvest_date=TODAY - timedelta(days=age),
        expected_shelf_life_days=shelf,
        farmer_name="F",
        farmer_contact="C",
    ))


def test_empty_database(db_session):
    stats = overview_stats(db_session, today=TODAY)
    assert stats.total_batches == 0
    assert stats.unread_alerts == 0
    assert stats.alerts_by_severity == {"info": 0, "warning": 0, "critical": 0}


def test_counts(db_session):
    active = add_storage_unit(db_session, NewStorageUnit(name="A", location="X", capacity_kg=100))
    add_storage_unit(db_session, NewStorageUnit(name="B", location="Y", capacity_kg=100, status="maintenance"))

    _batch(db_session, active.id, age=1, shelf=30)                # fresh
    soon = _batch(db_session, active.id, age=8, shelf=10)         # 2 days left
    _batch(db_session, active.id, age=6, shelf=5)                 # expired
    delivered = _batch(db_session, active.id, age=60, shelf=5)    # expired but delivered
    set_batch_status(db_session, soon.id, "in_transit")
    set_batch_status(db_session, delivered.id, "delivered")

    add_alert(db_session, "a", "m", "warning")
    add_alert(db_session, "b", "m", "warning")
    read = add_alert(db_session, "c", "m", "critical")
    read.is_read = True
    db_session.commit()

    stats = overview_stats(db_session, today=TODAY)
    assert stats.active_storage_units == 1
    assert stats.total_storage_units == 2
    assert stats.total_batches == 4
    assert stats.batches_in_storage == 2
    assert stats.batches_in_transit == 1
    assert stats.batches_expiring_soon == 1
    assert stats.batches_expired == 1
    assert stats.unread_alerts == 2
    assert stats.alerts_by_severity["warning"] == 2
    assert stats.alerts_by_severity["critical"] == 0
