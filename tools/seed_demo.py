"""
seed_demo.py — Initialize and Seed the AgriLink Database
---------------------------------------------------------

Creates any missing tables and, when the database is empty, loads a small demo
dataset: storage units with a few days of sensor samples, produce batches at
different points of their shelf life, mandi prices, transport requests and alerts.

Run:
    python -m tools.seed_demo

Dependencies:
- SQLAlchemy (through the core helpers)

"""

import logging
import random
from datetime import date, timedelta

from core.alerts import add_alert
from core.market import add_price
from core.produce import add_batch, set_batch_status
from core.schemas import (
    NewMarketPrice,
    NewProduceBatch,
    NewSensorReading,
    NewStorageUnit,
    NewTransportRequest,
)
from core.storage import add_sensor_reading, add_storage_unit
from core.transport import add_request
from db.db import SessionLocal, init_db, utcnow
from db.storage_model import StorageUnit

logger = logging.getLogger(__name__)

UNITS = [
    ("Cold Storage A", "Warehouse 1, Delhi", 1000.0, "active"),
    ("Cold Storage B", "Azadpur, Delhi", 2500.0, "active"),
    ("Reefer Hub Nashik", "MIDC Ambad, Nashik", 1800.0, "maintenance"),
]

# (produce, type, kg, days since harvest, shelf life, farmer, contact)
BATCHES = [
    ("Tomatoes", "vegetables", 500.0, 2, 14, "Rajesh Kumar", "+91 98765 43210"),
    ("Mangoes", "fruits", 320.0, 8, 10, "Sunita Patil", "+91 91234 56780"),
    ("Paneer", "dairy", 80.0, 6, 5, "Harpreet Singh", "+91 99887 76655"),
    ("Basmati Rice", "grains", 1200.0, 30, 365, "Anil Yadav", "+91 90000 11122"),
]

PRICES = [
    ("Tomatoes", 32.0, "Azadpur Mandi", "Delhi"),
    ("Tomatoes", 35.5, "Vashi APMC", "Navi Mumbai"),
    ("Mangoes", 85.0, "Vashi APMC", "Navi Mumbai"),
    ("Mangoes", 78.0, "Azadpur Mandi", "Delhi"),
    ("Onions", 24.0, "Lasalgaon APMC", "Nashik"),
]


def seed_demo(session, today=None, rng=None) -> bool:
    """Insert the demo dataset. Returns False (and writes nothing) if data already exists."""
    if session.query(StorageUnit).first() is not None:
        return False

    today = today or date.today()
    rng = rng or random.Random(42)

    units = [
        add_storage_unit(session, NewStorageUnit(name=n, location=loc, capacity_kg=cap, status=status))
        for n, loc, cap, status in UNITS
    ]

    for unit in units:
        for hours_ago in range(48, -1, -6):
            reading = add_sensor_reading(session, NewSensorReading(
                storage_unit_id=unit.id,
                temperature_celsius=round(rng.uniform(2.5, 7.5), 1),
                humidity_percent=round(rng.uniform(86, 94), 1),
                weight_kg=round(rng.uniform(0.4, 0.9) * unit.capacity_kg, 1),
            ))
            reading.recorded_at = utcnow() - timedelta(hours=hours_ago)

    batches = []
    for i, (name, kind, kg, age, shelf, farmer, contact) in enumerate(BATCHES):
        batches.append(add_batch(session, NewProduceBatch(
            storage_unit_id=units[i % 2].id,
            produce_name=name,
            produce_type=kind,
            quantity_kg=kg,
            harvest_date=today - timedelta(days=age),
            expected_shelf_life_days=shelf,
            farmer_name=farmer,
            farmer_contact=contact,
        )))

    for name, price, market, location in PRICES:
        add_price(session, NewMarketPrice(produce_name=name, price_per_kg=price, market_name=market,
                                          location=location))

    add_request(session, NewTransportRequest(
        batch_id=batches[0].id,
        from_location="Warehouse 1, Delhi",
        to_location="Vashi APMC, Navi Mumbai",
        transport_date=today + timedelta(days=1),
        vehicle_type="Refrigerated Truck",
        driver_name="Amit Singh",
        driver_contact="+91 98111 22233",
    ))
    set_batch_status(session, batches[1].id, "in_transit")

    add_alert(session, "Paneer batch past shelf life",
              f"Batch {batches[2].qr_code} exceeded its expected shelf life.",
              "critical", batch_id=batches[2].id)
    add_alert(session, "Scheduled maintenance",
              "Reefer Hub Nashik compressor service this week.",
              "info", storage_unit_id=units[2].id)
    return True


def main():
    logging.basicConfig(level=logging.INFO)
    init_db()
    with SessionLocal() as session:
        try:
            if seed_demo(session):
                session.commit()
                logger.info("Demo data loaded")
            else:
                logger.info("Database already has data; nothing seeded")
        except Exception:
            session.rollback()
            raise


if __name__ == "__main__":
    main()
