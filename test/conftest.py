"""Shared fixtures: every test runs against a fresh SQLite file database."""

import os
import tempfile
from pathlib import Path

# Must be set before config.settings / db.db are imported anywhere
_DB_DIR = Path(tempfile.mkdtemp(prefix="agrilink-test-"))
os.environ["DATABASE_URL"] = f"sqlite:///{_DB_DIR / 'agrilink-test.db'}"
os.environ["APP_MODE"] = "live"

import pytest

from db.db import Base, SessionLocal, engine, init_db

PROJECT_ROOT = Path(__file__).resolve().parent.parent


@pytest.fixture(autouse=True)
def fresh_db():
    init_db()
    yield
    Base.metadata.drop_all(engine)


@pytest.fixture
def db_session():
    with SessionLocal() as session:
        yield session
        session.rollback()


@pytest.fixture
def toasts(monkeypatch: pytest.MonkeyPatch):
    """Capture st.toast calls made through tools.ui_tools."""
    from tools import ui_tools

    calls = []
    monkeypatch.setattr(ui_tools.st, "toast", lambda body, icon=None: calls.append((body, icon)))
    return calls


@pytest.fixture
def storage_unit(db_session):
    from core.schemas import NewStorageUnit
    from core.storage import add_storage_unit

    unit = add_storage_unit(db_session, NewStorageUnit(name="Cold Storage A", location="Warehouse 1, Delhi",
                                                       capacity_kg=1000))
    db_session.commit()
    return unit


@pytest.fixture
def batch(db_session, storage_unit):
    from datetime import date, timedelta

    from core.produce import add_batch
    from core.schemas import NewProduceBatch

    created = add_batch(db_session, NewProduceBatch(
        storage_unit_id=storage_unit.id,
        produce_name="Tomatoes",
        produce_type="vegetables",
        quantity_kg=500,
        harvest_date=date.today() - timedelta(days=2),
        expected_shelf_life_days=14,
        farmer_name="Rajesh Kumar",
        farmer_contact="+91 98765 43210",
    ))
    db_session.commit()
    return created
