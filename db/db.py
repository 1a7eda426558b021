"""
db.py — Database Engine & Session Setup
----------------------------------------

This module initializes the SQLAlchemy database connection and provides
session management for the AgriLink dashboard.

Features:
- Creates database engine using DATABASE_URL from project settings
- Defines `SessionLocal` for transaction management
- Provides `init_db()` to create tables based on ORM models

Intended for:
- Centralized database connection setup
- Reusable session handling across all views

Dependencies:
- SQLAlchemy for ORM and engine management
- Project settings for environment-based configuration

"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker

from config.settings import DATABASE_URL


# --- ORM Base Class ---
Base = declarative_base()

# --- Database Engine ---
# Streamlit reruns scripts on worker threads, so SQLite connections must be shareable.
if DATABASE_URL.startswith("sqlite"):
    engine = create_engine(DATABASE_URL, connect_args={"check_same_thread": False})
else:
    engine = create_engine(DATABASE_URL, pool_pre_ping=True)


# --- Session Factory ---
SessionLocal = sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)


def new_id() -> str:
    """Primary keys are UUID strings generated client-side."""
    return str(uuid.uuid4())


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def init_db():
    """
    Initializes the database by creating all tables defined in ORM models.
    Safe to run multiple times; only creates tables if they don't exist.
    """
    # Register every model on Base.metadata before create_all
    from db import storage_model, produce_model, market_model, transport_model, alert_model  # noqa: F401

    Base.metadata.create_all(engine)
