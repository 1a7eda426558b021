"""
ui_tools.py — Shared Streamlit UI Utilities
---------------------------------------------

Provides reusable pieces for the dashboard views, including:

* `run_mutation` — the one write path every form goes through: open a session,
  apply the change, commit, toast the outcome
* Badge colours for storage, batch, transport and alert states
* A read-only notice for demo deployments
* UTC timestamp formatting
* Safe page-level error rendering

Dependencies:
- Streamlit
- SQLAlchemy, pydantic (error types)

"""

import logging
from datetime import datetime, timezone
from typing import Callable, Optional, TypeVar

import streamlit as st
from pydantic import ValidationError
from sqlalchemy.exc import SQLAlchemyError

from config.settings import READ_ONLY
from core.exception import log_exception
from db.db import SessionLocal

T = TypeVar("T")

_PENDING_TOAST = "pending_toast"

STATUS_COLORS = {
    # storage units
    "active": "green",
    "maintenance": "orange",
    "inactive": "gray",
    # produce batches
    "in_storage": "green",
    "in_transit": "blue",
    "delivered": "violet",
    "spoiled": "red",
    # transport requests
    "pending": "orange",
    "confirmed": "blue",
    "in_progress": "violet",
    "completed": "green",
    "cancelled": "red",
    # alerts
    "info": "blue",
    "warning": "orange",
    "critical": "red",
}

PRODUCE_TYPE_COLORS = {
    "vegetables": "green",
    "fruits": "orange",
    "grains": "violet",
    "dairy": "blue",
}

SEVERITY_ICONS = {"critical": "🛑", "warning": "⚠️", "info": "ℹ️"}


def show_pending_toast():
    """Replay a success toast queued before an `st.rerun()`."""
    message = st.session_state.pop(_PENDING_TOAST, None)
    if message:
        st.toast(message, icon="✅")


def run_mutation(action: Callable[..., T], success: str, failure: str, rerun: bool = False) -> Optional[T]:
    """
    Run `action(session)` in its own transaction.

    On success the session is committed and a success toast is shown. Database
    errors and invalid form input roll back, get logged, and surface as an error
    toast; nothing is written and None is returned.

    Widgets rendered below already-fetched rows pass `rerun=True` so the page
    refetches; the toast is then shown on the next run.
    """
    with SessionLocal() as session:
        try:
            result = action(session)
            session.commit()
        except (SQLAlchemyError, ValidationError, ValueError) as e:
            session.rollback()
            detail = log_exception(e, context=failure)
            st.toast(f"{failure}: {detail}", icon="❌")
            return None

    logging.info(success)
    if rerun:
        st.session_state[_PENDING_TOAST] = success
        st.rerun()
    st.toast(success, icon="✅")
    return result


def format_timestamp(ts: datetime, fmt: str = "%Y-%m-%d %H:%M") -> str:
    """Render a stored timestamp in UTC. SQLite hands back naive values, which are already UTC."""
    if ts.tzinfo is None:
        ts = ts.replace(tzinfo=timezone.utc)
    return f"{ts.astimezone(timezone.utc):{fmt}} UTC"


def status_badge(status: Optional[str]):
    label = (status or "unknown").replace("_", " ")
    st.badge(label, color=STATUS_COLORS.get(status, "gray"))


def produce_type_badge(produce_type: str):
    st.badge(produce_type, color=PRODUCE_TYPE_COLORS.get(produce_type, "gray"))


def read_only_notice() -> bool:
    """Show the demo notice and return True when writes are disabled."""
    if READ_ONLY:
        st.caption("🔒 Not available in the demo.")
    return READ_ONLY


def show_page_error(e: Exception):
    st.error(log_exception(e))
    st.stop()
