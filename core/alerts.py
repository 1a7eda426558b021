"""
alerts.py — Alert Queries
--------------------------

Read, create and acknowledge severity-tagged alerts.

Dependencies:
- SQLAlchemy ORM session (callers own the transaction)

"""

import logging
from typing import Optional

from db.alert_model import ALERT_SEVERITIES, Alert

logger = logging.getLogger(__name__)


def list_alerts(session, unread_only: bool = True, limit: Optional[int] = None) -> list[Alert]:
    query = session.query(Alert)
    if unread_only:
        query = query.filter(Alert.is_read.is_(False))
    query = query.order_by(Alert.created_at.desc())
    if limit:
        query = query.limit(limit)
    return query.all()


def add_alert(session, title: str, message: str, severity: str,
              batch_id: Optional[str] = None, storage_unit_id: Optional[str] = None) -> Alert:
    if severity not in ALERT_SEVERITIES:
        raise ValueError(f"Unknown alert severity: {severity}")
    alert = Alert(
        title=title,
        message=message,
        severity=severity,
        batch_id=batch_id,
        storage_unit_id=storage_unit_id,
        is_read=False,
    )
    session.add(alert)
    session.flush()
    logger.info("Raised %s alert: %s", severity, title)
    return alert


def mark_alert_read(session, alert_id: str) -> Optional[Alert]:
    alert = session.get(Alert, alert_id)
    if alert is None:
        return None
    alert.is_read = True
    session.flush()
    return alert
