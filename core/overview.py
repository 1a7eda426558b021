"""
overview.py — Dashboard Headline Numbers
-----------------------------------------

Counts shown on the overview cards, computed from the live tables.
"""

from dataclasses import dataclass, field
from datetime import date
from typing import Optional

from sqlalchemy import func

from core.produce import EXPIRED, EXPIRING_SOON, days_remaining, expiry_status
from db.alert_model import ALERT_SEVERITIES, Alert
from db.produce_model import ProduceBatch
from db.storage_model import StorageUnit


@dataclass
class OverviewStats:
    active_storage_units: int = 0
    total_storage_units: int = 0
    total_batches: int = 0
    batches_in_storage: int = 0
    batches_in_transit: int = 0
    batches_expiring_soon: int = 0
    batches_expired: int = 0
    unread_alerts: int = 0
    alerts_by_severity: dict = field(default_factory=dict)


def overview_stats(session, today: Optional[date] = None) -> OverviewStats:
    stats = OverviewStats()

    unit_counts = dict(
        session.query(StorageUnit.status, func.count(StorageUnit.id)).group_by(StorageUnit.status).all()
    )
    stats.total_storage_units = sum(unit_counts.values())
    stats.active_storage_units = unit_counts.get("active", 0)

    batch_counts = dict(
        session.query(ProduceBatch.status, func.count(ProduceBatch.id)).group_by(ProduceBatch.status).all()
    )
    stats.total_batches = sum(batch_counts.values())
    stats.batches_in_storage = batch_counts.get("in_storage", 0)
    stats.batches_in_transit = batch_counts.get("in_transit", 0)

    # Expiry only matters for stock still held or on the road
    live = (
        session.query(ProduceBatch.harvest_date, ProduceBatch.expected_shelf_life_days)
        .filter(ProduceBatch.status.in_(("in_storage", "in_transit")))
        .all()
    )
    for harvest_date, shelf_life in live:
        status = expiry_status(days_remaining(harvest_date, shelf_life, today))
        if status == EXPIRING_SOON:
            stats.batches_expiring_soon += 1
        elif status == EXPIRED:
            stats.batches_expired += 1

    severity_counts = dict(
        session.query(Alert.severity, func.count(Alert.id))
        .filter(Alert.is_read.is_(False))
        .group_by(Alert.severity)
        .all()
    )
    stats.alerts_by_severity = {s: severity_counts.get(s, 0) for s in ALERT_SEVERITIES}
    stats.unread_alerts = sum(stats.alerts_by_severity.values())
    return stats
