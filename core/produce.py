"""
produce.py — Produce Batch Tracking & Shelf Life
-------------------------------------------------

This module backs the produce tracking view. It registers harvested lots under
a generated traceability code, lists them with their storage unit, and works
out how many shelf-life days each lot has left.

Features:
- Batch code generation: `AGRI-<epoch millis>-<6 random chars>`
- Insert / list / re-status produce batches
- Days remaining = shelf life - days since harvest
- Expiry bucket (fresh / expiring_soon / expired) and badge label
- QR code PNG for the traceability dialog

Dependencies:
- SQLAlchemy ORM session (callers own the transaction)
- qrcode + Pillow for QR rendering

"""

import io
import logging
import secrets
import string
import time
from datetime import date
from typing import Optional

import qrcode
from sqlalchemy.orm import joinedload

from config import settings
from core.schemas import NewProduceBatch
from db.produce_model import BATCH_STATUSES, ProduceBatch

logger = logging.getLogger(__name__)

_CODE_ALPHABET = string.ascii_uppercase + string.digits

FRESH = "fresh"
EXPIRING_SOON = "expiring_soon"
EXPIRED = "expired"


def generate_batch_code(now: Optional[float] = None) -> str:
    millis = int((time.time() if now is None else now) * 1000)
    suffix = "".join(secrets.choice(_CODE_ALPHABET) for _ in range(6))
    return f"{settings.BATCH_CODE_PREFIX}-{millis}-{suffix}"


def list_batches(session, status: Optional[str] = None) -> list[ProduceBatch]:
    query = session.query(ProduceBatch).options(joinedload(ProduceBatch.storage_unit))
    if status:
        query = query.filter(ProduceBatch.status == status)
    return query.order_by(ProduceBatch.created_at.desc()).all()


def add_batch(session, payload: NewProduceBatch) -> ProduceBatch:
    batch = ProduceBatch(
        **payload.model_dump(),
        qr_code=generate_batch_code(),
        status="in_storage",
    )
    session.add(batch)
    session.flush()
    logger.info("Registered batch %s (%s, %s kg)", batch.qr_code, batch.produce_name, batch.quantity_kg)
    return batch


def set_batch_status(session, batch_id: str, status: str) -> Optional[ProduceBatch]:
    if status not in BATCH_STATUSES:
        raise ValueError(f"Unknown batch status: {status}")
    batch = session.get(ProduceBatch, batch_id)
    if batch is None:
        return None
    batch.status = status
    session.flush()
    return batch


def days_remaining(harvest_date: date, shelf_life_days: int, today: Optional[date] = None) -> int:
    """Shelf life minus whole days elapsed since harvest; negative once past expiry."""
    today = today or date.today()
    return shelf_life_days - (today - harvest_date).days


def expiry_status(days: int) -> str:
    if days <= 0:
        return EXPIRED
    if days <= settings.EXPIRING_SOON_DAYS:
        return EXPIRING_SOON
    return FRESH


def expiry_label(days: int) -> str:
    status = expiry_status(days)
    if status == EXPIRED:
        return "⚠️ Expired"
    if status == EXPIRING_SOON:
        return f"⚠️ {days} days remaining"
    return f"✓ {days} days remaining"


def batch_qr_png(code: str, box_size: int = 8) -> bytes:
    qr = qrcode.QRCode(box_size=box_size, border=2)
    qr.add_data(code)
    qr.make(fit=True)
    img = qr.make_image()
    buf = io.BytesIO()
    img.save(buf, format="PNG")
    return buf.getvalue()
