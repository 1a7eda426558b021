"""
transport.py — Transport Request Queries
-----------------------------------------

Dependencies:
- SQLAlchemy ORM session (callers own the transaction)

"""

import logging
from typing import Optional

from sqlalchemy.orm import joinedload

from core.produce import list_batches
from core.schemas import NewTransportRequest
from db.produce_model import ProduceBatch
from db.transport_model import TRANSPORT_STATUSES, TransportRequest

logger = logging.getLogger(__name__)


def list_requests(session) -> list[TransportRequest]:
    return (
        session.query(TransportRequest)
        .options(joinedload(TransportRequest.batch))
        .order_by(TransportRequest.created_at.desc())
        .all()
    )


def transportable_batches(session) -> list[ProduceBatch]:
    """Only batches still sitting in storage can be booked for transport."""
    return list_batches(session, status="in_storage")


def add_request(session, payload: NewTransportRequest) -> TransportRequest:
    request = TransportRequest(**payload.model_dump(), status="pending")
    session.add(request)
    session.flush()
    logger.info("Transport requested %s -> %s on %s", request.from_location, request.to_location,
                request.transport_date)
    return request


def set_request_status(session, request_id: str, status: str) -> Optional[TransportRequest]:
    if status not in TRANSPORT_STATUSES:
        raise ValueError(f"Unknown transport status: {status}")
    request = session.get(TransportRequest, request_id)
    if request is None:
        return None
    request.status = status
    session.flush()
    return request
