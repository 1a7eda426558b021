from datetime import date

import pytest

from core.produce import set_batch_status
from core.schemas import NewTransportRequest
from core.transport import add_request, list_requests, set_request_status, transportable_batches


def _request(batch_id, **overrides):
    values = dict(
        batch_id=batch_id,
        from_location="Warehouse Delhi",
        to_location="Market Mumbai",
        transport_date=date(2024, 6, 1),
    )
    values.update(overrides)
    return NewTransportRequest(**values)


def test_add_request_is_pending_and_linked(db_session, batch):
    add_request(db_session, _request(batch.id, vehicle_type="Refrigerated Truck"))
    db_session.commit()

    requests = list_requests(db_session)
    assert len(requests) == 1
    assert requests[0].status == "pending"
    assert requests[0].batch.produce_name == "Tomatoes"
    assert requests[0].vehicle_type == "Refrigerated Truck"


def test_blank_optional_fields_are_stored_as_null(db_session, batch):
    req = add_request(db_session, _request(batch.id, vehicle_type="", driver_name="  ", driver_contact=None))
    db_session.commit()

    assert req.vehicle_type is None
    assert req.driver_name is None


def test_transportable_batches_only_in_storage(db_session, batch):
    assert [b.id for b in transportable_batches(db_session)] == [batch.id]

    set_batch_status(db_session, batch.id, "in_transit")
    db_session.commit()
    assert transportable_batches(db_session) == []


def test_set_request_status(db_session, batch):
    req = add_request(db_session, _request(batch.id))
    db_session.commit()

    set_request_status(db_session, req.id, "confirmed")
    db_session.commit()
    assert list_requests(db_session)[0].status == "confirmed"

    with pytest.raises(ValueError):
        set_request_status(db_session, req.id, "teleported")


def test_request_requires_route():
    with pytest.raises(ValueError):
        NewTransportRequest(batch_id="b", from_location="  ", to_location="Mumbai", transport_date=date(2024, 6, 1))
