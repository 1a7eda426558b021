from datetime import timedelta

import pytest

from core.alerts import add_alert, list_alerts, mark_alert_read


def test_list_alerts_unread_newest_first_with_limit(db_session):
    first = add_alert(db_session, "First", "m", "info")
    second = add_alert(db_session, "Second", "m", "warning")
    third = add_alert(db_session, "Third", "m", "critical")
    second.created_at = first.created_at + timedelta(seconds=1)
    third.created_at = first.created_at + timedelta(seconds=2)
    db_session.commit()

    assert [a.title for a in list_alerts(db_session)] == ["Third", "Second", "First"]
    assert [a.title for a in list_alerts(db_session, limit=2)] == ["Third", "Second"]


def test_mark_alert_read_hides_it(db_session):
    alert = add_alert(db_session, "Door open", "Cold room door left open", "critical")
    db_session.commit()

    mark_alert_read(db_session, alert.id)
    db_session.commit()

    assert list_alerts(db_session) == []
    assert [a.title for a in list_alerts(db_session, unread_only=False)] == ["Door open"]


def test_mark_alert_read_missing(db_session):
    assert mark_alert_read(db_session, "nope") is None


def test_add_alert_rejects_unknown_severity(db_session):
    with pytest.raises(ValueError):
        add_alert(db_session, "x", "y", "urgent")


def test_alert_links_to_batch(db_session, batch):
    alert = add_alert(db_session, "Expiring", "Use soon", "warning", batch_id=batch.id)
    db_session.commit()

    assert list_alerts(db_session)[0].batch_id == batch.id
    assert alert.batch.produce_name == "Tomatoes"
