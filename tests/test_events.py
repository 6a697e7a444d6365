"""Tests for the Events module (CRUD, status, attendees)."""
from datetime import datetime

import pytest

from app.connect import create_app
from app.connect.modules.events.service import event_fields_from_payload, validate_event_payload
from app.connect.registry import build_registry, init_stores
from app.connect.store import sequential_id_factory

NOW = datetime(2024, 2, 1, 12, 0, 0)


def _payload(**overrides):
    data = {
        "title": "बूथ प्रमुख प्रशिक्षण",
        "description": "Booth level training session",
        "event_type": "offline",
        "venue": "Shivajinagar hall",
        "event_date": "2024-03-10T10:00:00",
        "end_date": "2024-03-10T13:00:00",
        "max_attendees": 200,
        "organizer": "संगठन",
        "constituency": "शिवाजीनगर",
        "district": "पुणे",
        "category": "प्रशिक्षण",
    }
    data.update(overrides)
    return data


@pytest.fixture()
def stores():
    return build_registry(clock=lambda: NOW, id_factory=sequential_id_factory())


@pytest.fixture()
def client(tmp_path, monkeypatch):
    monkeypatch.setenv("SECRET_KEY", "test-secret")
    monkeypatch.setenv("DATABASE_URL", f"sqlite:///{tmp_path/'test.db'}")
    monkeypatch.setenv("ENV", "test")

    app = create_app()
    init_stores(app, build_registry(clock=lambda: NOW, id_factory=sequential_id_factory()))
    return app.test_client()


def test_validate_event_payload():
    assert validate_event_payload(_payload()) == []
    errors = validate_event_payload(_payload(event_type="online", max_attendees=0, end_date="2024-03-09T10:00:00"))
    assert "Max attendees must be a positive whole number." in errors
    assert "End date cannot be before the event date." in errors
    assert "Meeting link is required for online and hybrid events." in errors
    assert validate_event_payload(_payload(event_type="party"))[0].startswith("Invalid event type")


def test_validate_update_uses_stored_dates(stores):
    existing = stores.events.read_by_id("1")
    errors = validate_event_payload({"end_date": "2024-02-14T10:00:00"}, existing)
    assert errors == ["End date cannot be before the event date."]
    assert validate_event_payload({"title": "नवीन नाव"}, existing) == []


def test_create_forces_draft_and_empty_attendees(stores):
    e = stores.events.create({**event_fields_from_payload(_payload()), "status": "published", "current_attendees": 7})
    assert e.status == "draft"
    assert e.current_attendees == 0
    assert e.attendees == []
    assert e.event_date == datetime(2024, 3, 10, 10, 0)


def test_offset_dates_are_stored_as_utc(stores):
    payload = _payload(event_date="2024-03-10T10:00:00+05:30", end_date="2024-03-10T05:00:00Z")
    assert validate_event_payload(payload) == []
    e = stores.events.create(event_fields_from_payload(payload))
    assert e.event_date == datetime(2024, 3, 10, 4, 30)
    assert e.end_date == datetime(2024, 3, 10, 5, 0)


def test_update_status(stores):
    assert stores.events.update_status("2", "cancelled") is True
    assert stores.events.read_by_id("2").status == "cancelled"
    assert stores.events.update_status("missing", "completed") is False
    with pytest.raises(ValueError):
        stores.events.update_status("2", "postponed")


def test_upcoming_only_published_future(stores):
    draft = stores.events.create(event_fields_from_payload(_payload()))
    later = stores.events.create(event_fields_from_payload(_payload(event_date="2024-04-01T10:00:00", end_date="")))
    stores.events.update_status(later.id, "published")
    upcoming = stores.events.upcoming(now=NOW)
    assert [e.id for e in upcoming] == ["1", "2", later.id]
    assert draft.id not in [e.id for e in upcoming]
    assert stores.events.upcoming(now=datetime(2024, 2, 16)) == stores.events.upcoming(now=datetime(2024, 2, 16), limit=10)
    assert [e.id for e in stores.events.upcoming(now=NOW, limit=1)] == ["1"]


def test_register_attendee_updates_counter(stores):
    a = stores.events.register_attendee("1", "2", "प्रिया पाटिल", "confirmed")
    assert a.id == "attendee_1"
    assert a.registered_at == NOW
    event = stores.events.read_by_id("1")
    assert event.current_attendees == 3201
    assert [x.member_id for x in event.attendees] == ["1", "2"]

    again = stores.events.register_attendee("1", "2", "प्रिया पाटिल", "attended")
    assert again.id == a.id
    assert stores.events.read_by_id("1").current_attendees == 3201

    assert stores.events.register_attendee("missing", "2") is None


def test_invited_attendee_not_counted_until_confirmed(stores):
    a = stores.events.register_attendee("2", "1", "राजेश कुमार शर्मा")
    assert stores.events.read_by_id("2").current_attendees == 750
    assert stores.events.update_attendee_status("2", a.id, "confirmed") is True
    assert stores.events.read_by_id("2").current_attendees == 751
    assert stores.events.update_attendee_status("2", a.id, "attended") is True
    assert stores.events.read_by_id("2").current_attendees == 751
    assert stores.events.update_attendee_status("2", a.id, "absent") is True
    assert stores.events.read_by_id("2").current_attendees == 750
    assert stores.events.update_attendee_status("2", "nope", "absent") is False


def test_remove_attendee(stores):
    assert stores.events.remove_attendee("1", "1") is True
    event = stores.events.read_by_id("1")
    assert event.attendees == []
    assert event.current_attendees == 3199
    assert stores.events.remove_attendee("1", "1") is False


def test_generic_update_cannot_touch_attendees(stores):
    updated = stores.events.update("1", {"attendees": [], "current_attendees": 0, "venue": "पुणे"})
    assert updated.venue == "पुणे"
    assert updated.current_attendees == 3200
    assert len(updated.attendees) == 1


def test_http_crud_and_status(client):
    r = client.post("/api/events", json=_payload())
    assert r.status_code == 201
    event_id = r.json["id"]
    assert r.json["status"] == "draft"

    r = client.put(f"/api/events/{event_id}", json={"venue": "Deccan Gymkhana"})
    assert r.status_code == 200
    assert r.json["venue"] == "Deccan Gymkhana"

    r = client.post(f"/api/events/{event_id}/status", json={"status": "published"})
    assert r.status_code == 200
    assert r.json["status"] == "published"

    r = client.post(f"/api/events/{event_id}/status", json={"status": "later"})
    assert r.status_code == 400

    r = client.get("/api/events", query_string={"status": "published"})
    assert event_id in [e["id"] for e in r.json["items"]]

    r = client.delete(f"/api/events/{event_id}")
    assert r.status_code == 200
    assert client.delete(f"/api/events/{event_id}").status_code == 404


def test_http_invalid_update(client):
    r = client.put("/api/events/1", json={"max_attendees": -5})
    assert r.status_code == 400
    assert r.json["errors"] == ["Max attendees must be a positive whole number."]


def test_http_attendees(client):
    r = client.post("/api/events/2/attendees", json={"member_id": "1", "status": "confirmed"})
    assert r.status_code == 201
    attendee = r.json
    assert attendee["member_name"] == "राजेश कुमार शर्मा"

    r = client.put(f"/api/events/2/attendees/{attendee['id']}", json={"status": "absent"})
    assert r.status_code == 200
    assert r.json["current_attendees"] == 750

    r = client.delete(f"/api/events/2/attendees/{attendee['id']}")
    assert r.status_code == 200
    assert r.json["attendees"] == []

    r = client.post("/api/events/2/attendees", json={"status": "maybe"})
    assert r.status_code == 400
    assert len(r.json["errors"]) == 2

    r = client.post("/api/events/nope/attendees", json={"member_id": "1"})
    assert r.status_code == 404
