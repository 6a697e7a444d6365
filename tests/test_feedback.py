"""Tests for the Feedback module."""
from datetime import datetime

import pytest

from app.connect import create_app
from app.connect.modules.feedback.service import feedback_fields_from_payload, validate_feedback_payload
from app.connect.registry import build_registry, init_stores
from app.connect.store import sequential_id_factory

NOW = datetime(2024, 2, 1, 12, 0, 0)


def _payload(**overrides):
    data = {
        "member_id": "1",
        "member_name": "राजेश कुमार शर्मा",
        "subject": "Parking at the venue",
        "message": "Please arrange parking for two wheelers near the hall.",
        "category": "suggestion",
        "priority": "low",
        "email": "rajesh.sharma@bjp.org",
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


def test_validate_feedback_payload():
    assert validate_feedback_payload(_payload()) == []
    errors = validate_feedback_payload(_payload(category="rant", email="nope", user_type="guest"))
    assert any(e.startswith("Invalid category") for e in errors)
    assert any(e.startswith("Invalid user type") for e in errors)
    assert "Email address is not valid." in errors


def test_create_forces_pending(stores):
    fb = stores.feedback.create({**feedback_fields_from_payload(_payload()), "status": "resolved"})
    assert fb.status == "pending"
    assert fb.created_at == NOW
    assert fb.response is None


def test_update_status_changes_only_status(stores):
    before = stores.feedback.read_by_id("1")
    assert stores.feedback.update_status("1", "resolved") is True
    after = stores.feedback.read_by_id("1")
    assert after.status == "resolved"
    assert after.subject == before.subject
    assert after.created_at == before.created_at
    assert stores.feedback.update_status("missing", "resolved") is False
    with pytest.raises(ValueError):
        stores.feedback.update_status("1", "closed")


def test_respond_sets_response_date(stores):
    fb = stores.feedback.respond("4", "बैठक पुढील आठवड्यात होईल.", "in_progress")
    assert fb.response == "बैठक पुढील आठवड्यात होईल."
    assert fb.response_date == NOW
    assert fb.status == "in_progress"

    cleared = stores.feedback.respond("4", "   ")
    assert cleared.response is None
    assert cleared.response_date is None
    assert cleared.status == "in_progress"
    assert stores.feedback.respond("missing", "hello") is None


def test_status_counts_and_recent(stores):
    assert stores.feedback.status_counts() == {"pending": 3, "in_progress": 1, "resolved": 1}
    assert [f.id for f in stores.feedback.recent(2)] == ["5", "4"]


def test_search_and_filters(stores):
    assert [f.id for f in stores.feedback.search("लॉगिन")] == ["2"]
    assert [f.id for f in stores.feedback.filter_by_category("complaint")] == ["5"]
    assert len(stores.feedback.filter_by_status("pending")) == 3


def test_http_flow(client):
    r = client.post("/api/feedback", json=_payload())
    assert r.status_code == 201
    fid = r.json["id"]
    assert r.json["status"] == "pending"

    r = client.post(f"/api/feedback/{fid}/status", json={"status": "in_progress"})
    assert r.status_code == 200
    assert r.json["status"] == "in_progress"

    r = client.post(f"/api/feedback/{fid}/status", json={"status": "done"})
    assert r.status_code == 400

    r = client.post(f"/api/feedback/{fid}/respond", json={"response": "Arranged.", "status": "resolved"})
    assert r.status_code == 200
    assert r.json["response"] == "Arranged."
    assert r.json["response_date"] == NOW.isoformat()
    assert r.json["status"] == "resolved"

    r = client.post(f"/api/feedback/{fid}/respond", json={"response": ""})
    assert r.status_code == 400

    r = client.get("/api/feedback", query_string={"status": "resolved"})
    assert sorted(f["id"] for f in r.json["items"]) == sorted(["3", fid])

    r = client.put(f"/api/feedback/{fid}", json={"created_at": "2000-01-01T00:00:00", "priority": "high"})
    assert r.status_code == 200
    assert r.json["priority"] == "high"
    assert r.json["created_at"] == NOW.isoformat()

    assert client.delete(f"/api/feedback/{fid}").status_code == 200
    assert client.post(f"/api/feedback/{fid}/status", json={"status": "resolved"}).status_code == 404
