"""Tests for the Notices module."""
from datetime import datetime

import pytest

from app.connect import create_app
from app.connect.modules.notices.service import notice_fields_from_payload, validate_notice_payload
from app.connect.registry import build_registry, init_stores
from app.connect.store import sequential_id_factory

NOW = datetime(2024, 2, 1, 12, 0, 0)


def _payload(**overrides):
    data = {
        "title": "जिल्हा बैठक सूचना",
        "content": "सर्व पदाधिकाऱ्यांनी बैठकीस उपस्थित राहावे.",
        "priority": "medium",
        "category": "बैठक",
        "author": "जिल्हा सचिव",
        "attachments": "/docs/agenda.pdf, /docs/agenda.pdf",
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


def test_validate_notice_payload():
    assert validate_notice_payload(_payload()) == []
    errors = validate_notice_payload(_payload(title="Hi", content="short", priority="critical", expiry_date="soon"))
    assert "Title must be at least 5 characters." in errors
    assert "Content must be at least 10 characters." in errors
    assert any(e.startswith("Invalid priority") for e in errors)
    assert "Expiry date must be an ISO date/time." in errors


def test_create_forces_unpinned_and_stamps_time(stores):
    n = stores.notices.create({**notice_fields_from_payload(_payload()), "is_pinned": True, "read_by": ["9"]})
    assert n.id == "notice_1"
    assert n.is_pinned is False
    assert n.read_by == []
    assert n.view_count == 0
    assert n.created_at == NOW
    assert n.attachments == ["/docs/agenda.pdf"]
    assert n.target_audience == "all"


def test_toggle_pin_twice_restores(stores):
    assert stores.notices.toggle_pin("2") is True
    assert stores.notices.read_by_id("2").is_pinned is True
    assert stores.notices.toggle_pin("2") is True
    assert stores.notices.read_by_id("2").is_pinned is False
    assert stores.notices.toggle_pin("missing") is False


def test_mark_read_adds_reader_once(stores):
    assert stores.notices.mark_read("2", "2") is True
    assert stores.notices.mark_read("2", "2") is True
    n = stores.notices.read_by_id("2")
    assert n.read_by == ["1", "2"]
    assert n.view_count == 3
    assert stores.notices.mark_read("missing", "1") is False


def test_update_cannot_touch_reads_or_counter(stores):
    n = stores.notices.update("1", {"read_by": [], "view_count": 0, "created_at": NOW, "priority": "low"})
    assert n.priority == "low"
    assert n.read_by == ["1", "2"]
    assert n.view_count == 2
    assert n.created_at == datetime(2024, 1, 25, 10, 0)


def test_recent_is_pinned_first_then_newest(stores):
    new = stores.notices.create(notice_fields_from_payload(_payload()))
    assert [n.id for n in stores.notices.recent()] == ["1", new.id, "2"]


def test_active_excludes_expired(stores):
    active = stores.notices.active(now=datetime(2024, 2, 20))
    assert [n.id for n in active] == ["2"]


def test_filters(stores):
    assert [n.id for n in stores.notices.filter_by_priority("urgent")] == ["1"]
    assert [n.id for n in stores.notices.filter_by_category("प्रशिक्षण")] == ["2"]


def test_http_crud(client):
    r = client.post("/api/notices", json=_payload())
    assert r.status_code == 201
    notice_id = r.json["id"]

    r = client.put(f"/api/notices/{notice_id}", json={"is_pinned": True, "view_count": 100})
    assert r.status_code == 200
    assert r.json["is_pinned"] is True
    assert r.json["view_count"] == 0

    r = client.get("/api/notices", query_string={"pinned": "1"})
    assert sorted(n["id"] for n in r.json["items"]) == sorted(["1", notice_id])

    r = client.put(f"/api/notices/{notice_id}", json={"priority": "someday"})
    assert r.status_code == 400

    assert client.delete(f"/api/notices/{notice_id}").status_code == 200
    assert client.get(f"/api/notices/{notice_id}").status_code == 404


def test_http_toggle_pin_and_read(client):
    r = client.post("/api/notices/2/toggle-pin")
    assert r.status_code == 200
    assert r.json["is_pinned"] is True

    r = client.post("/api/notices/2/read", json={"reader_id": "7"})
    assert r.status_code == 200
    assert r.json["read_by"] == ["1", "7"]
    assert r.json["view_count"] == 2

    assert client.post("/api/notices/2/read", json={}).status_code == 400
    assert client.post("/api/notices/missing/toggle-pin").status_code == 404
