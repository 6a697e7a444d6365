"""Tests for the generic entity store behaviour (ids, copies, protected fields, search)."""
import threading
from datetime import date, datetime

import pytest

from app.connect.registry import build_registry
from app.connect.store import DuplicateIdError, sequential_id_factory

NOW = datetime(2024, 2, 1, 12, 0, 0)


@pytest.fixture()
def stores():
    return build_registry(clock=lambda: NOW, id_factory=sequential_id_factory(), seed=False)


def _member(**overrides):
    data = {
        "full_name": "Asha Kulkarni",
        "phone": "+91 9000000001",
        "constituency": "Kothrud",
        "district": "Pune",
        "division": "Pune",
        "designation": "Ward President",
    }
    data.update(overrides)
    return data


def _report(**overrides):
    data = {
        "title": "Monthly activity",
        "description": "Ward level activity summary",
        "category": "monthly",
        "type": "pdf",
        "author": "Organisation cell",
        "department": "Organisation",
        "file_name": "activity.pdf",
        "tags": ["activity", "monthly"],
    }
    data.update(overrides)
    return data


def test_create_assigns_id_and_defaults(stores):
    m = stores.members.create(_member(is_verified=True))
    assert m.id == "member_1"
    assert m.is_verified is False
    assert m.membership_date == date(2024, 2, 1)
    assert stores.members.count() == 1


def test_create_ignores_caller_identity_and_counters(stores):
    r = stores.reports.create(_report(id="mine", download_count=99, created_at=datetime(2000, 1, 1)))
    assert r.id == "report_1"
    assert r.download_count == 0
    assert r.created_at == NOW


def test_create_unknown_field_is_programming_error(stores):
    with pytest.raises(TypeError):
        stores.members.create(_member(favourite_colour="saffron"))


def test_ids_unique_across_creates(stores):
    ids = {stores.members.create(_member()).id for _ in range(5)}
    assert len(ids) == 5


def test_duplicate_id_from_factory_raises():
    stores = build_registry(clock=lambda: NOW, id_factory=lambda prefix: "same", seed=False)
    stores.members.create(_member())
    with pytest.raises(DuplicateIdError):
        stores.members.create(_member())


def test_deleted_id_is_not_reused():
    stores = build_registry(clock=lambda: NOW, id_factory=lambda prefix: "same", seed=False)
    stores.members.create(_member())
    assert stores.members.delete("same") is True
    with pytest.raises(DuplicateIdError):
        stores.members.create(_member())


def test_reads_return_copies(stores):
    m = stores.members.create(_member())
    m.full_name = "Changed"
    m.contact_info.email = "x@example.com"
    got = stores.members.read_all()
    got[0].full_name = "Changed again"
    fresh = stores.members.read_by_id(m.id)
    assert fresh.full_name == "Asha Kulkarni"
    assert fresh.contact_info.email == ""


def test_create_copies_input(stores):
    tags = ["a"]
    r = stores.reports.create(_report(tags=tags))
    tags.append("b")
    assert stores.reports.read_by_id(r.id).tags == ["a"]


def test_update_merges_and_keeps_protected_fields(stores):
    r = stores.reports.create(_report())
    updated = stores.reports.update(
        r.id,
        {"title": "Renamed", "id": "other", "created_at": datetime(1999, 1, 1), "download_count": 50},
    )
    assert updated.title == "Renamed"
    assert updated.id == r.id
    assert updated.created_at == NOW
    assert updated.download_count == 0
    assert updated.department == "Organisation"


def test_update_missing_returns_none(stores):
    assert stores.reports.update("nope", {"title": "x"}) is None


def test_update_unknown_field_raises(stores):
    r = stores.reports.create(_report())
    with pytest.raises(TypeError):
        stores.reports.update(r.id, {"colour": "blue"})


def test_delete_removes_exactly_one(stores):
    a = stores.members.create(_member(full_name="First"))
    b = stores.members.create(_member(full_name="Second"))
    c = stores.members.create(_member(full_name="Third"))
    assert stores.members.delete(b.id) is True
    assert [m.id for m in stores.members.read_all()] == [a.id, c.id]
    assert stores.members.delete(b.id) is False
    assert stores.members.read_by_id(b.id) is None


def test_search_is_case_insensitive_and_ordered(stores):
    stores.members.create(_member(full_name="Ravi Patil", district="Nashik"))
    stores.members.create(_member(full_name="Meera Joshi", district="Pune"))
    stores.members.create(_member(full_name="Kiran PATIL", district="Satara"))
    assert [m.full_name for m in stores.members.search("patil")] == ["Ravi Patil", "Kiran PATIL"]
    assert len(stores.members.search("")) == 3
    assert stores.members.search("nobody") == []


def test_search_matches_tag_elements(stores):
    stores.reports.create(_report(tags=["Budget", "quarterly"]))
    stores.reports.create(_report(tags=["events"]))
    assert len(stores.reports.search("budg")) == 1


def test_filter_by_exact_value(stores):
    stores.reports.create(_report(department="Finance"))
    stores.reports.create(_report(department="Media"))
    assert len(stores.reports.filter_by_department("Finance")) == 1
    assert stores.reports.filter_by_department("finance") == []
    assert stores.reports.filter_by_category("unknown") == []


def test_query_treats_all_and_empty_as_no_filter(stores):
    stores.reports.create(_report(category="monthly", title="Alpha"))
    stores.reports.create(_report(category="annual", title="Beta"))
    assert len(stores.reports.query(None, category="all")) == 2
    assert len(stores.reports.query("", category="")) == 2
    assert [r.title for r in stores.reports.query("beta", category="annual")] == ["Beta"]
    assert stores.reports.query("alpha", category="annual") == []


def test_increment_download_count(stores):
    r = stores.reports.create(_report())
    assert stores.reports.increment_download_count(r.id) is True
    assert stores.reports.increment_download_count(r.id) is True
    assert stores.reports.read_by_id(r.id).download_count == 2
    assert stores.reports.increment_download_count("missing") is False


def test_concurrent_increments_are_not_lost(stores):
    r = stores.reports.create(_report())

    def worker():
        for _ in range(200):
            stores.reports.increment_download_count(r.id)

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert stores.reports.read_by_id(r.id).download_count == 1600


def test_concurrent_toggles_end_where_they_started(stores):
    n = stores.notices.create(
        {
            "title": "Booth meeting",
            "content": "All booth presidents to attend.",
            "priority": "high",
            "category": "Meetings",
            "author": "Secretary",
        }
    )

    def worker():
        for _ in range(100):
            stores.notices.toggle_pin(n.id)

    threads = [threading.Thread(target=worker) for _ in range(4)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert stores.notices.read_by_id(n.id).is_pinned is False


def test_mutations_are_audited(stores):
    m = stores.members.create(_member())
    stores.members.update(m.id, {"designation": "Secretary"})
    stores.members.delete(m.id)
    events = stores.audit.events(entity_type="Member", entity_id=m.id)
    assert [e.action for e in events] == ["member.create", "member.edit", "member.delete"]
    assert '"designation"' in events[1].metadata_json


def test_seeded_registry_has_fixture_counts():
    stores = build_registry(seed=True)
    assert stores.counts() == {
        "members": 2,
        "events": 2,
        "notices": 2,
        "feedback": 5,
        "photos": 1,
        "reports": 10,
        "leadership": 4,
    }


def test_read_by_id_returns_created_record(stores):
    r = stores.reports.create(_report())
    assert stores.reports.read_by_id(r.id) == r


def test_missing_ids_report_not_found(stores):
    assert stores.feedback.read_by_id("missing") is None
    assert stores.feedback.update("missing", {"subject": "x"}) is None
    assert stores.feedback.delete("missing") is False


def test_update_changes_only_the_given_field(stores):
    before = stores.members.create(_member())
    after = stores.members.update(before.id, {"district": "Satara"})
    assert after.district == "Satara"
    assert {**vars(after), "district": before.district} == vars(before)


def test_search_ignores_case(stores):
    stores.members.create(_member(full_name="Rajesh Sharma"))
    stores.members.create(_member(full_name="Priya Patil"))
    assert stores.members.search("RAJESH") == stores.members.search("rajesh")
    assert len(stores.members.search("rajesh")) == 1


def test_feedback_status_scenario(stores):
    fb = stores.feedback.create(
        {
            "member_id": "m1",
            "member_name": "Priya",
            "subject": "Login problem",
            "message": "Cannot log in since Monday.",
            "category": "technical_issue",
        }
    )
    assert fb.status == "pending"
    assert stores.feedback.update_status(fb.id, "resolved") is True
    after = stores.feedback.read_by_id(fb.id)
    assert after.status == "resolved"
    assert {**vars(after), "status": "pending"} == vars(fb)


def test_event_search_scenario(stores):
    base = {
        "description": "",
        "event_type": "offline",
        "venue": "Pune",
        "event_date": NOW,
        "end_date": None,
        "max_attendees": 100,
        "organizer": "Org",
        "constituency": "",
        "district": "",
    }
    first = stores.events.create({**base, "title": "सम्मेलन A"})
    stores.events.create({**base, "title": "शिबिर B"})
    assert [e.id for e in stores.events.search("सम्मेलन")] == [first.id]


def test_report_category_filter_scenario(stores):
    for _ in range(3):
        stores.reports.create(_report(category="monthly"))
    for _ in range(2):
        stores.reports.create(_report(category="quarterly"))
    assert len(stores.reports.filter_by_category("monthly")) == 3


def test_audit_trail_keeps_newest_events_only():
    stores = build_registry(clock=lambda: NOW, id_factory=sequential_id_factory(), seed=False, audit_max_events=3)
    for i in range(5):
        stores.members.create(_member(full_name=f"Member {i}"))
    events = stores.audit.events()
    assert [e.id for e in events] == [3, 4, 5]
    assert [e.entity_id for e in events] == ["member_3", "member_4", "member_5"]

    stores.members.delete("member_5")
    assert [e.id for e in stores.audit.events()] == [4, 5, 6]
