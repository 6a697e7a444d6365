"""The relational schema creates cleanly and enforces its enumerations."""
from datetime import datetime

import pytest
from sqlalchemy import inspect
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.connect.db import create_schema, make_engine
from app.connect.schema import Event, EventAttendee, Member, Report

EXPECTED_TABLES = {
    "users",
    "members",
    "events",
    "event_attendees",
    "notices",
    "feedback",
    "leadership",
    "event_photos",
    "reports",
}


@pytest.fixture()
def engine(tmp_path):
    engine = make_engine(f"sqlite:///{tmp_path/'schema.db'}")
    create_schema(engine)
    yield engine
    engine.dispose()


def test_all_tables_created(engine):
    assert EXPECTED_TABLES <= set(inspect(engine).get_table_names())


def test_create_schema_is_idempotent(engine):
    assert set(create_schema(engine)) == EXPECTED_TABLES


def test_event_with_attendee_roundtrip(engine):
    with Session(engine) as s:
        member = Member(full_name="राजेश", constituency="मुंबई दक्षिण", district="मुंबई", division="मुंबई महानगर")
        event = Event(title="सम्मेलन", event_type="hybrid", event_date=datetime(2024, 2, 15, 10))
        event.attendees.append(EventAttendee(member=member, member_name="राजेश", status="confirmed"))
        s.add_all([member, event])
        s.commit()

        loaded = s.get(Event, event.id)
        assert loaded.status == "draft"
        assert loaded.current_attendees == 0
        assert [a.member_id for a in loaded.attendees] == [member.id]
        assert len(loaded.id) == 32


def test_check_constraint_rejects_unknown_category(engine):
    with Session(engine) as s:
        s.add(
            Report(
                title="x",
                category="weekly",
                type="pdf",
                author="a",
                department="d",
                file_name="x.pdf",
                tags=["a"],
            )
        )
        with pytest.raises(IntegrityError):
            s.commit()


def test_app_engine_and_session_scope(tmp_path, monkeypatch):
    from app.connect import create_app
    from app.connect.db import session_scope
    from app.connect.schema import User

    monkeypatch.setenv("SECRET_KEY", "test-secret")
    monkeypatch.setenv("DATABASE_URL", f"sqlite:///{tmp_path/'app.db'}")
    monkeypatch.setenv("ENV", "test")
    app = create_app()
    create_schema(app.extensions["sqlalchemy_engine"])

    with session_scope(app) as s:
        s.add(User(email="admin@example.com", role="admin"))

    with session_scope(app) as s:
        assert s.query(User).filter(User.email == "admin@example.com").one().role == "admin"

    with pytest.raises(IntegrityError):
        with session_scope(app) as s:
            s.add(User(email="other@example.com", role="superuser"))
