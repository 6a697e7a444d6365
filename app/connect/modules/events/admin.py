from __future__ import annotations

from flask import Blueprint

from app.connect.api import arg, invalid, json_payload, list_response, not_found, record_response
from app.connect.constants import ATTENDEE_STATUSES, EVENT_STATUSES
from app.connect.modules.events.service import event_fields_from_payload, validate_event_payload
from app.connect.registry import get_stores
from app.connect.utils import clean, enum_error

bp = Blueprint("events", __name__)


@bp.get("/events")
def events_list():
    events = get_stores().events.query(
        arg("q"),
        status=arg("status"),
        event_type=arg("event_type"),
        district=arg("district"),
    )
    return list_response(events)


@bp.post("/events")
def events_create():
    payload = json_payload()
    errors = validate_event_payload(payload)
    if errors:
        return invalid(errors)
    event = get_stores().events.create(event_fields_from_payload(payload))
    return record_response(event, 201)


@bp.get("/events/<event_id>")
def events_detail(event_id: str):
    event = get_stores().events.read_by_id(event_id)
    if event is None:
        return not_found("Event")
    return record_response(event)


@bp.put("/events/<event_id>")
def events_update(event_id: str):
    store = get_stores().events
    existing = store.read_by_id(event_id)
    if existing is None:
        return not_found("Event")
    payload = json_payload()
    errors = validate_event_payload(payload, existing)
    if errors:
        return invalid(errors)
    event = store.update(event_id, event_fields_from_payload(payload, existing))
    if event is None:
        return not_found("Event")
    return record_response(event)


@bp.delete("/events/<event_id>")
def events_delete(event_id: str):
    if not get_stores().events.delete(event_id):
        return not_found("Event")
    return {"ok": True}


@bp.post("/events/<event_id>/status")
def events_status(event_id: str):
    store = get_stores().events
    status = clean(json_payload().get("status"))
    err = enum_error("status", status, EVENT_STATUSES)
    if err:
        return invalid([err])
    if not store.update_status(event_id, status):
        return not_found("Event")
    return record_response(store.read_by_id(event_id))


# ---------- Attendees ----------
@bp.post("/events/<event_id>/attendees")
def events_attendee_add(event_id: str):
    payload = json_payload()
    member_id = clean(payload.get("member_id"))
    status = clean(payload.get("status")) or "invited"
    errors = []
    if not member_id:
        errors.append("member_id is required.")
    err = enum_error("attendee status", status, ATTENDEE_STATUSES)
    if err:
        errors.append(err)
    if errors:
        return invalid(errors)

    stores = get_stores()
    member_name = clean(payload.get("member_name"))
    if not member_name:
        member = stores.members.read_by_id(member_id)
        member_name = member.full_name if member else ""
    attendee = stores.events.register_attendee(event_id, member_id, member_name, status)
    if attendee is None:
        return not_found("Event")
    return record_response(attendee, 201)


@bp.put("/events/<event_id>/attendees/<attendee_id>")
def events_attendee_update(event_id: str, attendee_id: str):
    store = get_stores().events
    status = clean(json_payload().get("status"))
    err = enum_error("attendee status", status, ATTENDEE_STATUSES)
    if err:
        return invalid([err])
    if not store.update_attendee_status(event_id, attendee_id, status):
        return not_found("Attendee")
    return record_response(store.read_by_id(event_id))


@bp.delete("/events/<event_id>/attendees/<attendee_id>")
def events_attendee_remove(event_id: str, attendee_id: str):
    store = get_stores().events
    if not store.remove_attendee(event_id, attendee_id):
        return not_found("Attendee")
    return record_response(store.read_by_id(event_id))
