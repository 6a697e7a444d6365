from __future__ import annotations

from flask import Blueprint

from app.connect.api import arg, invalid, json_payload, list_response, not_found, record_response
from app.connect.modules.photos.service import photo_fields_from_payload, validate_photo_payload
from app.connect.registry import get_stores

bp = Blueprint("photos", __name__)


def _with_event_name(fields: dict) -> dict:
    # Fall back to the event's title when the client sends only the id.
    if fields.get("event_id") and not fields.get("event_name"):
        event = get_stores().events.read_by_id(fields["event_id"])
        if event is not None:
            fields["event_name"] = event.title
    return fields


@bp.get("/photos")
def photos_list():
    photos = get_stores().photos.query(arg("q"), event_id=arg("event_id"), uploaded_by=arg("uploaded_by"))
    return list_response(photos)


@bp.post("/photos")
def photos_create():
    payload = json_payload()
    errors = validate_photo_payload(payload)
    if errors:
        return invalid(errors)
    photo = get_stores().photos.create(_with_event_name(photo_fields_from_payload(payload)))
    return record_response(photo, 201)


@bp.get("/photos/<photo_id>")
def photos_detail(photo_id: str):
    photo = get_stores().photos.read_by_id(photo_id)
    if photo is None:
        return not_found("Photo")
    return record_response(photo)


@bp.put("/photos/<photo_id>")
def photos_update(photo_id: str):
    payload = json_payload()
    errors = validate_photo_payload(payload, partial=True)
    if errors:
        return invalid(errors)
    photo = get_stores().photos.update(photo_id, _with_event_name(photo_fields_from_payload(payload, partial=True)))
    if photo is None:
        return not_found("Photo")
    return record_response(photo)


@bp.delete("/photos/<photo_id>")
def photos_delete(photo_id: str):
    if not get_stores().photos.delete(photo_id):
        return not_found("Photo")
    return {"ok": True}
