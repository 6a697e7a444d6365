from __future__ import annotations

from flask import Blueprint

from app.connect.api import arg, invalid, json_payload, list_response, not_found, record_response
from app.connect.modules.feedback.service import (
    feedback_fields_from_payload,
    validate_feedback_payload,
    validate_status,
)
from app.connect.registry import get_stores
from app.connect.utils import clean

bp = Blueprint("feedback", __name__)


@bp.get("/feedback")
def feedback_list():
    items = get_stores().feedback.query(
        arg("q"),
        status=arg("status"),
        category=arg("category"),
        priority=arg("priority"),
        user_type=arg("user_type"),
    )
    return list_response(items)


@bp.post("/feedback")
def feedback_create():
    payload = json_payload()
    errors = validate_feedback_payload(payload)
    if errors:
        return invalid(errors)
    fb = get_stores().feedback.create(feedback_fields_from_payload(payload))
    return record_response(fb, 201)


@bp.get("/feedback/<feedback_id>")
def feedback_detail(feedback_id: str):
    fb = get_stores().feedback.read_by_id(feedback_id)
    if fb is None:
        return not_found("Feedback")
    return record_response(fb)


@bp.put("/feedback/<feedback_id>")
def feedback_update(feedback_id: str):
    payload = json_payload()
    errors = validate_feedback_payload(payload, partial=True)
    if "status" in payload:
        errors += validate_status(payload.get("status"))
    if errors:
        return invalid(errors)
    fields = feedback_fields_from_payload(payload, partial=True)
    if "status" in payload:
        fields["status"] = payload["status"]
    fb = get_stores().feedback.update(feedback_id, fields)
    if fb is None:
        return not_found("Feedback")
    return record_response(fb)


@bp.delete("/feedback/<feedback_id>")
def feedback_delete(feedback_id: str):
    if not get_stores().feedback.delete(feedback_id):
        return not_found("Feedback")
    return {"ok": True}


@bp.post("/feedback/<feedback_id>/status")
def feedback_status(feedback_id: str):
    store = get_stores().feedback
    status = json_payload().get("status")
    errors = validate_status(status)
    if errors:
        return invalid(errors)
    if not store.update_status(feedback_id, status):
        return not_found("Feedback")
    return record_response(store.read_by_id(feedback_id))


@bp.post("/feedback/<feedback_id>/respond")
def feedback_respond(feedback_id: str):
    payload = json_payload()
    response = clean(payload.get("response"))
    status = payload.get("status")
    errors = [] if response else ["Response is required."]
    if status is not None:
        errors += validate_status(status)
    if errors:
        return invalid(errors)
    fb = get_stores().feedback.respond(feedback_id, response, status)
    if fb is None:
        return not_found("Feedback")
    return record_response(fb)
