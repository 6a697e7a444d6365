from __future__ import annotations

from flask import Blueprint

from app.connect.api import arg, flag_arg, invalid, json_payload, list_response, not_found, record_response
from app.connect.modules.leadership.service import leader_fields_from_payload, validate_leader_payload
from app.connect.registry import get_stores

bp = Blueprint("leadership", __name__)


@bp.get("/leadership")
def leadership_list():
    store = get_stores().leadership
    if flag_arg("active") and not arg("q"):
        return list_response(store.active())
    leaders = store.query(arg("q"), district=arg("district"), is_active=flag_arg("active"))
    leaders.sort(key=lambda l: l.display_order)
    return list_response(leaders)


@bp.post("/leadership")
def leadership_create():
    payload = json_payload()
    errors = validate_leader_payload(payload)
    if errors:
        return invalid(errors)
    leader = get_stores().leadership.create(leader_fields_from_payload(payload))
    return record_response(leader, 201)


@bp.get("/leadership/<leader_id>")
def leadership_detail(leader_id: str):
    leader = get_stores().leadership.read_by_id(leader_id)
    if leader is None:
        return not_found("Leader")
    return record_response(leader)


@bp.put("/leadership/<leader_id>")
def leadership_update(leader_id: str):
    store = get_stores().leadership
    existing = store.read_by_id(leader_id)
    if existing is None:
        return not_found("Leader")
    payload = json_payload()
    errors = validate_leader_payload(payload, partial=True)
    if errors:
        return invalid(errors)
    leader = store.update(leader_id, leader_fields_from_payload(payload, existing))
    if leader is None:
        return not_found("Leader")
    return record_response(leader)


@bp.delete("/leadership/<leader_id>")
def leadership_delete(leader_id: str):
    if not get_stores().leadership.delete(leader_id):
        return not_found("Leader")
    return {"ok": True}
