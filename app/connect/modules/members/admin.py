from __future__ import annotations

from flask import Blueprint

from app.connect.api import arg, flag_arg, invalid, json_payload, list_response, not_found, record_response
from app.connect.modules.members.service import member_fields_from_payload, validate_member_payload
from app.connect.registry import get_stores

bp = Blueprint("members", __name__)


@bp.get("/members")
def members_list():
    members = get_stores().members.query(
        arg("q"),
        constituency=arg("constituency"),
        district=arg("district"),
        division=arg("division"),
        is_verified=flag_arg("verified"),
    )
    return list_response(members)


@bp.post("/members")
def members_create():
    payload = json_payload()
    errors = validate_member_payload(payload)
    if errors:
        return invalid(errors)
    member = get_stores().members.create(member_fields_from_payload(payload))
    return record_response(member, 201)


@bp.get("/members/<member_id>")
def members_detail(member_id: str):
    member = get_stores().members.read_by_id(member_id)
    if member is None:
        return not_found("Member")
    return record_response(member)


@bp.put("/members/<member_id>")
def members_update(member_id: str):
    store = get_stores().members
    existing = store.read_by_id(member_id)
    if existing is None:
        return not_found("Member")
    payload = json_payload()
    errors = validate_member_payload(payload, partial=True)
    if errors:
        return invalid(errors)
    member = store.update(member_id, member_fields_from_payload(payload, existing))
    if member is None:
        return not_found("Member")
    return record_response(member)


@bp.delete("/members/<member_id>")
def members_delete(member_id: str):
    if not get_stores().members.delete(member_id):
        return not_found("Member")
    return {"ok": True}


@bp.post("/members/<member_id>/verify")
def members_verify(member_id: str):
    store = get_stores().members
    verified = json_payload().get("verified", True)
    if not isinstance(verified, bool):
        return invalid(["verified must be true or false."])
    if not store.set_verified(member_id, verified):
        return not_found("Member")
    return record_response(store.read_by_id(member_id))
