from __future__ import annotations

from flask import Blueprint

from app.connect.api import arg, flag_arg, invalid, json_payload, list_response, not_found, record_response
from app.connect.modules.notices.service import notice_fields_from_payload, validate_notice_payload
from app.connect.registry import get_stores
from app.connect.utils import clean

bp = Blueprint("notices", __name__)


@bp.get("/notices")
def notices_list():
    store = get_stores().notices
    notices = store.query(
        arg("q"),
        priority=arg("priority"),
        category=arg("category"),
        target_audience=arg("audience"),
        is_pinned=flag_arg("pinned"),
    )
    if flag_arg("active"):
        active_ids = {n.id for n in store.active()}
        notices = [n for n in notices if n.id in active_ids]
    return list_response(notices)


@bp.post("/notices")
def notices_create():
    payload = json_payload()
    errors = validate_notice_payload(payload)
    if errors:
        return invalid(errors)
    notice = get_stores().notices.create(notice_fields_from_payload(payload))
    return record_response(notice, 201)


@bp.get("/notices/<notice_id>")
def notices_detail(notice_id: str):
    notice = get_stores().notices.read_by_id(notice_id)
    if notice is None:
        return not_found("Notice")
    return record_response(notice)


@bp.put("/notices/<notice_id>")
def notices_update(notice_id: str):
    payload = json_payload()
    errors = validate_notice_payload(payload, partial=True)
    if errors:
        return invalid(errors)
    notice = get_stores().notices.update(notice_id, notice_fields_from_payload(payload, partial=True))
    if notice is None:
        return not_found("Notice")
    return record_response(notice)


@bp.delete("/notices/<notice_id>")
def notices_delete(notice_id: str):
    if not get_stores().notices.delete(notice_id):
        return not_found("Notice")
    return {"ok": True}


@bp.post("/notices/<notice_id>/toggle-pin")
def notices_toggle_pin(notice_id: str):
    store = get_stores().notices
    if not store.toggle_pin(notice_id):
        return not_found("Notice")
    return record_response(store.read_by_id(notice_id))


@bp.post("/notices/<notice_id>/read")
def notices_mark_read(notice_id: str):
    store = get_stores().notices
    reader_id = clean(json_payload().get("reader_id"))
    if not reader_id:
        return invalid(["reader_id is required."])
    if not store.mark_read(notice_id, reader_id):
        return not_found("Notice")
    return record_response(store.read_by_id(notice_id))
