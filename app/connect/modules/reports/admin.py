from __future__ import annotations

from flask import Blueprint, current_app, jsonify, request, send_file

from app.connect.api import arg, flag_arg, invalid, json_payload, list_response, not_found, record_response
from app.connect.constants import REPORT_CONTENT_TYPES
from app.connect.modules.reports.service import (
    open_report_file,
    report_fields_from_payload,
    report_type_for_filename,
    upload_report_file,
    validate_report_payload,
)
from app.connect.registry import get_stores
from app.connect.storage import storage_from_config
from app.connect.utils import jsonable

bp = Blueprint("reports", __name__)


@bp.get("/reports")
def reports_list():
    store = get_stores().reports
    reports = store.query(
        arg("q"),
        category=arg("category"),
        department=arg("department"),
        type=arg("type"),
        is_public=flag_arg("public"),
    )
    return list_response(reports)


@bp.get("/reports/public")
def reports_public():
    return jsonify(jsonable(get_stores().reports.get_public_reports()))


@bp.get("/reports/summary")
def reports_summary():
    store = get_stores().reports
    reports = store.read_all()
    return jsonify(
        {
            "total": len(reports),
            "public": sum(1 for r in reports if r.is_public),
            "downloads": sum(r.download_count for r in reports),
            "departments": store.departments(),
            "by_category": store.category_counts(),
        }
    )


@bp.post("/reports")
def reports_create():
    payload = json_payload()
    errors = validate_report_payload(payload)
    if errors:
        return invalid(errors)
    report = get_stores().reports.create(report_fields_from_payload(payload))
    return record_response(report, 201)


@bp.get("/reports/<report_id>")
def reports_detail(report_id: str):
    report = get_stores().reports.read_by_id(report_id)
    if report is None:
        return not_found("Report")
    return record_response(report)


@bp.put("/reports/<report_id>")
def reports_update(report_id: str):
    payload = json_payload()
    errors = validate_report_payload(payload, partial=True)
    if errors:
        return invalid(errors)
    report = get_stores().reports.update(report_id, report_fields_from_payload(payload, partial=True))
    if report is None:
        return not_found("Report")
    return record_response(report)


@bp.delete("/reports/<report_id>")
def reports_delete(report_id: str):
    if not get_stores().reports.delete(report_id):
        return not_found("Report")
    return {"ok": True}


@bp.post("/reports/<report_id>/file")
def reports_upload_file(report_id: str):
    store = get_stores().reports
    if store.read_by_id(report_id) is None:
        return not_found("Report")
    f = request.files.get("file")
    if not f or not f.filename:
        return invalid(["No file uploaded."])
    if report_type_for_filename(f.filename) is None:
        return invalid(["File must be a PDF, Excel or Word document."])

    storage = storage_from_config(current_app.config)
    report = upload_report_file(store, storage, report_id, f.read(), f.filename, f.mimetype)
    if report is None:
        return not_found("Report")
    return record_response(report)


@bp.get("/reports/<report_id>/download")
def reports_download(report_id: str):
    store = get_stores().reports
    report = store.read_by_id(report_id)
    if report is None:
        return not_found("Report")

    storage = storage_from_config(current_app.config)
    fobj = open_report_file(storage, report)
    if fobj is None:
        return jsonify({"error": "Report file not uploaded"}), 404

    store.increment_download_count(report_id)
    return send_file(
        fobj,
        mimetype=REPORT_CONTENT_TYPES.get(report.type, "application/octet-stream"),
        as_attachment=True,
        download_name=report.file_name,
        max_age=0,
    )
