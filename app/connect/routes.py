from flask import Blueprint, jsonify, request

from app.connect.registry import get_stores
from app.connect.utils import jsonable

bp = Blueprint("routes", __name__)


@bp.get("/health")
def health():
    """Health check endpoint. Returns JSON with store sizes."""
    return {"ok": True, "counts": get_stores().counts()}


@bp.get("/healthz")
def healthz():
    """
    Fast health check for k8s/DO probes. No store access, minimal overhead.
    """
    return "ok", 200


@bp.get("/api/audit")
def audit_list():
    """Most recent audit events first, optionally narrowed to one entity."""
    entity_type = (request.args.get("entity_type") or "").strip() or None
    entity_id = (request.args.get("entity_id") or "").strip() or None
    limit = min(max(request.args.get("limit", 100, type=int) or 100, 1), 500)
    events = get_stores().audit.events(entity_type=entity_type, entity_id=entity_id)
    return jsonify(jsonable(list(reversed(events))[:limit]))
