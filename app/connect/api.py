"""
Small JSON helpers shared by the module blueprints.
"""
from __future__ import annotations

from typing import Any

from flask import jsonify, request

from app.connect.utils import jsonable, paginate


def json_payload() -> dict[str, Any]:
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def not_found(label: str):
    return jsonify({"error": f"{label} not found"}), 404


def invalid(errors: list[str]):
    return jsonify({"errors": errors}), 400


def record_response(record: Any, status: int = 200):
    return jsonify(jsonable(record)), status


def list_response(items: list):
    """Paginated list using the ``page``/``per_page`` query args."""
    page = request.args.get("page", 1, type=int)
    per_page = request.args.get("per_page", 20, type=int)
    page_items, meta = paginate(items, page, per_page)
    return jsonify({"items": jsonable(page_items), **meta})


def arg(name: str) -> str | None:
    return (request.args.get(name) or "").strip() or None


def flag_arg(name: str) -> bool | None:
    """'1'/'true' -> True, '0'/'false' -> False, missing -> None."""
    raw = (request.args.get(name) or "").strip().lower()
    if raw in ("1", "true", "yes"):
        return True
    if raw in ("0", "false", "no"):
        return False
    return None
