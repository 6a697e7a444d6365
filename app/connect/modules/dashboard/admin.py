from __future__ import annotations

from flask import Blueprint, jsonify, request

from app.connect.modules.dashboard.service import dashboard_stats
from app.connect.registry import get_stores
from app.connect.utils import jsonable

bp = Blueprint("dashboard", __name__)


def _limit(default: int = 5) -> int:
    return min(max(request.args.get("limit", default, type=int) or default, 1), 50)


@bp.get("/dashboard/stats")
def stats():
    return jsonify(dashboard_stats(get_stores()))


@bp.get("/dashboard/member-stats")
def member_stats():
    s = get_stores().members.stats(recent=_limit())
    return jsonify(
        {
            "total": s["total"],
            "verified": s["verified"],
            "byDivision": s["by_division"],
            "recentMembers": jsonable(s["recent_members"]),
        }
    )


@bp.get("/dashboard/upcoming-events")
def upcoming_events():
    return jsonify(jsonable(get_stores().events.upcoming(limit=_limit())))


@bp.get("/dashboard/recent-notices")
def recent_notices():
    return jsonify(jsonable(get_stores().notices.recent(_limit())))


@bp.get("/dashboard/recent-feedback")
def recent_feedback():
    store = get_stores().feedback
    return jsonify({"items": jsonable(store.recent(_limit())), "status_counts": store.status_counts()})
