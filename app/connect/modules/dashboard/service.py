from __future__ import annotations

import math
from datetime import datetime, timedelta
from typing import Any

from app.connect.registry import StoreRegistry

NEW_WINDOW_DAYS = 30


def dashboard_stats(stores: StoreRegistry, *, now: datetime | None = None) -> dict[str, Any]:
    """
    Headline numbers for the dashboard cards.

    memberGrowth compares members who joined inside the window with those who
    joined before it, as a rounded percentage (100 when nobody is older).
    """
    now = now or stores.clock()
    cutoff = now - timedelta(days=NEW_WINDOW_DAYS)
    members = stores.members.read_all()

    recent_members = 0
    old_members = 0
    for m in members:
        if m.membership_date is None:
            continue
        joined = datetime.combine(m.membership_date, datetime.min.time())
        if joined >= cutoff:
            recent_members += 1
        if joined <= cutoff:
            old_members += 1
    growth = math.floor(recent_members / old_members * 100 + 0.5) if old_members > 0 else 100

    return {
        "totalMembers": len(members),
        "activeEvents": len(stores.events.filter_by_status("published")),
        "totalConstituencies": len({m.constituency for m in members}),
        "newNotices": len(stores.notices.filter(lambda n: n.created_at is not None and n.created_at >= cutoff)),
        "memberGrowth": growth,
    }
