from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime


@dataclass
class Notice:
    id: str
    title: str
    content: str
    priority: str  # urgent | high | medium | low
    category: str
    author: str
    target_audience: str = "all"  # all | leadership | constituency
    constituency: str = ""
    district: str = ""
    expiry_date: datetime | None = None
    attachments: list[str] = field(default_factory=list)
    is_pinned: bool = False
    created_at: datetime | None = None
    # reader ids in first-read order, no repeats
    read_by: list[str] = field(default_factory=list)
    view_count: int = 0
