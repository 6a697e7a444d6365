from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass
class Feedback:
    id: str
    member_id: str
    member_name: str
    subject: str
    message: str
    category: str
    status: str = "pending"  # pending | in_progress | resolved
    priority: str | None = None  # low | medium | high | urgent
    user_type: str | None = None  # member | leader
    phone: str | None = None
    email: str | None = None
    constituency: str | None = None
    district: str | None = None
    event_id: str | None = None
    attachment_urls: list[str] | None = None
    created_at: datetime | None = None
    response: str | None = None
    response_date: datetime | None = None
