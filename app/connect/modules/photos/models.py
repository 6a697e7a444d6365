from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime


@dataclass
class EventPhoto:
    id: str
    event_id: str
    event_name: str
    photo_url: str
    uploaded_by: str
    description: str = ""
    tags: list[str] = field(default_factory=list)
    uploaded_at: datetime | None = None
