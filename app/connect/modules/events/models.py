from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime


@dataclass
class EventAttendee:
    id: str
    member_id: str
    member_name: str = ""
    status: str = "invited"  # invited | confirmed | attended | absent
    registered_at: datetime | None = None


@dataclass
class Event:
    id: str
    title: str
    description: str
    event_type: str  # online | offline | hybrid
    venue: str
    event_date: datetime
    end_date: datetime | None
    max_attendees: int
    organizer: str
    constituency: str
    district: str
    category: str = ""
    current_attendees: int = 0
    # Expected for online/hybrid events; checked by payload validation only.
    meeting_link: str | None = None
    status: str = "draft"  # draft | published | cancelled | completed
    image_url: str | None = None
    attendees: list[EventAttendee] = field(default_factory=list)
