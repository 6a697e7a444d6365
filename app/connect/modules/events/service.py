from __future__ import annotations

import dataclasses
from datetime import datetime
from typing import Any

from app.connect.constants import ATTENDEE_STATUSES, COUNTED_ATTENDEE_STATUSES, EVENT_STATUSES, EVENT_TYPES
from app.connect.modules.events.models import Event, EventAttendee
from app.connect.store import EntityStore
from app.connect.utils import clean, clean_or_none, enum_error, is_valid_datetime, parse_datetime, parse_int

REQUIRED_TEXT = (
    ("title", "Title"),
    ("venue", "Venue"),
    ("organizer", "Organizer"),
    ("category", "Category"),
)


def validate_event_payload(payload: dict, existing: Event | None = None) -> list[str]:
    """
    Validate event creation/update payload. Returns list of errors.
    For updates pass the stored event; checks that span fields (dates, meeting
    link) then use the stored value for whichever side the payload leaves out.
    """
    errors: list[str] = []
    partial = existing is not None

    def _given(key: str) -> bool:
        return not partial or key in payload

    for key, label in REQUIRED_TEXT:
        if _given(key) and not clean(payload.get(key)):
            errors.append(f"{label} is required.")

    if _given("event_type"):
        err = enum_error("event type", clean(payload.get("event_type")), EVENT_TYPES)
        if err:
            errors.append(err)

    if _given("max_attendees"):
        max_attendees = parse_int(payload.get("max_attendees"))
        if max_attendees is None or max_attendees < 1:
            errors.append("Max attendees must be a positive whole number.")

    start = existing.event_date if partial else None
    end = existing.end_date if partial else None
    if _given("event_date"):
        if not is_valid_datetime(payload.get("event_date")):
            errors.append("Event date must be an ISO date/time.")
        else:
            start = parse_datetime(payload.get("event_date"))
    if _given("end_date") and payload.get("end_date"):
        if not is_valid_datetime(payload.get("end_date")):
            errors.append("End date must be an ISO date/time.")
        else:
            end = parse_datetime(payload.get("end_date"))
    if start and end and end < start:
        errors.append("End date cannot be before the event date.")

    event_type = clean(payload.get("event_type")) if "event_type" in payload else (existing.event_type if partial else "")
    meeting_link = clean(payload.get("meeting_link")) if "meeting_link" in payload else ((existing.meeting_link or "") if partial else "")
    if event_type in ("online", "hybrid") and not meeting_link:
        errors.append("Meeting link is required for online and hybrid events.")
    return errors


def event_fields_from_payload(payload: dict, existing: Event | None = None) -> dict[str, Any]:
    partial = existing is not None
    fields: dict[str, Any] = {}
    for key in ("title", "description", "event_type", "venue", "organizer", "constituency", "district", "category"):
        if not partial or key in payload:
            fields[key] = clean(payload.get(key))
    for key in ("meeting_link", "image_url"):
        if not partial or key in payload:
            fields[key] = clean_or_none(payload.get(key))
    for key in ("event_date", "end_date"):
        if not partial or key in payload:
            fields[key] = parse_datetime(payload.get(key))
    if not partial or "max_attendees" in payload:
        fields["max_attendees"] = parse_int(payload.get("max_attendees"), 0)
    return fields


def _counted(status: str) -> int:
    return 1 if status in COUNTED_ATTENDEE_STATUSES else 0


class EventStore(EntityStore[Event]):
    record_type = Event
    entity_type = "Event"
    id_prefix = "event"
    search_fields = ("title", "description", "venue")
    counter_fields = ("current_attendees",)
    managed_fields = ("attendees",)

    def creation_defaults(self) -> dict[str, Any]:
        return {"status": "draft", "attendees": []}

    def filter_by_status(self, status: str) -> list[Event]:
        return self.filter_by("status", status)

    def update_status(self, event_id: str, status: str) -> bool:
        if status not in EVENT_STATUSES:
            raise ValueError(f"Unknown event status: {status}")
        with self._lock:
            if self._replace(event_id, {"status": status}) is None:
                return False
            self._record_event("status", event_id, {"status": status})
            return True

    def upcoming(self, *, now: datetime | None = None, limit: int = 5) -> list[Event]:
        """Published events starting at or after ``now``, soonest first."""
        now = now or self._now()
        events = self.filter(lambda e: e.status == "published" and e.event_date is not None and e.event_date >= now)
        events.sort(key=lambda e: e.event_date)
        return events[:limit]

    # ---------- attendees ----------
    def register_attendee(
        self,
        event_id: str,
        member_id: str,
        member_name: str = "",
        status: str = "invited",
    ) -> EventAttendee | None:
        """
        Add a member to an event's attendee list.
        A member already on the list is returned unchanged.
        """
        if status not in ATTENDEE_STATUSES:
            raise ValueError(f"Unknown attendee status: {status}")
        with self._lock:
            event = self._get(event_id)
            if event is None:
                return None
            for attendee in event.attendees:
                if attendee.member_id == member_id:
                    return self._snapshot(attendee)
            attendee = EventAttendee(
                id=self._id_factory("attendee"),
                member_id=member_id,
                member_name=member_name,
                status=status,
                registered_at=self._now(),
            )
            self._replace(
                event_id,
                {
                    "attendees": [*event.attendees, attendee],
                    "current_attendees": event.current_attendees + _counted(status),
                },
            )
            self._record_event("attendee_add", event_id, {"member_id": member_id, "status": status})
            return self._snapshot(attendee)

    def update_attendee_status(self, event_id: str, attendee_id: str, status: str) -> bool:
        if status not in ATTENDEE_STATUSES:
            raise ValueError(f"Unknown attendee status: {status}")
        with self._lock:
            event = self._get(event_id)
            if event is None:
                return False
            attendees = []
            delta = None
            for attendee in event.attendees:
                if attendee.id == attendee_id:
                    delta = _counted(status) - _counted(attendee.status)
                    attendee = dataclasses.replace(attendee, status=status)
                attendees.append(attendee)
            if delta is None:
                return False
            self._replace(
                event_id,
                {"attendees": attendees, "current_attendees": max(event.current_attendees + delta, 0)},
            )
            self._record_event("attendee_status", event_id, {"attendee_id": attendee_id, "status": status})
            return True

    def remove_attendee(self, event_id: str, attendee_id: str) -> bool:
        with self._lock:
            event = self._get(event_id)
            if event is None:
                return False
            removed = next((a for a in event.attendees if a.id == attendee_id), None)
            if removed is None:
                return False
            self._replace(
                event_id,
                {
                    "attendees": [a for a in event.attendees if a.id != attendee_id],
                    "current_attendees": max(event.current_attendees - _counted(removed.status), 0),
                },
            )
            self._record_event("attendee_remove", event_id, {"attendee_id": attendee_id})
            return True
