from __future__ import annotations

from typing import Any

from app.connect.modules.photos.models import EventPhoto
from app.connect.store import EntityStore
from app.connect.utils import clean, parse_tags


def validate_photo_payload(payload: dict, *, partial: bool = False) -> list[str]:
    errors = []
    for key, label in (
        ("event_id", "Event"),
        ("photo_url", "Photo URL"),
        ("uploaded_by", "Uploader"),
    ):
        if (not partial or key in payload) and not clean(payload.get(key)):
            errors.append(f"{label} is required.")
    return errors


def photo_fields_from_payload(payload: dict, *, partial: bool = False) -> dict[str, Any]:
    fields: dict[str, Any] = {}
    for key in ("event_id", "event_name", "photo_url", "uploaded_by", "description"):
        if not partial or key in payload:
            fields[key] = clean(payload.get(key))
    if not partial or "tags" in payload:
        fields["tags"] = parse_tags(payload.get("tags"))
    return fields


class PhotoStore(EntityStore[EventPhoto]):
    record_type = EventPhoto
    entity_type = "EventPhoto"
    id_prefix = "photo"
    search_fields = ("event_name", "description", "uploaded_by", "tags")
    timestamp_field = "uploaded_at"

    def for_event(self, event_id: str) -> list[EventPhoto]:
        return self.filter_by("event_id", event_id)
