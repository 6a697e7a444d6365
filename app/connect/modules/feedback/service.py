from __future__ import annotations

from datetime import datetime
from typing import Any

from app.connect.constants import FEEDBACK_CATEGORIES, FEEDBACK_PRIORITIES, FEEDBACK_STATUSES, USER_TYPES
from app.connect.modules.feedback.models import Feedback
from app.connect.store import EntityStore
from app.connect.utils import EMAIL_RE, clean, clean_or_none, enum_error, parse_tags

OPTIONAL_TEXT = ("phone", "email", "constituency", "district", "event_id")


def validate_feedback_payload(payload: dict, *, partial: bool = False) -> list[str]:
    """Validate feedback creation/update payload. Returns list of errors."""
    errors: list[str] = []

    def _given(key: str) -> bool:
        return not partial or key in payload

    if _given("member_name") and len(clean(payload.get("member_name"))) < 2:
        errors.append("Name must be at least 2 characters.")
    if _given("subject") and len(clean(payload.get("subject"))) < 5:
        errors.append("Subject must be at least 5 characters.")
    if _given("message") and len(clean(payload.get("message"))) < 10:
        errors.append("Message must be at least 10 characters.")
    if _given("category"):
        err = enum_error("category", clean(payload.get("category")), FEEDBACK_CATEGORIES)
        if err:
            errors.append(err)
    if payload.get("priority"):
        err = enum_error("priority", clean(payload.get("priority")), FEEDBACK_PRIORITIES)
        if err:
            errors.append(err)
    if payload.get("user_type"):
        err = enum_error("user type", clean(payload.get("user_type")), USER_TYPES)
        if err:
            errors.append(err)
    email = clean(payload.get("email"))
    if email and not EMAIL_RE.match(email):
        errors.append("Email address is not valid.")
    return errors


def validate_status(status: Any) -> list[str]:
    err = enum_error("status", status, FEEDBACK_STATUSES)
    return [err] if err else []


def feedback_fields_from_payload(payload: dict, *, partial: bool = False) -> dict[str, Any]:
    fields: dict[str, Any] = {}
    for key in ("member_name", "subject", "message", "category"):
        if not partial or key in payload:
            fields[key] = clean(payload.get(key))
    if not partial or "member_id" in payload:
        fields["member_id"] = clean(payload.get("member_id"))
    for key in ("priority", "user_type", *OPTIONAL_TEXT):
        if not partial or key in payload:
            fields[key] = clean_or_none(payload.get(key))
    if not partial or "attachment_urls" in payload:
        fields["attachment_urls"] = parse_tags(payload.get("attachment_urls")) or None
    return fields


class FeedbackStore(EntityStore[Feedback]):
    record_type = Feedback
    entity_type = "Feedback"
    id_prefix = "feedback"
    search_fields = ("subject", "member_name", "message")
    timestamp_field = "created_at"

    def creation_defaults(self) -> dict[str, Any]:
        return {"status": "pending"}

    def filter_by_status(self, status: str) -> list[Feedback]:
        return self.filter_by("status", status)

    def filter_by_category(self, category: str) -> list[Feedback]:
        return self.filter_by("category", category)

    def update_status(self, feedback_id: str, status: str) -> bool:
        if status not in FEEDBACK_STATUSES:
            raise ValueError(f"Unknown feedback status: {status}")
        with self._lock:
            return self.update(feedback_id, {"status": status}) is not None

    def respond(self, feedback_id: str, response: str, status: str | None = None) -> Feedback | None:
        """Attach a response; an empty response clears the response date."""
        if status is not None and status not in FEEDBACK_STATUSES:
            raise ValueError(f"Unknown feedback status: {status}")
        text = (response or "").strip()
        changes: dict[str, Any] = {
            "response": text or None,
            "response_date": self._now() if text else None,
        }
        if status is not None:
            changes["status"] = status
        with self._lock:
            record = self._replace(feedback_id, changes)
            if record is None:
                return None
            self._record_event("respond", feedback_id, {"status": record.status})
            return self._snapshot(record)

    def status_counts(self) -> dict[str, int]:
        counts = {s: 0 for s in FEEDBACK_STATUSES}
        for fb in self.read_all():
            counts[fb.status] = counts.get(fb.status, 0) + 1
        return counts

    def recent(self, limit: int = 5) -> list[Feedback]:
        items = self.read_all()
        items.sort(key=lambda f: f.created_at or datetime.min, reverse=True)
        return items[:limit]
