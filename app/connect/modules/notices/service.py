from __future__ import annotations

from datetime import datetime
from typing import Any

from app.connect.constants import NOTICE_PRIORITIES, TARGET_AUDIENCES
from app.connect.modules.notices.models import Notice
from app.connect.store import EntityStore
from app.connect.utils import clean, enum_error, is_valid_datetime, parse_datetime, parse_tags


def validate_notice_payload(payload: dict, *, partial: bool = False) -> list[str]:
    """Validate notice creation/update payload. Returns list of errors."""
    errors: list[str] = []

    def _given(key: str) -> bool:
        return not partial or key in payload

    if _given("title") and len(clean(payload.get("title"))) < 5:
        errors.append("Title must be at least 5 characters.")
    if _given("content") and len(clean(payload.get("content"))) < 10:
        errors.append("Content must be at least 10 characters.")
    if _given("category") and not clean(payload.get("category")):
        errors.append("Category is required.")
    if _given("author") and not clean(payload.get("author")):
        errors.append("Author is required.")
    if _given("priority"):
        err = enum_error("priority", clean(payload.get("priority")), NOTICE_PRIORITIES)
        if err:
            errors.append(err)
    if "target_audience" in payload:
        err = enum_error("target audience", clean(payload.get("target_audience")), TARGET_AUDIENCES)
        if err:
            errors.append(err)
    if payload.get("expiry_date") and not is_valid_datetime(payload.get("expiry_date")):
        errors.append("Expiry date must be an ISO date/time.")
    return errors


def notice_fields_from_payload(payload: dict, *, partial: bool = False) -> dict[str, Any]:
    fields: dict[str, Any] = {}
    for key in ("title", "content", "priority", "category", "author", "constituency", "district"):
        if not partial or key in payload:
            fields[key] = clean(payload.get(key))
    if not partial or "target_audience" in payload:
        fields["target_audience"] = clean(payload.get("target_audience")) or "all"
    if not partial or "expiry_date" in payload:
        fields["expiry_date"] = parse_datetime(payload.get("expiry_date"))
    if not partial or "attachments" in payload:
        fields["attachments"] = parse_tags(payload.get("attachments"))
    if partial and "is_pinned" in payload:
        fields["is_pinned"] = bool(payload.get("is_pinned"))
    return fields


def _pinned_newest_first(notices: list[Notice]) -> list[Notice]:
    return sorted(notices, key=lambda n: (n.is_pinned, n.created_at or datetime.min), reverse=True)


class NoticeStore(EntityStore[Notice]):
    record_type = Notice
    entity_type = "Notice"
    id_prefix = "notice"
    search_fields = ("title", "content", "author")
    timestamp_field = "created_at"
    counter_fields = ("view_count",)
    managed_fields = ("read_by",)

    def creation_defaults(self) -> dict[str, Any]:
        return {"is_pinned": False, "read_by": []}

    def filter_by_priority(self, priority: str) -> list[Notice]:
        return self.filter_by("priority", priority)

    def filter_by_category(self, category: str) -> list[Notice]:
        return self.filter_by("category", category)

    def toggle_pin(self, notice_id: str) -> bool:
        with self._lock:
            notice = self._get(notice_id)
            if notice is None:
                return False
            self.update(notice_id, {"is_pinned": not notice.is_pinned})
            return True

    def mark_read(self, notice_id: str, reader_id: str) -> bool:
        """Record a view; the reader is added to ``read_by`` only once."""
        with self._lock:
            notice = self._get(notice_id)
            if notice is None:
                return False
            read_by = notice.read_by if reader_id in notice.read_by else [*notice.read_by, reader_id]
            self._replace(notice_id, {"read_by": read_by, "view_count": notice.view_count + 1})
            return True

    def recent(self, limit: int = 5) -> list[Notice]:
        return _pinned_newest_first(self.read_all())[:limit]

    def active(self, *, now: datetime | None = None) -> list[Notice]:
        """Notices without an expiry date or expiring after ``now``."""
        now = now or self._now()
        return _pinned_newest_first(self.filter(lambda n: n.expiry_date is None or n.expiry_date > now))
