"""
Central constants for the Connect dashboard.
"""
from __future__ import annotations

EVENT_TYPES = ("online", "offline", "hybrid")
EVENT_STATUSES = ("draft", "published", "cancelled", "completed")
ATTENDEE_STATUSES = ("invited", "confirmed", "attended", "absent")
# Attendee statuses counted in Event.current_attendees
COUNTED_ATTENDEE_STATUSES = frozenset({"confirmed", "attended"})

NOTICE_PRIORITIES = ("urgent", "high", "medium", "low")
TARGET_AUDIENCES = ("all", "leadership", "constituency")

FEEDBACK_CATEGORIES = (
    "suggestion",
    "complaint",
    "appreciation",
    "meeting_request",
    "event_feedback",
    "technical_issue",
)
FEEDBACK_STATUSES = ("pending", "in_progress", "resolved")
FEEDBACK_PRIORITIES = ("low", "medium", "high", "urgent")
USER_TYPES = ("member", "leader")

REPORT_CATEGORIES = ("monthly", "quarterly", "annual", "event", "financial", "performance")
REPORT_TYPES = ("pdf", "excel", "word")
REPORT_CONTENT_TYPES = {
    "pdf": "application/pdf",
    "excel": "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
    "word": "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
}

SOCIAL_PLATFORMS = ("whatsapp", "facebook", "twitter", "instagram", "youtube")
USER_ROLES = ("admin", "leadership", "member")
