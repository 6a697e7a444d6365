from __future__ import annotations

import dataclasses
from typing import Any

from app.connect.constants import SOCIAL_PLATFORMS
from app.connect.modules.leadership.models import Leader, LeaderContact
from app.connect.store import EntityStore
from app.connect.utils import EMAIL_RE, clean, parse_int, parse_tags


def validate_leader_payload(payload: dict, *, partial: bool = False) -> list[str]:
    errors = []
    if (not partial or "name" in payload) and len(clean(payload.get("name"))) < 2:
        errors.append("Name must be at least 2 characters.")
    if (not partial or "position" in payload) and not clean(payload.get("position")):
        errors.append("Position is required.")
    for key in ("contact_info", "social_media_handles"):
        if payload.get(key) is not None and not isinstance(payload[key], dict):
            errors.append(f"{key} must be an object.")
    contact = payload.get("contact_info")
    email = clean(contact.get("email")) if isinstance(contact, dict) else ""
    if email and not EMAIL_RE.match(email):
        errors.append("Email address is not valid.")
    if "is_active" in payload and not isinstance(payload["is_active"], bool):
        errors.append("is_active must be true or false.")
    if "display_order" in payload and parse_int(payload.get("display_order")) is None:
        errors.append("Display order must be a whole number.")
    return errors


def leader_fields_from_payload(payload: dict, existing: Leader | None = None) -> dict[str, Any]:
    partial = existing is not None
    fields: dict[str, Any] = {}
    for key in ("name", "position", "constituency", "district", "bio", "profile_image"):
        if not partial or key in payload:
            fields[key] = clean(payload.get(key))
    if not partial or "achievements" in payload:
        raw = payload.get("achievements")
        fields["achievements"] = [clean(a) for a in raw if clean(a)] if isinstance(raw, list) else parse_tags(raw)
    if not partial or "is_active" in payload:
        fields["is_active"] = bool(payload.get("is_active", True))
    if not partial or "display_order" in payload:
        fields["display_order"] = parse_int(payload.get("display_order"), 0)
    if not partial or "social_media_handles" in payload:
        handles = payload.get("social_media_handles") or {}
        fields["social_media_handles"] = {p: clean(handles[p]) for p in SOCIAL_PLATFORMS if clean(handles.get(p))}
    if not partial or "contact_info" in payload:
        contact = {k: clean(v) for k, v in (payload.get("contact_info") or {}).items() if k in ("email", "phone", "office_address")}
        base = existing.contact_info if partial else LeaderContact()
        fields["contact_info"] = dataclasses.replace(base, **contact)
    return fields


class LeadershipStore(EntityStore[Leader]):
    record_type = Leader
    entity_type = "Leader"
    id_prefix = "leader"
    search_fields = ("name", "position", "constituency", "district")

    def active(self) -> list[Leader]:
        """Active leaders in display order (ties keep insertion order)."""
        leaders = self.filter_by("is_active", True)
        leaders.sort(key=lambda l: l.display_order)
        return leaders
