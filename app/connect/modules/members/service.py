from __future__ import annotations

import dataclasses
from collections import Counter
from datetime import datetime
from typing import Any

from app.connect.constants import SOCIAL_PLATFORMS
from app.connect.modules.members.models import ContactInfo, Member
from app.connect.store import EntityStore
from app.connect.utils import EMAIL_RE, clean, clean_or_none, parse_date

CONTACT_KEYS = ("email", "address", "emergency_contact")
MEMBER_SOCIAL_PLATFORMS = SOCIAL_PLATFORMS[:4]


def _nested(payload: dict, key: str) -> dict:
    value = payload.get(key)
    return value if isinstance(value, dict) else {}


def _contact_values(payload: dict) -> dict[str, str]:
    nested = _nested(payload, "contact_info")
    out = {}
    for key in CONTACT_KEYS:
        if key in nested:
            out[key] = clean(nested[key])
        elif key in payload:
            out[key] = clean(payload[key])
    return out


def _social_values(payload: dict) -> dict[str, str | None]:
    nested = _nested(payload, "social_media_handles")
    out: dict[str, str | None] = {}
    for platform in MEMBER_SOCIAL_PLATFORMS:
        if platform in nested:
            out[platform] = clean_or_none(nested[platform])
        elif platform in payload:
            out[platform] = clean_or_none(payload[platform])
    return out


def validate_member_payload(payload: dict, *, partial: bool = False) -> list[str]:
    """Validate member creation/update payload. Returns list of errors."""
    errors = []

    def _given(key: str) -> bool:
        return not partial or key in payload

    for key in ("contact_info", "social_media_handles"):
        if payload.get(key) is not None and not isinstance(payload[key], dict):
            errors.append(f"{key} must be an object.")
    if _given("full_name") and len(clean(payload.get("full_name"))) < 2:
        errors.append("Full name must be at least 2 characters.")
    if _given("phone") and len(clean(payload.get("phone"))) < 10:
        errors.append("Phone number must be at least 10 digits.")
    for key, label in (("constituency", "Constituency"), ("district", "District"), ("division", "Division")):
        if _given(key) and not clean(payload.get(key)):
            errors.append(f"{label} is required.")

    contact = _contact_values(payload)
    if not partial or "email" in contact:
        if not EMAIL_RE.match(contact.get("email", "")):
            errors.append("A valid email address is required.")
    if (not partial or "address" in contact) and not contact.get("address"):
        errors.append("Address is required.")
    if (not partial or "emergency_contact" in contact) and len(contact.get("emergency_contact", "")) < 10:
        errors.append("Emergency contact must be at least 10 digits.")

    if _given("membership_date") and payload.get("membership_date"):
        try:
            parse_date(payload.get("membership_date"))
        except ValueError:
            errors.append("Membership date must be YYYY-MM-DD.")
    return errors


def member_fields_from_payload(payload: dict, existing: Member | None = None) -> dict[str, Any]:
    """
    Map a validated payload onto Member fields.
    With ``existing`` only the keys present in the payload are returned, and
    contact info / social handles are merged onto the current values.
    """
    partial = existing is not None
    fields: dict[str, Any] = {}
    for key in ("full_name", "phone", "constituency", "district", "division", "designation", "achievements"):
        if not partial or key in payload:
            fields[key] = clean(payload.get(key))
    if not partial or "profile_image" in payload:
        fields["profile_image"] = clean_or_none(payload.get("profile_image"))
    if not partial or "membership_date" in payload:
        fields["membership_date"] = parse_date(payload.get("membership_date"))

    contact = _contact_values(payload)
    if not partial:
        fields["contact_info"] = ContactInfo(**contact)
    elif contact:
        fields["contact_info"] = dataclasses.replace(existing.contact_info, **contact)

    social = _social_values(payload)
    base = dict(existing.social_media_handles) if partial else {}
    if social or not partial:
        for platform, handle in social.items():
            if handle:
                base[platform] = handle
            else:
                base.pop(platform, None)
        fields["social_media_handles"] = base
    return fields


class MemberStore(EntityStore[Member]):
    record_type = Member
    entity_type = "Member"
    id_prefix = "member"
    search_fields = ("full_name", "constituency", "district", "designation")

    def creation_defaults(self) -> dict[str, Any]:
        return {"is_verified": False}

    def fallback_values(self, now: datetime) -> dict[str, Any]:
        return {"membership_date": now.date()}

    def filter_by_constituency(self, constituency: str) -> list[Member]:
        return self.filter_by("constituency", constituency)

    def filter_by_district(self, district: str) -> list[Member]:
        return self.filter_by("district", district)

    def set_verified(self, member_id: str, verified: bool = True) -> bool:
        with self._lock:
            if self._replace(member_id, {"is_verified": bool(verified)}) is None:
                return False
            self._record_event("verify", member_id, {"is_verified": bool(verified)})
            return True

    def stats(self, *, recent: int = 5) -> dict[str, Any]:
        """Totals, per-division counts and the most recently added members."""
        members = self.read_all()
        by_division = Counter(m.division for m in members)
        return {
            "total": len(members),
            "verified": sum(1 for m in members if m.is_verified),
            "by_division": [{"division": d, "count": n} for d, n in by_division.most_common()],
            "recent_members": list(reversed(members[-recent:])) if recent > 0 else [],
        }
