from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date


@dataclass
class ContactInfo:
    email: str = ""
    address: str = ""
    emergency_contact: str = ""


@dataclass
class Member:
    id: str
    full_name: str
    phone: str
    constituency: str
    district: str
    division: str
    designation: str = ""
    achievements: str = ""
    # platform name -> handle; platforms without a handle are simply absent
    social_media_handles: dict[str, str] = field(default_factory=dict)
    is_verified: bool = False
    membership_date: date | None = None
    profile_image: str | None = None
    contact_info: ContactInfo = field(default_factory=ContactInfo)
