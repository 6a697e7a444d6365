from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class LeaderContact:
    email: str = ""
    phone: str = ""
    office_address: str = ""


@dataclass
class Leader:
    id: str
    name: str
    position: str
    constituency: str = ""
    district: str = ""
    bio: str = ""
    achievements: list[str] = field(default_factory=list)
    social_media_handles: dict[str, str] = field(default_factory=dict)
    contact_info: LeaderContact = field(default_factory=LeaderContact)
    profile_image: str = ""
    is_active: bool = True
    display_order: int = 0
