from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime


@dataclass
class Report:
    id: str
    title: str
    description: str
    category: str  # monthly | quarterly | annual | event | financial | performance
    type: str  # pdf | excel | word
    author: str
    department: str
    file_name: str
    file_size: str = ""  # display label, e.g. "2.4 MB"
    is_public: bool = False
    tags: list[str] = field(default_factory=list)
    created_at: datetime | None = None
    download_count: int = 0
