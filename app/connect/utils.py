from __future__ import annotations

import dataclasses
import re
from datetime import date, datetime, timezone
from typing import Any

EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


def clean(value: Any) -> str:
    """Form/JSON text value stripped, with None mapped to ''."""
    if value is None:
        return ""
    return str(value).strip()


def clean_or_none(value: Any) -> str | None:
    return clean(value) or None


def parse_datetime(value: Any) -> datetime | None:
    """Accept datetimes or ISO strings; offsets (including a trailing Z) are converted to naive UTC."""
    if value is None:
        return None
    if isinstance(value, datetime):
        dt = value
    else:
        s = clean(value)
        if not s:
            return None
        if s.endswith("Z"):
            s = s[:-1] + "+00:00"
        dt = datetime.fromisoformat(s)
    if dt.tzinfo is None:
        return dt
    return dt.astimezone(timezone.utc).replace(tzinfo=None)


def parse_date(value: Any) -> date | None:
    """Parse YYYY-MM-DD date string."""
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    s = clean(value)
    if not s:
        return None
    return date.fromisoformat(s[:10])


def is_valid_datetime(value: Any) -> bool:
    try:
        return parse_datetime(value) is not None
    except (TypeError, ValueError):
        return False


def parse_tags(value: Any) -> list[str]:
    """Tags from a list or a comma separated string; blanks and repeats dropped, order kept."""
    if value is None:
        return []
    items = value.split(",") if isinstance(value, str) else list(value)
    out: list[str] = []
    for item in items:
        tag = clean(item)
        if tag and tag not in out:
            out.append(tag)
    return out


def parse_int(value: Any, default: int | None = None) -> int | None:
    if value is None or value == "":
        return default
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


def jsonable(value: Any) -> Any:
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {f.name: jsonable(getattr(value, f.name)) for f in dataclasses.fields(value)}
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if isinstance(value, dict):
        return {k: jsonable(v) for k, v in value.items()}
    if isinstance(value, (list, tuple, set, frozenset)):
        return [jsonable(v) for v in value]
    return value


def paginate(items: list, page: int | None, per_page: int | None, *, max_per_page: int = 100) -> tuple[list, dict]:
    page = max(page or 1, 1)
    per_page = min(max(per_page or 20, 1), max_per_page)
    total = len(items)
    start = (page - 1) * per_page
    return items[start : start + per_page], {"page": page, "per_page": per_page, "total": total}


def enum_error(label: str, value: Any, allowed: tuple[str, ...]) -> str | None:
    if value not in allowed:
        return f"Invalid {label}. Must be one of: {', '.join(allowed)}"
    return None
