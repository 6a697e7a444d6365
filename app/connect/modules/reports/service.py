from __future__ import annotations

import hashlib
import logging
from typing import TYPE_CHECKING, Any, BinaryIO

from werkzeug.utils import secure_filename

from app.connect.constants import REPORT_CATEGORIES, REPORT_TYPES
from app.connect.modules.reports.models import Report
from app.connect.store import EntityStore
from app.connect.utils import clean, enum_error, parse_tags

if TYPE_CHECKING:
    from app.connect.storage import Storage

logger = logging.getLogger(__name__)

EXTENSION_TYPES = {
    ".pdf": "pdf",
    ".xls": "excel",
    ".xlsx": "excel",
    ".csv": "excel",
    ".doc": "word",
    ".docx": "word",
}


def validate_report_payload(payload: dict, *, partial: bool = False) -> list[str]:
    """Validate report creation/update payload. Returns list of errors."""
    errors: list[str] = []

    def _given(key: str) -> bool:
        return not partial or key in payload

    for key, label in (
        ("title", "Title"),
        ("author", "Author"),
        ("department", "Department"),
        ("file_name", "File name"),
    ):
        if _given(key) and not clean(payload.get(key)):
            errors.append(f"{label} is required.")
    if _given("category"):
        err = enum_error("category", clean(payload.get("category")), REPORT_CATEGORIES)
        if err:
            errors.append(err)
    if _given("type"):
        err = enum_error("file type", clean(payload.get("type")), REPORT_TYPES)
        if err:
            errors.append(err)
    if "is_public" in payload and not isinstance(payload["is_public"], bool):
        errors.append("is_public must be true or false.")
    return errors


def report_fields_from_payload(payload: dict, *, partial: bool = False) -> dict[str, Any]:
    fields: dict[str, Any] = {}
    for key in ("title", "description", "category", "type", "author", "department", "file_name", "file_size"):
        if not partial or key in payload:
            fields[key] = clean(payload.get(key))
    if not partial or "is_public" in payload:
        fields["is_public"] = bool(payload.get("is_public"))
    if not partial or "tags" in payload:
        fields["tags"] = parse_tags(payload.get("tags"))
    return fields


def format_file_size(size_bytes: int) -> str:
    """Human label in the style of the fixtures: '950 KB', '2.4 MB'."""
    if size_bytes < 1024:
        return f"{size_bytes} B"
    if size_bytes < 1024 * 1024:
        return f"{round(size_bytes / 1024)} KB"
    return f"{size_bytes / (1024 * 1024):.1f} MB"


def report_type_for_filename(filename: str) -> str | None:
    lower = filename.lower()
    for ext, kind in EXTENSION_TYPES.items():
        if lower.endswith(ext):
            return kind
    return None


def build_report_storage_key(report_id: str, filename: str) -> str:
    safe_id = report_id.replace("/", "_").replace("\\", "_")
    safe_filename = secure_filename(filename) or "report.bin"
    return f"reports/{safe_id}/{safe_filename}"


class ReportStore(EntityStore[Report]):
    record_type = Report
    entity_type = "Report"
    id_prefix = "report"
    search_fields = ("title", "description", "author", "department", "tags")
    timestamp_field = "created_at"
    counter_fields = ("download_count",)

    def filter_by_category(self, category: str) -> list[Report]:
        return self.filter_by("category", category)

    def filter_by_department(self, department: str) -> list[Report]:
        return self.filter_by("department", department)

    def get_public_reports(self) -> list[Report]:
        return self.filter_by("is_public", True)

    def departments(self) -> list[str]:
        return sorted({r.department for r in self.read_all() if r.department})

    def category_counts(self) -> dict[str, int]:
        counts = {c: 0 for c in REPORT_CATEGORIES}
        for r in self.read_all():
            counts[r.category] = counts.get(r.category, 0) + 1
        return counts

    def increment_download_count(self, report_id: str) -> bool:
        with self._lock:
            report = self._get(report_id)
            if report is None:
                return False
            self._replace(report_id, {"download_count": report.download_count + 1})
            return True


def upload_report_file(
    store: ReportStore,
    storage: "Storage",
    report_id: str,
    file_bytes: bytes,
    filename: str,
    content_type: str | None = None,
) -> Report | None:
    """Store a report attachment and point the report at it."""
    if store.read_by_id(report_id) is None:
        return None
    storage_key = build_report_storage_key(report_id, filename)
    storage.put_bytes(storage_key, file_bytes, content_type=content_type)

    changes: dict[str, Any] = {
        "file_name": secure_filename(filename) or "report.bin",
        "file_size": format_file_size(len(file_bytes)),
    }
    kind = report_type_for_filename(filename)
    if kind:
        changes["type"] = kind
    logger.info(
        "Report file stored report_id=%s key=%s sha256=%s",
        report_id,
        storage_key,
        hashlib.sha256(file_bytes).hexdigest(),
    )
    return store.update(report_id, changes)


def open_report_file(storage: "Storage", report: Report) -> BinaryIO | None:
    key = build_report_storage_key(report.id, report.file_name)
    if not storage.exists(key):
        return None
    return storage.open(key)
