"""
In-memory entity stores.

Each store owns one ordered collection of dataclass records and is the only
place those records are mutated. Callers always receive copies, so a record
handed to a view can be changed freely without touching the collection.

Every mutation (including read-modify-write helpers such as toggling a flag or
bumping a counter) runs under the store's lock.
"""
from __future__ import annotations

import copy
import dataclasses
import logging
import threading
import uuid
from collections.abc import Callable, Iterable, Mapping
from datetime import datetime, timezone
from typing import TYPE_CHECKING, Any, ClassVar, Generic, TypeVar

if TYPE_CHECKING:
    from app.connect.audit import AuditTrail

logger = logging.getLogger(__name__)

T = TypeVar("T")

Clock = Callable[[], datetime]
IdFactory = Callable[[str], str]


class DuplicateIdError(RuntimeError):
    """Raised when an id factory hands out an id already present in a collection."""


def utc_now() -> datetime:
    """Naive UTC timestamp (fixture data is stored naive)."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def uuid_id_factory(prefix: str) -> str:
    return f"{prefix}_{uuid.uuid4().hex}"


def sequential_id_factory(start: int = 1) -> IdFactory:
    """Deterministic ids (``member_1``, ``member_2``...) for tests and scripts."""
    counter = {"n": start}
    lock = threading.Lock()

    def _next(prefix: str) -> str:
        with lock:
            n = counter["n"]
            counter["n"] = n + 1
        return f"{prefix}_{n}"

    return _next


def _matches(value: Any, needle: str) -> bool:
    if value is None:
        return False
    if isinstance(value, str):
        return needle in value.lower()
    if isinstance(value, (list, tuple, set, frozenset)):
        return any(_matches(v, needle) for v in value)
    return needle in str(value).lower()


class EntityStore(Generic[T]):
    record_type: ClassVar[type]
    entity_type: ClassVar[str] = "Entity"
    id_prefix: ClassVar[str] = "entity"
    search_fields: ClassVar[tuple[str, ...]] = ()
    # Store-assigned creation timestamp, e.g. "created_at".
    timestamp_field: ClassVar[str | None] = None
    # Only adjusted through dedicated operations.
    counter_fields: ClassVar[tuple[str, ...]] = ()
    # Collections owned by dedicated operations (attendee lists, reader sets).
    managed_fields: ClassVar[tuple[str, ...]] = ()

    def __init__(
        self,
        records: Iterable[T] = (),
        *,
        clock: Clock | None = None,
        id_factory: IdFactory | None = None,
        audit: AuditTrail | None = None,
    ) -> None:
        self._clock: Clock = clock or utc_now
        self._id_factory: IdFactory = id_factory or uuid_id_factory
        self._audit = audit
        self._lock = threading.RLock()
        self._records: list[T] = []
        self._ids: set[str] = set()
        for record in records:
            self._append(copy.deepcopy(record))

    # ---------- internals ----------
    def _append(self, record: T) -> None:
        record_id = record.id  # type: ignore[attr-defined]
        if record_id in self._ids:
            raise DuplicateIdError(f"{self.entity_type} id already in use: {record_id}")
        self._records.append(record)
        self._ids.add(record_id)

    def _index(self, record_id: str) -> int | None:
        for i, record in enumerate(self._records):
            if record.id == record_id:  # type: ignore[attr-defined]
                return i
        return None

    def _get(self, record_id: str) -> T | None:
        i = self._index(record_id)
        return self._records[i] if i is not None else None

    def _replace(self, record_id: str, changes: Mapping[str, Any]) -> T | None:
        """Write ``changes`` without any field guarding. Caller must hold the lock."""
        i = self._index(record_id)
        if i is None:
            return None
        self._records[i] = dataclasses.replace(self._records[i], **changes)
        return self._records[i]

    def _now(self) -> datetime:
        return self._clock()

    @property
    def protected_fields(self) -> frozenset[str]:
        fields = {"id", *self.counter_fields, *self.managed_fields}
        if self.timestamp_field:
            fields.add(self.timestamp_field)
        return frozenset(fields)

    def creation_defaults(self) -> dict[str, Any]:
        """Values the store forces on every new record (override per entity)."""
        return {}

    def fallback_values(self, now: datetime) -> dict[str, Any]:
        """Values used only when the caller leaves a field out."""
        return {}

    def _record_event(self, action: str, record_id: str | None, metadata: dict[str, Any] | None = None) -> None:
        if self._audit is not None:
            self._audit.record(
                action=f"{self.id_prefix}.{action}",
                entity_type=self.entity_type,
                entity_id=record_id,
                metadata=metadata,
            )

    @staticmethod
    def _snapshot(record: T | None) -> T | None:
        return copy.deepcopy(record) if record is not None else None

    # ---------- CRUD ----------
    def create(self, data: Mapping[str, Any]) -> T:
        defaults = self.creation_defaults()
        skipped = self.protected_fields | set(defaults)
        ignored = sorted(k for k in data if k in skipped)
        if ignored:
            logger.debug("%s.create ignoring store-assigned fields: %s", self.entity_type, ", ".join(ignored))
        fields = {k: copy.deepcopy(v) for k, v in data.items() if k not in skipped}

        with self._lock:
            now = self._now()
            record_id = self._id_factory(self.id_prefix)
            assigned: dict[str, Any] = {"id": record_id, **defaults}
            for counter in self.counter_fields:
                assigned.setdefault(counter, 0)
            if self.timestamp_field:
                assigned[self.timestamp_field] = now
            for key, value in self.fallback_values(now).items():
                if fields.get(key) is None and key not in assigned:
                    fields[key] = value
            record = self.record_type(**fields, **assigned)
            self._append(record)
            logger.debug("%s created id=%s", self.entity_type, record_id)
            self._record_event("create", record_id)
            return self._snapshot(record)  # type: ignore[return-value]

    def read_all(self) -> list[T]:
        with self._lock:
            return copy.deepcopy(self._records)

    def read_by_id(self, record_id: str) -> T | None:
        with self._lock:
            return self._snapshot(self._get(record_id))

    def update(self, record_id: str, partial: Mapping[str, Any]) -> T | None:
        ignored = sorted(k for k in partial if k in self.protected_fields)
        if ignored:
            logger.debug("%s.update id=%s ignoring protected fields: %s", self.entity_type, record_id, ", ".join(ignored))
        changes = {k: copy.deepcopy(v) for k, v in partial.items() if k not in self.protected_fields}

        with self._lock:
            record = self._replace(record_id, changes)
            if record is None:
                return None
            self._record_event("edit", record_id, {"fields": sorted(changes)})
            return self._snapshot(record)

    def delete(self, record_id: str) -> bool:
        with self._lock:
            i = self._index(record_id)
            if i is None:
                return False
            del self._records[i]
            # ids stay reserved so a deleted id is never handed out again
            self._record_event("delete", record_id)
            return True

    def count(self) -> int:
        with self._lock:
            return len(self._records)

    # ---------- search / filter ----------
    def search(self, query: str) -> list[T]:
        needle = (query or "").lower()
        with self._lock:
            return [
                copy.deepcopy(r)
                for r in self._records
                if not needle or any(_matches(getattr(r, f), needle) for f in self.search_fields)
            ]

    def filter_by(self, field: str, value: Any) -> list[T]:
        with self._lock:
            return [copy.deepcopy(r) for r in self._records if getattr(r, field) == value]

    def filter(self, predicate: Callable[[T], bool]) -> list[T]:
        with self._lock:
            return [copy.deepcopy(r) for r in self._records if predicate(r)]

    def query(self, search: str | None = None, **filters: Any) -> list[T]:
        """Search followed by exact-match filters. ``None``, ``""`` and ``"all"`` disable a filter."""
        active = {k: v for k, v in filters.items() if v not in (None, "", "all")}
        needle = (search or "").strip().lower()

        def _keep(r: T) -> bool:
            if needle and not any(_matches(getattr(r, f), needle) for f in self.search_fields):
                return False
            return all(getattr(r, k) == v for k, v in active.items())

        return self.filter(_keep)
