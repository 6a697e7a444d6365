from __future__ import annotations

import json
import itertools
import logging
import threading
from collections import deque
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime
from typing import Any

from flask import g, has_request_context, request

logger = logging.getLogger(__name__)

DEFAULT_MAX_EVENTS = 10_000


@dataclass(frozen=True)
class AuditEvent:
    """
    Append-only audit trail event.
    Kept generic; entity_id is a string so any id scheme fits.
    """

    id: int
    created_at: datetime
    action: str  # e.g. "notice.toggle_pin"
    entity_type: str | None = None  # e.g. "Notice"
    entity_id: str | None = None
    request_id: str | None = None
    client_ip: str | None = None
    reason: str | None = None
    metadata_json: str | None = None  # small JSON string


class AuditTrail:
    """In-memory trail holding the newest `max_events` events; ids keep counting past evictions."""

    def __init__(self, clock: Callable[[], datetime], *, max_events: int = DEFAULT_MAX_EVENTS) -> None:
        self._clock = clock
        self._events: deque[AuditEvent] = deque(maxlen=max(1, max_events))
        self._ids = itertools.count(1)
        self._lock = threading.Lock()

    def record(
        self,
        *,
        action: str,
        entity_type: str | None = None,
        entity_id: str | None = None,
        reason: str | None = None,
        metadata: dict[str, Any] | None = None,
        request_id: str | None = None,
    ) -> AuditEvent:
        return record_event(
            self,
            action=action,
            entity_type=entity_type,
            entity_id=entity_id,
            reason=reason,
            metadata=metadata,
            request_id=request_id,
        )

    def append(self, **fields: Any) -> AuditEvent:
        with self._lock:
            ev = AuditEvent(id=next(self._ids), created_at=self._clock(), **fields)
            self._events.append(ev)
        return ev

    def events(self, *, entity_type: str | None = None, entity_id: str | None = None) -> list[AuditEvent]:
        with self._lock:
            out = list(self._events)
        if entity_type:
            out = [e for e in out if e.entity_type == entity_type]
        if entity_id:
            out = [e for e in out if e.entity_id == entity_id]
        return out


def record_event(
    trail: AuditTrail,
    *,
    action: str,
    entity_type: str | None = None,
    entity_id: str | None = None,
    reason: str | None = None,
    metadata: dict[str, Any] | None = None,
    request_id: str | None = None,
) -> AuditEvent:
    """
    Append-only audit event helper.
    """
    in_request = has_request_context()
    rid = request_id or (getattr(g, "request_id", None) if in_request else None)
    ev = trail.append(
        request_id=rid,
        action=action,
        entity_type=entity_type,
        entity_id=entity_id,
        reason=reason,
        metadata_json=json.dumps(metadata, sort_keys=True, ensure_ascii=False, default=str) if metadata else None,
        client_ip=request.remote_addr if in_request else None,
    )
    logger.info("audit action=%s entity=%s:%s request_id=%s", action, entity_type, entity_id, rid)
    return ev
