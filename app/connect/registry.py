from __future__ import annotations

import logging
from dataclasses import dataclass

from flask import Flask, current_app

from app.connect import fixtures
from app.connect.audit import DEFAULT_MAX_EVENTS, AuditTrail
from app.connect.modules.events.service import EventStore
from app.connect.modules.feedback.service import FeedbackStore
from app.connect.modules.leadership.service import LeadershipStore
from app.connect.modules.members.service import MemberStore
from app.connect.modules.notices.service import NoticeStore
from app.connect.modules.photos.service import PhotoStore
from app.connect.modules.reports.service import ReportStore
from app.connect.store import Clock, IdFactory, utc_now, uuid_id_factory

logger = logging.getLogger(__name__)

EXTENSION_KEY = "connect_stores"


@dataclass
class StoreRegistry:
    """
    Every entity store of one application instance.
    Built once per app (or per test) so no store lives at module level.
    """

    members: MemberStore
    events: EventStore
    notices: NoticeStore
    feedback: FeedbackStore
    photos: PhotoStore
    reports: ReportStore
    leadership: LeadershipStore
    audit: AuditTrail
    clock: Clock

    def counts(self) -> dict[str, int]:
        return {
            "members": self.members.count(),
            "events": self.events.count(),
            "notices": self.notices.count(),
            "feedback": self.feedback.count(),
            "photos": self.photos.count(),
            "reports": self.reports.count(),
            "leadership": self.leadership.count(),
        }


def build_registry(
    *,
    clock: Clock | None = None,
    id_factory: IdFactory | None = None,
    seed: bool = True,
    audit_max_events: int = DEFAULT_MAX_EVENTS,
) -> StoreRegistry:
    clock = clock or utc_now
    id_factory = id_factory or uuid_id_factory
    audit = AuditTrail(clock, max_events=audit_max_events)
    kwargs = {"clock": clock, "id_factory": id_factory, "audit": audit}

    registry = StoreRegistry(
        members=MemberStore(fixtures.members() if seed else (), **kwargs),
        events=EventStore(fixtures.events() if seed else (), **kwargs),
        notices=NoticeStore(fixtures.notices() if seed else (), **kwargs),
        feedback=FeedbackStore(fixtures.feedback() if seed else (), **kwargs),
        photos=PhotoStore(fixtures.photos() if seed else (), **kwargs),
        reports=ReportStore(fixtures.reports() if seed else (), **kwargs),
        leadership=LeadershipStore(fixtures.leadership() if seed else (), **kwargs),
        audit=audit,
        clock=clock,
    )
    logger.info("Store registry ready seed=%s counts=%s", seed, registry.counts())
    return registry


def init_stores(app: Flask, registry: StoreRegistry | None = None) -> StoreRegistry:
    if registry is None:
        registry = build_registry(
            seed=bool(app.config.get("SEED_FIXTURES", True)),
            audit_max_events=int(app.config.get("AUDIT_MAX_EVENTS", DEFAULT_MAX_EVENTS)),
        )
    app.extensions[EXTENSION_KEY] = registry
    return registry


def get_stores(app: Flask | None = None) -> StoreRegistry:
    app = app or current_app
    return app.extensions[EXTENSION_KEY]
