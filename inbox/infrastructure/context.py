"""Explicit application context shared by every request handler."""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field

from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from inbox.config import Settings
from inbox.domain.entities import Viewer
from inbox.infrastructure.database import (
    build_engine,
    build_session_factory,
    initialize_database,
)
from inbox.infrastructure.rendering import InboxRenderer
from inbox.infrastructure.stores import (
    HttpNotificationStore,
    InMemoryNotificationStore,
    NotificationStore,
    SqlNotificationStore,
)
from inbox.utils import resolve_timezone

logger = logging.getLogger(__name__)


@dataclass
class AppContext:
    """Services built once at startup and handed to every handler.

    Stores are created per request and bound to the authenticated viewer.
    """

    settings: Settings
    engine: Engine | None
    session_factory: sessionmaker[Session] | None
    renderer: InboxRenderer
    _memory_stores: dict[int, InMemoryNotificationStore] = field(default_factory=dict)
    _memory_lock: threading.Lock = field(default_factory=threading.Lock)

    @classmethod
    def from_settings(cls, settings: Settings) -> "AppContext":
        engine = None
        session_factory = None
        if settings.notification_store == "database":
            engine = build_engine(settings.database_url)
            session_factory = build_session_factory(engine)
        renderer = InboxRenderer(
            base_uri=settings.base_uri,
            head_pre=settings.head_pre,
            body_pre=settings.body_pre,
        )
        logger.info("Using the %s notification store", settings.notification_store)
        return cls(
            settings=settings,
            engine=engine,
            session_factory=session_factory,
            renderer=renderer,
        )

    @property
    def timezone(self):
        return resolve_timezone(self.settings.app_timezone)

    def startup(self) -> None:
        if self.engine is not None:
            initialize_database(self.engine)

    def shutdown(self) -> None:
        if self.engine is not None:
            self.engine.dispose()

    def open_session(self) -> Session | None:
        return self.session_factory() if self.session_factory is not None else None

    def memory_store(self, viewer_id: int) -> InMemoryNotificationStore:
        with self._memory_lock:
            store = self._memory_stores.get(viewer_id)
            if store is None:
                store = self._memory_stores[viewer_id] = InMemoryNotificationStore()
            return store

    def store_for(
        self, viewer: Viewer, *, session: Session | None, access_token: str | None
    ) -> NotificationStore:
        """Return the configured store bound to ``viewer``."""

        backend = self.settings.notification_store
        if backend == "database":
            if session is None:
                raise RuntimeError("A database session is required for the database store")
            return SqlNotificationStore(session, viewer.id)
        if backend == "http":
            return HttpNotificationStore(
                self.settings.store_base_url or "",
                access_token=access_token,
                timeout=self.settings.store_timeout_seconds,
            )
        return self.memory_store(viewer.id)


__all__ = ["AppContext"]
