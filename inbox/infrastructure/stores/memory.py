"""In-process notification store for development and tests."""

from __future__ import annotations

import threading
from collections.abc import Iterable, Sequence
from dataclasses import replace

from inbox.domain.entities import ListOptions, Notification, ThreadKey

from .base import NotificationStore

MAX_RECORDED_CALLS = 1000


class InMemoryNotificationStore(NotificationStore):
    """Keep one viewer's notifications in a dictionary guarded by a lock.

    The most recent ``max_calls`` mutation calls are kept in :attr:`calls` as
    ``(operation, arguments)`` so callers can assert what reached the store.
    """

    def __init__(
        self, notifications: Iterable[Notification] = (), *, max_calls: int = MAX_RECORDED_CALLS
    ) -> None:
        self._lock = threading.Lock()
        self._notifications: dict[ThreadKey, Notification] = {}
        self.max_calls = max_calls
        self.calls: list[tuple[str, tuple]] = []
        for notification in notifications:
            self.add(notification)

    def add(self, notification: Notification) -> None:
        with self._lock:
            self._notifications[notification.thread_key] = notification

    def list(self, options: ListOptions) -> Sequence[Notification]:
        with self._lock:
            items = list(self._notifications.values())
        return [
            notification
            for notification in items
            if (options.repo_uri is None or notification.repo_uri == options.repo_uri)
            and (options.include_all or not notification.read)
        ]

    def count(self) -> int:
        with self._lock:
            return sum(1 for n in self._notifications.values() if not n.read)

    def mark_read(self, app_id: str, repo_uri: str, thread_id: int) -> None:
        key = ThreadKey(app_id, repo_uri, thread_id)
        with self._lock:
            self._record("MarkRead", (app_id, repo_uri, thread_id))
            notification = self._notifications.get(key)
            if notification is not None and not notification.read:
                self._notifications[key] = replace(notification, read=True)

    def mark_all_read(self, repo_uri: str) -> None:
        with self._lock:
            self._record("MarkAllRead", (repo_uri,))
            for key, notification in list(self._notifications.items()):
                if notification.repo_uri == repo_uri and not notification.read:
                    self._notifications[key] = replace(notification, read=True)

    def _record(self, operation: str, arguments: tuple) -> None:
        # Caller holds the lock.
        self.calls.append((operation, arguments))
        if len(self.calls) > self.max_calls:
            del self.calls[: len(self.calls) - self.max_calls]


__all__ = ["MAX_RECORDED_CALLS", "InMemoryNotificationStore"]
