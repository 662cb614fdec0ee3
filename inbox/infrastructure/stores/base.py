"""Abstract notification store consumed by the inbox."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence

from inbox.domain.entities import ListOptions, Notification


class StoreError(Exception):
    """Raised when the notification store cannot complete an operation."""

    def __init__(self, operation: str, message: str) -> None:
        super().__init__(f"{operation}: {message}")
        self.operation = operation


class NotificationStore(ABC):
    """Capability interface implemented by every notification backend.

    Instances are bound to a single viewer. Mark operations must be idempotent:
    marking something that is already read is a successful no-op.
    """

    @abstractmethod
    def list(self, options: ListOptions) -> Sequence[Notification]:
        """Return the viewer's notifications matching ``options``."""

    @abstractmethod
    def count(self) -> int:
        """Return the number of unread notifications."""

    @abstractmethod
    def mark_read(self, app_id: str, repo_uri: str, thread_id: int) -> None:
        """Mark the thread ``(app_id, repo_uri, thread_id)`` as read."""

    @abstractmethod
    def mark_all_read(self, repo_uri: str) -> None:
        """Mark every notification of ``repo_uri`` as read."""


__all__ = ["NotificationStore", "StoreError"]
