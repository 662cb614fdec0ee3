"""Presentation-ready view models consumed by the HTML renderer."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from posixpath import basename

from .notification import ThreadKey


@dataclass
class NotificationView:
    """Display state of a single notification."""

    app_id: str
    repo_uri: str
    thread_id: int
    title: str
    html_url: str
    icon: str
    color_hex: str
    actor_login: str
    actor_avatar_url: str
    updated_at: datetime
    relative_time: str
    absolute_time: str
    participating: bool
    read: bool

    @property
    def thread_key(self) -> ThreadKey:
        return ThreadKey(self.app_id, self.repo_uri, self.thread_id)


@dataclass
class RepoGroupView:
    """Display state of a repository group.

    ``read`` is the group level visual state (dimmed, mark-all affordance
    hidden). It starts as ``not any_unread`` and only ever moves to ``True``.
    """

    repo_uri: str
    repo_url: str
    most_recent_updated_at: datetime
    notifications: list[NotificationView] = field(default_factory=list)
    read: bool = False

    @property
    def any_unread(self) -> bool:
        return any(not notification.read for notification in self.notifications)

    @property
    def repo_name(self) -> str:
        return basename(self.repo_uri.rstrip("/")) or self.repo_uri

    def find(self, key: ThreadKey) -> NotificationView | None:
        """Return the member identified by ``key`` if present."""

        for notification in self.notifications:
            if notification.thread_key == key:
                return notification
        return None


@dataclass(frozen=True)
class InboxPage:
    """Everything the renderer needs to produce the inbox page."""

    groups: list[RepoGroupView]
    include_all: bool = False

    @property
    def is_empty(self) -> bool:
        return not self.groups


__all__ = ["InboxPage", "NotificationView", "RepoGroupView"]
