"""Domain entity bundling the notifications of one repository."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from .notification import Notification


@dataclass(frozen=True)
class RepoGroup:
    """Notifications sharing ``repo_uri``, most recent first.

    Built fresh on every render pass and never persisted.
    ``most_recent_updated_at`` is the maximum ``updated_at`` of the members.
    """

    repo_uri: str
    repo_url: str
    notifications: tuple[Notification, ...]
    most_recent_updated_at: datetime


__all__ = ["RepoGroup"]
