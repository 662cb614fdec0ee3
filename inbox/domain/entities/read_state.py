"""Commands and filters exchanged with the notification store."""

from __future__ import annotations

from dataclasses import dataclass

from .notification import ThreadKey


@dataclass(frozen=True)
class ListOptions:
    """Filter applied when listing notifications."""

    repo_uri: str | None = None
    include_all: bool = False


@dataclass(frozen=True)
class MarkReadRequest:
    """Mark a single thread as read."""

    app_id: str
    repo_uri: str
    thread_id: int

    @property
    def thread_key(self) -> ThreadKey:
        return ThreadKey(self.app_id, self.repo_uri, self.thread_id)


@dataclass(frozen=True)
class MarkAllReadRequest:
    """Mark every notification of a repository as read."""

    repo_uri: str


__all__ = ["ListOptions", "MarkAllReadRequest", "MarkReadRequest"]
