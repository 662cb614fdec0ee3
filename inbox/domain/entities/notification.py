"""Domain entities describing a single notification."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class RGB:
    """Color used to tint the notification icon."""

    r: int
    g: int
    b: int

    def hex_string(self) -> str:
        """Return the color in ``#rrggbb`` notation."""

        return f"#{self.r:02x}{self.g:02x}{self.b:02x}"

    @classmethod
    def from_hex(cls, value: str) -> "RGB":
        """Parse ``#rrggbb`` (the leading ``#`` is optional)."""

        digits = value.strip().lstrip("#")
        if len(digits) != 6:
            raise ValueError(f"Invalid color value: {value!r}")
        return cls(int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))


@dataclass(frozen=True)
class Actor:
    """User that caused the most recent activity on a thread."""

    id: int
    login: str
    name: str = ""
    avatar_url: str = ""
    html_url: str = ""


@dataclass(frozen=True)
class ThreadKey:
    """Identify a thread inside a repository for a given application."""

    app_id: str
    repo_uri: str
    thread_id: int

    def is_empty(self) -> bool:
        """Return ``True`` when no identifying field is set."""

        return not self.app_id and not self.repo_uri and self.thread_id == 0


@dataclass(frozen=True)
class Notification:
    """Activity on a thread directed at the viewing user."""

    app_id: str
    repo_uri: str
    thread_id: int
    repo_url: str
    title: str
    html_url: str
    icon: str
    color: RGB
    actor: Actor
    updated_at: datetime | None
    participating: bool = False
    read: bool = False

    @property
    def thread_key(self) -> ThreadKey:
        return ThreadKey(self.app_id, self.repo_uri, self.thread_id)


__all__ = ["Actor", "Notification", "RGB", "ThreadKey"]
