"""Pydantic models describing notification payloads."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from inbox.domain.entities import MarkAllReadRequest, MarkReadRequest, Notification
from inbox.utils import EPOCH_MIN


class MarkReadPayload(BaseModel):
    """Body sent by the inbox page to mark one notification as read."""

    model_config = ConfigDict(populate_by_name=True)

    app_id: str = Field(default="", alias="appID", description="Application identifier")
    repo_uri: str = Field(default="", alias="repoURI", description="Repository URI")
    thread_id: int = Field(default=0, alias="threadID", ge=0, description="Thread identifier")

    def to_request(self) -> MarkReadRequest:
        return MarkReadRequest(self.app_id.strip(), self.repo_uri.strip(), self.thread_id)


class MarkAllReadPayload(BaseModel):
    """Body sent by the inbox page to mark a whole repository as read."""

    model_config = ConfigDict(populate_by_name=True)

    repo_uri: str = Field(default="", alias="repoURI", description="Repository URI")

    def to_request(self) -> MarkAllReadRequest:
        return MarkAllReadRequest(self.repo_uri.strip())


class ActorRead(BaseModel):
    """User that produced the latest activity on a thread."""

    id: int
    login: str
    name: str = ""
    avatar_url: str = ""
    html_url: str = ""


class NotificationRead(BaseModel):
    """Representation of a notification returned by the JSON API."""

    app_id: str
    repo_uri: str
    thread_id: int
    repo_url: str
    title: str
    html_url: str
    icon: str
    color: str
    actor: ActorRead
    updated_at: datetime | None = None
    participating: bool = False
    read: bool = False

    @classmethod
    def from_entity(cls, notification: Notification) -> "NotificationRead":
        updated_at = notification.updated_at
        return cls(
            app_id=notification.app_id,
            repo_uri=notification.repo_uri,
            thread_id=notification.thread_id,
            repo_url=notification.repo_url,
            title=notification.title,
            html_url=notification.html_url,
            icon=notification.icon,
            color=notification.color.hex_string(),
            actor=ActorRead(
                id=notification.actor.id,
                login=notification.actor.login,
                name=notification.actor.name,
                avatar_url=notification.actor.avatar_url,
                html_url=notification.actor.html_url,
            ),
            updated_at=None if updated_at == EPOCH_MIN else updated_at,
            participating=notification.participating,
            read=notification.read,
        )


__all__ = ["ActorRead", "MarkAllReadPayload", "MarkReadPayload", "NotificationRead"]
