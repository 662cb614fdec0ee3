"""Project repository groups into view models for the HTML renderer."""

from __future__ import annotations

from collections.abc import Collection, Iterable
from datetime import datetime, tzinfo

from inbox.domain.entities import (
    Notification,
    NotificationView,
    RepoGroup,
    RepoGroupView,
    ThreadKey,
)
from inbox.utils import ensure_aware, format_absolute, now_utc, relative_time


def project_notification(
    notification: Notification,
    *,
    read_set: Collection[ThreadKey] = (),
    now: datetime,
    tz: tzinfo | None = None,
) -> NotificationView:
    """Return the display state for ``notification``."""

    updated_at = ensure_aware(notification.updated_at)
    return NotificationView(
        app_id=notification.app_id,
        repo_uri=notification.repo_uri,
        thread_id=notification.thread_id,
        title=notification.title,
        html_url=notification.html_url,
        icon=notification.icon,
        color_hex=notification.color.hex_string(),
        actor_login=notification.actor.login,
        actor_avatar_url=notification.actor.avatar_url,
        updated_at=updated_at,
        relative_time=relative_time(updated_at, now),
        absolute_time=format_absolute(updated_at, tz),
        participating=notification.participating,
        read=notification.read or notification.thread_key in read_set,
    )


def project_groups(
    groups: Iterable[RepoGroup],
    read_set: Collection[ThreadKey] = (),
    *,
    now: datetime | None = None,
    tz: tzinfo | None = None,
) -> list[RepoGroupView]:
    """Map ``groups`` to :class:`RepoGroupView` objects, keeping their order.

    ``read_set`` holds threads the viewer already marked read locally. Relative
    time labels are computed against ``now`` (the current time by default) and
    are never cached.
    """

    reference = now or now_utc()
    views: list[RepoGroupView] = []
    for group in groups:
        members = [
            project_notification(notification, read_set=read_set, now=reference, tz=tz)
            for notification in group.notifications
        ]
        view = RepoGroupView(
            repo_uri=group.repo_uri,
            repo_url=group.repo_url,
            most_recent_updated_at=group.most_recent_updated_at,
            notifications=members,
        )
        view.read = not view.any_unread
        views.append(view)
    return views


__all__ = ["project_groups", "project_notification"]
