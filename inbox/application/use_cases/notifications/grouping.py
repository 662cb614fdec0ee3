"""Group a flat notification stream by repository, most recent first."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from inbox.domain.entities import ListOptions, Notification, RepoGroup
from inbox.infrastructure.stores import NotificationStore
from inbox.utils import ensure_aware

logger = logging.getLogger(__name__)


def _updated_at(notification: Notification):
    return ensure_aware(notification.updated_at)


def group_notifications(notifications: Iterable[Notification]) -> list[RepoGroup]:
    """Partition ``notifications`` by ``repo_uri`` and order them by recency.

    Members are sorted by ``updated_at`` descending and groups by their most
    recent member. Both sorts are stable, so equal timestamps keep the order in
    which they appeared in the input. Missing timestamps sort as the oldest.
    """

    buckets: dict[str, list[Notification]] = {}
    repo_urls: dict[str, str] = {}
    for notification in notifications:
        bucket = buckets.get(notification.repo_uri)
        if bucket is None:
            bucket = buckets[notification.repo_uri] = []
            repo_urls[notification.repo_uri] = notification.repo_url
        bucket.append(notification)

    groups: list[RepoGroup] = []
    for repo_uri, members in buckets.items():
        ordered = sorted(members, key=_updated_at, reverse=True)
        groups.append(
            RepoGroup(
                repo_uri=repo_uri,
                repo_url=repo_urls[repo_uri],
                notifications=tuple(ordered),
                most_recent_updated_at=_updated_at(ordered[0]),
            )
        )
    groups.sort(key=lambda group: group.most_recent_updated_at, reverse=True)
    return groups


def fetch_repo_groups(store: NotificationStore, options: ListOptions) -> list[RepoGroup]:
    """List the viewer's notifications and group them for display.

    A failing store propagates :class:`~inbox.infrastructure.stores.StoreError`;
    no partial result is produced.
    """

    notifications = store.list(options)
    groups = group_notifications(notifications)
    logger.debug(
        "Grouped %s notifications into %s repositories", len(notifications), len(groups)
    )
    return groups


__all__ = ["fetch_repo_groups", "group_notifications"]
