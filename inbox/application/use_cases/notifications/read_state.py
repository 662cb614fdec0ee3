"""Server-side read-state transitions delegated to the notification store."""

from __future__ import annotations

import logging

from inbox.domain.entities import MarkAllReadRequest, MarkReadRequest
from inbox.infrastructure.stores import NotificationStore

logger = logging.getLogger(__name__)


class MalformedRequestError(ValueError):
    """Raised when a read-state command lacks its identifying fields."""


def validate_mark_read(request: MarkReadRequest) -> None:
    if not request.app_id or not request.repo_uri:
        raise MalformedRequestError("appID and repoURI are required to mark a thread read")
    if request.thread_id < 0:
        raise MalformedRequestError("threadID must be an unsigned integer")


def validate_mark_all_read(request: MarkAllReadRequest) -> None:
    if not request.repo_uri:
        raise MalformedRequestError("repoURI is required to mark a repository read")


def mark_read(store: NotificationStore, request: MarkReadRequest) -> None:
    """Mark one thread read in ``store``.

    Raises :class:`MalformedRequestError` before reaching the store when the
    request is incomplete; store failures propagate as ``StoreError``.
    """

    validate_mark_read(request)
    store.mark_read(request.app_id, request.repo_uri, request.thread_id)
    logger.info(
        "Marked thread %s/%s#%s as read", request.app_id, request.repo_uri, request.thread_id
    )


def mark_all_read(store: NotificationStore, request: MarkAllReadRequest) -> None:
    """Mark every notification of ``request.repo_uri`` read in ``store``."""

    validate_mark_all_read(request)
    store.mark_all_read(request.repo_uri)
    logger.info("Marked all notifications of %s as read", request.repo_uri)


def count_unread(store: NotificationStore) -> int:
    """Return the viewer's unread notification count."""

    return store.count()


__all__ = [
    "MalformedRequestError",
    "count_unread",
    "mark_all_read",
    "mark_read",
    "validate_mark_all_read",
    "validate_mark_read",
]
