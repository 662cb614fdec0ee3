"""Domain entities exposed by the application."""

from .notification import RGB, Actor, Notification, ThreadKey
from .notification_view import InboxPage, NotificationView, RepoGroupView
from .read_state import ListOptions, MarkAllReadRequest, MarkReadRequest
from .repo_group import RepoGroup
from .viewer import Viewer

__all__ = [
    "Actor",
    "InboxPage",
    "ListOptions",
    "MarkAllReadRequest",
    "MarkReadRequest",
    "Notification",
    "NotificationView",
    "RGB",
    "RepoGroup",
    "RepoGroupView",
    "ThreadKey",
    "Viewer",
]
