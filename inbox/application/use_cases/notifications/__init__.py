"""Use cases for listing, rendering and changing the read state of notifications."""

from .controller import InboxState, ReadStateController
from .grouping import fetch_repo_groups, group_notifications
from .projection import project_groups, project_notification
from .read_state import (
    MalformedRequestError,
    count_unread,
    mark_all_read,
    mark_read,
)

__all__ = [
    "InboxState",
    "MalformedRequestError",
    "ReadStateController",
    "count_unread",
    "fetch_repo_groups",
    "group_notifications",
    "mark_all_read",
    "mark_read",
    "project_groups",
    "project_notification",
]
