"""Notification store implementations."""

from .base import NotificationStore, StoreError
from .http import HttpNotificationStore
from .memory import InMemoryNotificationStore
from .sql import SqlNotificationStore
from .wire import deserialize_notification

__all__ = [
    "HttpNotificationStore",
    "InMemoryNotificationStore",
    "NotificationStore",
    "SqlNotificationStore",
    "StoreError",
    "deserialize_notification",
]
