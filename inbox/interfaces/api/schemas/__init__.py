from .notification import (
    ActorRead,
    MarkAllReadPayload,
    MarkReadPayload,
    NotificationRead,
)

__all__ = [
    "ActorRead",
    "MarkAllReadPayload",
    "MarkReadPayload",
    "NotificationRead",
]
