"""Decode notifications received from the remote JSON API."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Mapping

from inbox.domain.entities import RGB, Actor, Notification


def deserialize_notification(payload: Mapping[str, Any]) -> Notification:
    """Build a :class:`Notification` from its JSON representation.

    Raises ``KeyError``, ``TypeError`` or ``ValueError`` on malformed input.
    """

    actor = payload.get("actor") or {}
    raw_updated_at = payload.get("updated_at")
    return Notification(
        app_id=str(payload["app_id"]),
        repo_uri=str(payload["repo_uri"]),
        thread_id=int(payload["thread_id"]),
        repo_url=str(payload.get("repo_url") or ""),
        title=str(payload.get("title") or ""),
        html_url=str(payload.get("html_url") or ""),
        icon=str(payload.get("icon") or ""),
        color=RGB.from_hex(payload.get("color") or "#000000"),
        actor=Actor(
            id=int(actor.get("id") or 0),
            login=str(actor.get("login") or ""),
            name=str(actor.get("name") or ""),
            avatar_url=str(actor.get("avatar_url") or ""),
            html_url=str(actor.get("html_url") or ""),
        ),
        updated_at=datetime.fromisoformat(raw_updated_at) if raw_updated_at else None,
        participating=bool(payload.get("participating", False)),
        read=bool(payload.get("read", False)),
    )


__all__ = ["deserialize_notification"]
