"""SQLAlchemy backed notification store."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Query, Session

from inbox.domain.entities import RGB, Actor, ListOptions, Notification
from inbox.infrastructure.models import NotificationModel
from inbox.utils import ensure_aware, ensure_utc_naive, now_utc

from .base import NotificationStore, StoreError

logger = logging.getLogger(__name__)


class SqlNotificationStore(NotificationStore):
    """Persist notifications for ``user_id`` in the ``notification`` table."""

    def __init__(self, session: Session, user_id: int) -> None:
        self.session = session
        self.user_id = user_id

    def list(self, options: ListOptions) -> Sequence[Notification]:
        query = self._base_query()
        if options.repo_uri is not None:
            query = query.filter(NotificationModel.repo_uri == options.repo_uri)
        if not options.include_all:
            query = query.filter(NotificationModel.read_at.is_(None))
        query = query.order_by(NotificationModel.id)
        try:
            models = query.all()
        except SQLAlchemyError as exc:
            raise self._failure("List", exc) from exc
        return [self._to_entity(model) for model in models]

    def count(self) -> int:
        query = (
            self.session.query(func.count(NotificationModel.id))
            .filter(NotificationModel.user_id == self.user_id)
            .filter(NotificationModel.read_at.is_(None))
        )
        try:
            return int(query.scalar() or 0)
        except SQLAlchemyError as exc:
            raise self._failure("Count", exc) from exc

    def mark_read(self, app_id: str, repo_uri: str, thread_id: int) -> None:
        query = (
            self._base_query()
            .filter(NotificationModel.app_id == app_id)
            .filter(NotificationModel.repo_uri == repo_uri)
            .filter(NotificationModel.thread_id == thread_id)
        )
        self._mark(query, "MarkRead")

    def mark_all_read(self, repo_uri: str) -> None:
        query = self._base_query().filter(NotificationModel.repo_uri == repo_uri)
        self._mark(query, "MarkAllRead")

    def save(self, notification: Notification) -> Notification:
        """Insert ``notification`` or refresh the existing thread entry.

        Refreshing a thread brings it back to unread unless the incoming
        record is already marked read.
        """

        model = (
            self._base_query()
            .filter(NotificationModel.app_id == notification.app_id)
            .filter(NotificationModel.repo_uri == notification.repo_uri)
            .filter(NotificationModel.thread_id == notification.thread_id)
            .one_or_none()
        )
        if model is None:
            model = NotificationModel(user_id=self.user_id)
        self._apply_entity_to_model(model, notification)
        try:
            self.session.add(model)
            self.session.commit()
        except SQLAlchemyError as exc:
            self.session.rollback()
            raise self._failure("Save", exc) from exc
        self.session.refresh(model)
        return self._to_entity(model)

    def _base_query(self) -> Query:
        return self.session.query(NotificationModel).filter(
            NotificationModel.user_id == self.user_id
        )

    def _mark(self, query: Query, operation: str) -> None:
        # Only unread rows are touched, so repeated calls are no-ops.
        try:
            updated = query.filter(NotificationModel.read_at.is_(None)).update(
                {NotificationModel.read_at: ensure_utc_naive(now_utc())},
                synchronize_session=False,
            )
            self.session.commit()
        except SQLAlchemyError as exc:
            self.session.rollback()
            raise self._failure(operation, exc) from exc
        logger.debug("%s updated %s rows for user %s", operation, updated, self.user_id)

    @staticmethod
    def _failure(operation: str, exc: SQLAlchemyError) -> StoreError:
        logger.error("%s failed: %s", operation, exc)
        return StoreError(operation, "database error")

    @staticmethod
    def _apply_entity_to_model(model: NotificationModel, notification: Notification) -> None:
        model.app_id = notification.app_id
        model.repo_uri = notification.repo_uri
        model.thread_id = notification.thread_id
        model.repo_url = notification.repo_url
        model.title = notification.title
        model.html_url = notification.html_url
        model.icon = notification.icon
        model.color = notification.color.hex_string()
        model.actor_id = notification.actor.id
        model.actor_login = notification.actor.login
        model.actor_name = notification.actor.name
        model.actor_avatar_url = notification.actor.avatar_url
        model.actor_html_url = notification.actor.html_url
        model.participating = notification.participating
        model.updated_at = ensure_utc_naive(ensure_aware(notification.updated_at))
        if notification.read:
            model.read_at = model.read_at or ensure_utc_naive(now_utc())
        else:
            model.read_at = None

    @staticmethod
    def _to_entity(model: NotificationModel) -> Notification:
        return Notification(
            app_id=model.app_id,
            repo_uri=model.repo_uri,
            thread_id=model.thread_id,
            repo_url=model.repo_url,
            title=model.title,
            html_url=model.html_url,
            icon=model.icon,
            color=RGB.from_hex(model.color),
            actor=Actor(
                id=model.actor_id,
                login=model.actor_login,
                name=model.actor_name,
                avatar_url=model.actor_avatar_url,
                html_url=model.actor_html_url,
            ),
            updated_at=ensure_aware(model.updated_at),
            participating=bool(model.participating),
            read=model.read_at is not None,
        )


__all__ = ["SqlNotificationStore"]
