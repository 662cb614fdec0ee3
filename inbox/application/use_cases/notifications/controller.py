"""Client-side read-state controller for an already rendered inbox.

The controller owns the view models of one rendered page. User actions run
the store mutation in a worker thread so the event loop never blocks, and the
visible "read" state is applied only once the store confirmed the change.
The only exception is the soft mark-read, where read-state is handled by an
external actor and only the local view flips.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Iterable
from functools import partial

from anyio import to_thread

from inbox.domain.entities import (
    InboxPage,
    MarkAllReadRequest,
    MarkReadRequest,
    NotificationView,
    RepoGroupView,
    ThreadKey,
)
from inbox.infrastructure.stores import NotificationStore, StoreError

from .read_state import MalformedRequestError, mark_all_read, mark_read

logger = logging.getLogger(__name__)


class InboxState:
    """Mutable presentation state of the groups currently on screen."""

    def __init__(self, groups: Iterable[RepoGroupView] = (), *, include_all: bool = False) -> None:
        self.include_all = include_all
        self.read_set: set[ThreadKey] = set()
        self._groups: dict[str, RepoGroupView] = {}
        self.replace(groups)

    @property
    def groups(self) -> list[RepoGroupView]:
        return list(self._groups.values())

    def page(self) -> InboxPage:
        return InboxPage(groups=self.groups, include_all=self.include_all)

    def replace(self, groups: Iterable[RepoGroupView]) -> None:
        """Swap the rendered groups, e.g. after navigating or reloading."""

        self._groups = {group.repo_uri: group for group in groups}

    def group(self, repo_uri: str) -> RepoGroupView | None:
        return self._groups.get(repo_uri)

    def locate(self, key: ThreadKey) -> tuple[RepoGroupView, NotificationView] | None:
        """Return the group and notification rendered for ``key``."""

        group = self._groups.get(key.repo_uri)
        if group is None:
            return None
        notification = group.find(key)
        if notification is None:
            return None
        return group, notification

    def apply_read(self, key: ThreadKey, *, roll_up: bool = True) -> bool:
        """Flip ``key`` to read; return ``False`` when it is no longer rendered.

        With ``roll_up`` the owning group becomes read once none of its members
        is unread. The group state is derived from the members at this moment,
        so a concurrent mark-all-read can never be undone.
        """

        located = self.locate(key)
        if located is None:
            return False
        group, notification = located
        notification.read = True
        self.read_set.add(key)
        if roll_up and not group.any_unread:
            group.read = True
        return True

    def apply_all_read(self, repo_uri: str) -> bool:
        """Flip every member of ``repo_uri`` and the group itself to read."""

        group = self._groups.get(repo_uri)
        if group is None:
            return False
        for notification in group.notifications:
            notification.read = True
            self.read_set.add(notification.thread_key)
        group.read = True
        return True


class ReadStateController:
    """Drive mark-read / mark-all-read from user interactions."""

    def __init__(self, store: NotificationStore, state: InboxState) -> None:
        self._store = store
        self.state = state
        self._pending: set[asyncio.Task[bool]] = set()

    async def mark_read(self, target: ThreadKey, request: MarkReadRequest | None = None) -> bool:
        """Mark the notification rendered for ``target`` as read.

        ``request`` identifies the thread in the store and defaults to
        ``target``. A request whose fields are all empty is a soft mark: no
        store call is made and only ``target`` flips, without rolling up to the
        group. Returns ``False`` when the target disappeared meanwhile.
        Store failures leave the state untouched and are re-raised.
        """

        if request is None:
            request = MarkReadRequest(target.app_id, target.repo_uri, target.thread_id)
        if request.thread_key.is_empty():
            return self.state.apply_read(target, roll_up=False)

        try:
            await to_thread.run_sync(partial(mark_read, self._store, request))
        except (StoreError, MalformedRequestError) as exc:
            logger.warning("MarkRead: %s", exc)
            raise
        applied = self.state.apply_read(target, roll_up=True)
        if not applied:
            logger.debug("MarkRead: %s is no longer rendered; discarding", target)
        return applied

    async def mark_all_read(self, repo_uri: str) -> bool:
        """Mark every notification in ``repo_uri`` read once the store agrees."""

        request = MarkAllReadRequest(repo_uri)
        try:
            await to_thread.run_sync(partial(mark_all_read, self._store, request))
        except (StoreError, MalformedRequestError) as exc:
            logger.warning("MarkAllRead: %s", exc)
            raise
        applied = self.state.apply_all_read(repo_uri)
        if not applied:
            logger.debug("MarkAllRead: %s is no longer rendered; discarding", repo_uri)
        return applied

    def schedule_mark_read(
        self, target: ThreadKey, request: MarkReadRequest | None = None
    ) -> asyncio.Task[bool]:
        """Start :meth:`mark_read` in the background; failures are only logged."""

        return self._schedule(self.mark_read(target, request))

    def schedule_mark_all_read(self, repo_uri: str) -> asyncio.Task[bool]:
        """Start :meth:`mark_all_read` in the background; failures are only logged."""

        return self._schedule(self.mark_all_read(repo_uri))

    async def wait_pending(self) -> None:
        """Wait for every scheduled action to finish."""

        if self._pending:
            await asyncio.gather(*list(self._pending))

    def _schedule(self, action) -> asyncio.Task[bool]:
        task = asyncio.get_running_loop().create_task(self._swallow_failure(action))
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)
        return task

    @staticmethod
    async def _swallow_failure(action) -> bool:
        # Logged by the action itself.
        try:
            return await action
        except (StoreError, MalformedRequestError):
            return False


__all__ = ["InboxState", "ReadStateController"]
