"""Tests for the client-side read-state controller."""

from __future__ import annotations

import asyncio
import threading

import pytest

from helpers import NOW, build_notification, hours_ago
from inbox.application.use_cases.notifications import (
    InboxState,
    MalformedRequestError,
    ReadStateController,
    group_notifications,
    project_groups,
)
from inbox.domain.entities import MarkReadRequest, ThreadKey
from inbox.infrastructure.stores import InMemoryNotificationStore, StoreError


class FailingStore(InMemoryNotificationStore):
    """Store whose mutations always fail."""

    def mark_read(self, app_id, repo_uri, thread_id):
        raise StoreError("MarkRead", "simulated failure")

    def mark_all_read(self, repo_uri):
        raise StoreError("MarkAllRead", "simulated failure")


def _notifications():
    return [
        build_notification("A", 1, updated_at=hours_ago(3)),
        build_notification("A", 2, updated_at=hours_ago(1)),
        build_notification("B", 3, updated_at=hours_ago(2)),
    ]


def _controller(store) -> ReadStateController:
    views = project_groups(group_notifications(_notifications()), now=NOW)
    return ReadStateController(store, InboxState(views))


def _key(repo: str, thread_id: int) -> ThreadKey:
    return ThreadKey("Issue", repo, thread_id)


def _read_flags(controller: ReadStateController) -> dict[int, bool]:
    return {
        n.thread_id: n.read for group in controller.state.groups for n in group.notifications
    }


def test_mark_read_flips_after_store_confirms_and_rolls_up():
    store = InMemoryNotificationStore(_notifications())
    controller = _controller(store)

    assert asyncio.run(controller.mark_read(_key("A", 1))) is True
    group_a = controller.state.group("A")
    assert _read_flags(controller) == {1: True, 2: False, 3: False}
    assert group_a.read is False

    asyncio.run(controller.mark_read(_key("A", 2)))

    assert group_a.any_unread is False
    assert group_a.read is True
    assert controller.state.group("B").read is False
    assert store.calls == [("MarkRead", ("Issue", "A", 1)), ("MarkRead", ("Issue", "A", 2))]


def test_soft_mark_read_skips_the_store_and_does_not_roll_up():
    store = InMemoryNotificationStore(_notifications())
    controller = _controller(store)

    soft = MarkReadRequest("", "", 0)
    asyncio.run(controller.mark_read(_key("A", 1), soft))
    asyncio.run(controller.mark_read(_key("A", 2), soft))

    assert store.calls == []
    assert _read_flags(controller) == {1: True, 2: True, 3: False}
    assert controller.state.group("A").read is False
    assert controller.state.read_set == {_key("A", 1), _key("A", 2)}


def test_soft_mark_read_moves_exactly_one_notification():
    store = InMemoryNotificationStore(_notifications())
    controller = _controller(store)

    asyncio.run(controller.mark_read(_key("B", 3), MarkReadRequest("", "", 0)))

    assert store.calls == []
    assert _read_flags(controller) == {1: False, 2: False, 3: True}


def test_mark_all_read_only_affects_its_group():
    store = InMemoryNotificationStore(_notifications())
    controller = _controller(store)

    assert asyncio.run(controller.mark_all_read("A")) is True

    assert controller.state.group("A").any_unread is False
    assert controller.state.group("A").read is True
    assert controller.state.group("B").any_unread is True
    assert controller.state.group("B").read is False
    assert store.calls == [("MarkAllRead", ("A",))]


def test_failed_mark_read_leaves_state_untouched():
    controller = _controller(FailingStore(_notifications()))

    with pytest.raises(StoreError):
        asyncio.run(controller.mark_read(_key("A", 1)))

    assert _read_flags(controller) == {1: False, 2: False, 3: False}
    assert controller.state.group("A").any_unread is True
    assert controller.state.group("A").read is False


def test_failed_mark_all_read_leaves_state_untouched():
    controller = _controller(FailingStore(_notifications()))

    with pytest.raises(StoreError):
        asyncio.run(controller.mark_all_read("A"))

    assert controller.state.group("A").read is False
    assert _read_flags(controller) == {1: False, 2: False, 3: False}


def test_mark_all_read_without_repository_is_rejected():
    store = InMemoryNotificationStore(_notifications())
    controller = _controller(store)

    with pytest.raises(MalformedRequestError):
        asyncio.run(controller.mark_all_read(""))

    assert store.calls == []


def test_marking_twice_is_safe():
    store = InMemoryNotificationStore(_notifications())
    controller = _controller(store)

    async def scenario():
        await controller.mark_all_read("A")
        await controller.mark_all_read("A")
        await controller.mark_read(_key("A", 1))

    asyncio.run(scenario())

    assert controller.state.group("A").read is True
    assert store.count() == 1


def test_result_for_a_vanished_target_is_discarded():
    store = InMemoryNotificationStore(_notifications())
    controller = _controller(store)
    controller.state.replace([])

    assert asyncio.run(controller.mark_read(_key("A", 1))) is False
    assert store.calls == [("MarkRead", ("Issue", "A", 1))]


class GatedStore(InMemoryNotificationStore):
    """Hold mark-read until released so it completes after mark-all-read."""

    def __init__(self, notifications):
        super().__init__(notifications)
        self.release = threading.Event()

    def mark_read(self, app_id, repo_uri, thread_id):
        self.release.wait(timeout=5)
        super().mark_read(app_id, repo_uri, thread_id)


def test_racing_mark_read_and_mark_all_read_converge_to_all_read():
    store = GatedStore(_notifications())
    controller = _controller(store)

    async def scenario():
        slow = controller.schedule_mark_read(_key("A", 1))
        await controller.mark_all_read("A")
        store.release.set()
        await slow
        return slow.result()

    assert asyncio.run(scenario()) is True
    assert controller.state.group("A").read is True
    assert controller.state.group("A").any_unread is False


def test_scheduled_failures_are_logged_not_raised(caplog):
    controller = _controller(FailingStore(_notifications()))

    async def scenario():
        task = controller.schedule_mark_all_read("A")
        await controller.wait_pending()
        return task.result()

    with caplog.at_level("WARNING"):
        assert asyncio.run(scenario()) is False

    assert "MarkAllRead" in caplog.text
    assert controller.state.group("A").read is False
