"""Tests for the server-side read-state use cases."""

from __future__ import annotations

import pytest

from helpers import build_notification
from inbox.application.use_cases.notifications import (
    MalformedRequestError,
    count_unread,
    mark_all_read,
    mark_read,
)
from inbox.domain.entities import ListOptions, MarkAllReadRequest, MarkReadRequest
from inbox.infrastructure.stores import InMemoryNotificationStore


@pytest.fixture()
def store() -> InMemoryNotificationStore:
    return InMemoryNotificationStore(
        [
            build_notification("A", 1),
            build_notification("A", 2),
            build_notification("B", 3),
        ]
    )


def test_mark_read_reaches_the_store(store):
    mark_read(store, MarkReadRequest("Issue", "A", 1))

    assert store.calls == [("MarkRead", ("Issue", "A", 1))]
    assert count_unread(store) == 2


def test_mark_read_twice_is_a_no_op(store):
    mark_read(store, MarkReadRequest("Issue", "A", 1))
    mark_read(store, MarkReadRequest("Issue", "A", 1))

    assert count_unread(store) == 2


@pytest.mark.parametrize(
    "request_",
    [
        MarkReadRequest("", "A", 1),
        MarkReadRequest("Issue", "", 1),
        MarkReadRequest("", "", 0),
        MarkReadRequest("Issue", "A", -1),
    ],
)
def test_malformed_mark_read_never_reaches_the_store(store, request_):
    with pytest.raises(MalformedRequestError):
        mark_read(store, request_)

    assert store.calls == []


def test_mark_all_read_only_touches_the_repository(store):
    mark_all_read(store, MarkAllReadRequest("A"))
    mark_all_read(store, MarkAllReadRequest("A"))

    remaining = store.list(ListOptions())
    assert [n.thread_id for n in remaining] == [3]


def test_mark_all_read_requires_repository(store):
    with pytest.raises(MalformedRequestError):
        mark_all_read(store, MarkAllReadRequest(""))

    assert store.calls == []
