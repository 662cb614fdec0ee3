"""Tests for the HTTP notification store client."""

from __future__ import annotations

import httpx
import pytest

from inbox.domain.entities import ListOptions
from inbox.infrastructure.stores import HttpNotificationStore, StoreError

NOTIFICATION_PAYLOAD = {
    "app_id": "Issue",
    "repo_uri": "github.com/acme/widgets",
    "thread_id": 7,
    "repo_url": "https://github.com/acme/widgets",
    "title": "Crash on start",
    "html_url": "https://github.com/acme/widgets/issues/7",
    "icon": "issue-opened",
    "color": "#6cc644",
    "actor": {"id": 3, "login": "octocat", "avatar_url": "https://example.org/o.png"},
    "updated_at": "2024-03-01T09:00:00+00:00",
    "participating": True,
    "read": False,
}


def _store(handler) -> tuple[HttpNotificationStore, list[httpx.Request]]:
    seen: list[httpx.Request] = []

    def record(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return handler(request)

    client = httpx.Client(transport=httpx.MockTransport(record), base_url="http://store")
    return HttpNotificationStore(client=client, access_token="abc"), seen


def test_list_sends_filters_and_decodes_payload():
    store, seen = _store(lambda request: httpx.Response(200, json=[NOTIFICATION_PAYLOAD]))

    notifications = store.list(ListOptions(repo_uri="github.com/acme/widgets", include_all=True))

    request = seen[0]
    assert request.method == "GET"
    assert request.url.path == "/api/notifications/list"
    assert request.url.params["RepoURI"] == "github.com/acme/widgets"
    assert request.url.params["All"] == "true"
    assert request.headers["Authorization"] == "Bearer abc"
    [notification] = notifications
    assert notification.thread_id == 7
    assert notification.actor.login == "octocat"
    assert notification.color.hex_string() == "#6cc644"
    assert notification.participating is True


def test_list_omits_default_filters():
    store, seen = _store(lambda request: httpx.Response(200, json=[]))

    assert store.list(ListOptions()) == []
    assert dict(seen[0].url.params) == {}


def test_mark_read_posts_thread_identity():
    store, seen = _store(lambda request: httpx.Response(204))

    store.mark_read("Issue", "github.com/acme/widgets", 7)

    request = seen[0]
    assert request.method == "POST"
    assert request.url.path == "/api/notifications/mark-read"
    assert dict(request.url.params) == {
        "AppID": "Issue",
        "RepoURI": "github.com/acme/widgets",
        "ThreadID": "7",
    }


def test_mark_all_read_posts_repository():
    store, seen = _store(lambda request: httpx.Response(200))

    store.mark_all_read("github.com/acme/widgets")

    assert seen[0].url.path == "/api/notifications/mark-all-read"
    assert dict(seen[0].url.params) == {"RepoURI": "github.com/acme/widgets"}


def test_count_returns_integer():
    store, _ = _store(lambda request: httpx.Response(200, json=4))

    assert store.count() == 4


def test_unacceptable_status_raises_store_error():
    store, _ = _store(lambda request: httpx.Response(500, text="boom"))

    with pytest.raises(StoreError) as excinfo:
        store.mark_read("Issue", "github.com/acme/widgets", 7)

    assert excinfo.value.operation == "MarkRead"
    assert "500" in str(excinfo.value)
    assert "boom" in str(excinfo.value)


def test_transport_errors_raise_store_error():
    def refuse(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    store, _ = _store(refuse)

    with pytest.raises(StoreError) as excinfo:
        store.count()

    assert excinfo.value.operation == "Count"


def test_malformed_list_payload_raises_store_error():
    store, _ = _store(lambda request: httpx.Response(200, json={"unexpected": True}))

    with pytest.raises(StoreError):
        store.list(ListOptions())
