"""Notification store implemented remotely over HTTP."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

import httpx

from inbox.domain.entities import ListOptions, Notification

from .base import NotificationStore, StoreError
from .wire import deserialize_notification

logger = logging.getLogger(__name__)

LIST_ROUTE = "/api/notifications/list"
COUNT_ROUTE = "/api/notifications/count"
MARK_READ_ROUTE = "/api/notifications/mark-read"
MARK_ALL_READ_ROUTE = "/api/notifications/mark-all-read"


class HttpNotificationStore(NotificationStore):
    """Talk to a remote service exposing the notifications JSON API.

    ``access_token`` is forwarded as a bearer token so the remote side sees
    the same viewer. A preconfigured ``client`` may be passed in, in which
    case ``base_url`` and ``timeout`` are ignored and the caller owns it.
    """

    def __init__(
        self,
        base_url: str = "",
        *,
        access_token: str | None = None,
        timeout: float = 10.0,
        client: httpx.Client | None = None,
    ) -> None:
        headers = {"Authorization": f"Bearer {access_token}"} if access_token else {}
        self._owns_client = client is None
        self._client = client or httpx.Client(base_url=base_url, timeout=timeout)
        self._headers = headers

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> "HttpNotificationStore":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def list(self, options: ListOptions) -> Sequence[Notification]:
        params: dict[str, str] = {}
        if options.repo_uri is not None:
            params["RepoURI"] = options.repo_uri
        if options.include_all:
            params["All"] = "true"
        payload = self._request("List", "GET", LIST_ROUTE, params)
        if not isinstance(payload, list):
            raise StoreError("List", "unexpected response payload")
        try:
            return [deserialize_notification(item) for item in payload]
        except (KeyError, TypeError, ValueError) as exc:
            raise StoreError("List", f"malformed notification: {exc}") from exc

    def count(self) -> int:
        payload = self._request("Count", "GET", COUNT_ROUTE, {})
        try:
            return int(payload)
        except (TypeError, ValueError) as exc:
            raise StoreError("Count", "unexpected response payload") from exc

    def mark_read(self, app_id: str, repo_uri: str, thread_id: int) -> None:
        params = {"AppID": app_id, "RepoURI": repo_uri, "ThreadID": str(thread_id)}
        self._request("MarkRead", "POST", MARK_READ_ROUTE, params, expect_body=False)

    def mark_all_read(self, repo_uri: str) -> None:
        params = {"RepoURI": repo_uri}
        self._request("MarkAllRead", "POST", MARK_ALL_READ_ROUTE, params, expect_body=False)

    def _request(
        self,
        operation: str,
        method: str,
        path: str,
        params: dict[str, str],
        *,
        expect_body: bool = True,
    ) -> Any:
        try:
            response = self._client.request(method, path, params=params, headers=self._headers)
        except httpx.HTTPError as exc:
            logger.warning("%s request to %s failed: %s", operation, path, exc)
            raise StoreError(operation, str(exc)) from exc

        if not response.is_success:
            raise StoreError(
                operation,
                f"did not get acceptable status code: {response.status_code} "
                f"body: {response.text!r}",
            )
        if not expect_body:
            return None
        try:
            return response.json()
        except ValueError as exc:
            raise StoreError(operation, "response is not valid JSON") from exc


__all__ = [
    "COUNT_ROUTE",
    "HttpNotificationStore",
    "LIST_ROUTE",
    "MARK_ALL_READ_ROUTE",
    "MARK_READ_ROUTE",
]
