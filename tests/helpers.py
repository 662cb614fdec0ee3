"""Builders shared by the test modules."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

from inbox.domain.entities import RGB, Actor, Notification, Viewer
from inbox.infrastructure.security import create_access_token

SECRET = "test-secret"
NOW = datetime(2024, 3, 1, 12, 0, tzinfo=timezone.utc)
VIEWER = Viewer(id=1, login="gopher", name="Sample Gopher")


def build_notification(
    repo_uri: str = "github.com/acme/widgets",
    thread_id: int = 1,
    *,
    app_id: str = "Issue",
    updated_at: datetime | None = NOW,
    title: str | None = None,
    participating: bool = False,
    read: bool = False,
) -> Notification:
    """Return a notification with sensible defaults for tests."""

    return Notification(
        app_id=app_id,
        repo_uri=repo_uri,
        thread_id=thread_id,
        repo_url=f"https://{repo_uri}",
        title=title or f"{app_id} #{thread_id}",
        html_url=f"https://{repo_uri}/issues/{thread_id}",
        icon="issue-opened",
        color=RGB(108, 198, 68),
        actor=Actor(id=7, login="octocat", avatar_url="https://example.org/octocat.png"),
        updated_at=updated_at,
        participating=participating,
        read=read,
    )


def hours_ago(hours: float) -> datetime:
    return NOW - timedelta(hours=hours)


def auth_headers(viewer: Viewer = VIEWER) -> dict[str, str]:
    return {"Authorization": f"Bearer {create_access_token(viewer, SECRET)}"}
