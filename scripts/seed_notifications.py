"""Utility script to load sample notifications for a user into the database."""

from __future__ import annotations

import argparse
from datetime import timedelta

from inbox.config import get_settings
from inbox.domain.entities import RGB, Actor, Notification, Viewer
from inbox.infrastructure.database import (
    build_engine,
    build_session_factory,
    initialize_database,
)
from inbox.infrastructure.security import create_access_token
from inbox.infrastructure.stores import SqlNotificationStore, StoreError
from inbox.utils import now_utc

_GREEN = RGB(108, 198, 68)
_RED = RGB(189, 44, 0)

# (app_id, repo, thread_id, title, icon, color, actor login, actor id, minutes ago, anchor)
_SAMPLES = (
    ("PullRequest", "github.com/bradleyfalzon/gopherci", 60, "Support GitHub PushEvent",
     "git-pull-request", _GREEN, "coveralls", 2354108, 15, "pull/60"),
    ("PullRequest", "github.com/ryanuber/go-glob", 5, "Add GlobI for case-insensitive globbing",
     "git-pull-request", _GREEN, "blockloop", 3022496, 21, "pull/5"),
    ("Issue", "github.com/nsf/gocode", 419, "panic: unknown export format version 4",
     "issue-closed", _RED, "davidlazar", 45629, 45, "issues/419"),
    ("Issue", "github.com/robpike/ivy", 31, "loop termination condition seems wrong",
     "issue-opened", _GREEN, "robpike", 4324516, 238, "issues/31"),
    ("PullRequest", "github.com/nsf/gocode", 417, "[WIP] package_bin: support type alias",
     "git-pull-request", _GREEN, "nsf", 12567, 226, "pull/417"),
)


def parse_args() -> argparse.Namespace:
    """Parse command line arguments for the seeding run."""

    parser = argparse.ArgumentParser(
        description="Insert sample notifications for a user and print an access token.",
    )
    parser.add_argument("--user-id", type=int, default=1, help="Identifier of the viewer (default: 1)")
    parser.add_argument("--login", default="gopher", help="Login of the viewer (default: gopher)")
    parser.add_argument(
        "--name", default="Sample Gopher", help="Display name of the viewer (default: Sample Gopher)"
    )
    return parser.parse_args()


def sample_notifications() -> list[Notification]:
    """Return the sample set, timestamped relative to now."""

    now = now_utc()
    notifications = []
    for app_id, repo, thread_id, title, icon, color, login, actor_id, minutes, anchor in _SAMPLES:
        repo_url = f"https://{repo}"
        notifications.append(
            Notification(
                app_id=app_id,
                repo_uri=repo,
                thread_id=thread_id,
                repo_url=repo_url,
                title=title,
                html_url=f"{repo_url}/{anchor}",
                icon=icon,
                color=color,
                actor=Actor(
                    id=actor_id,
                    login=login,
                    avatar_url=f"https://avatars.githubusercontent.com/u/{actor_id}?s=36&v=3",
                    html_url=f"https://github.com/{login}",
                ),
                updated_at=now - timedelta(minutes=minutes),
                participating=login == "robpike",
            )
        )
    return notifications


def main() -> None:
    """Seed the configured database using the provided command line arguments."""

    args = parse_args()
    settings = get_settings()

    engine = build_engine(settings.database_url)
    initialize_database(engine)
    session = build_session_factory(engine)()
    try:
        store = SqlNotificationStore(session, args.user_id)
        for notification in sample_notifications():
            store.save(notification)
    except StoreError as exc:
        raise SystemExit(f"Could not store the sample notifications: {exc}") from exc
    finally:
        session.close()
        engine.dispose()

    viewer = Viewer(id=args.user_id, login=args.login, name=args.name)
    token = create_access_token(viewer, settings.secret_key)
    print(
        f"Stored {len(_SAMPLES)} notifications for user {viewer.id} ({viewer.login}).\n"
        f"  Access token: {token}"
    )


if __name__ == "__main__":
    main()
