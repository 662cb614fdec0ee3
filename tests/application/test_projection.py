"""Tests for projecting repository groups into view models."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

from helpers import NOW, build_notification, hours_ago
from inbox.application.use_cases.notifications import group_notifications, project_groups
from inbox.utils import resolve_timezone


def test_projection_keeps_group_and_member_order():
    groups = group_notifications(
        [
            build_notification("A", 1, updated_at=hours_ago(3)),
            build_notification("B", 2, updated_at=hours_ago(2)),
            build_notification("A", 3, updated_at=hours_ago(1)),
        ]
    )

    views = project_groups(groups, now=NOW)

    assert [view.repo_uri for view in views] == ["A", "B"]
    assert [n.thread_id for n in views[0].notifications] == [3, 1]
    assert views[0].most_recent_updated_at == hours_ago(1)


def test_read_flag_comes_from_record_or_local_read_set():
    read_locally = build_notification("A", 1)
    read_in_store = build_notification("A", 2, read=True)
    unread = build_notification("A", 3)

    [view] = project_groups(
        group_notifications([read_locally, read_in_store, unread]),
        read_set={read_locally.thread_key},
        now=NOW,
    )

    flags = {n.thread_id: n.read for n in view.notifications}
    assert flags == {1: True, 2: True, 3: False}
    assert view.any_unread is True
    assert view.read is False


def test_group_without_unread_members_is_read():
    [view] = project_groups(
        group_notifications([build_notification("A", 1, read=True)]), now=NOW
    )

    assert view.any_unread is False
    assert view.read is True


def test_display_fields_and_participating_flag():
    notification = build_notification(
        "github.com/acme/widgets", 9, updated_at=hours_ago(3), participating=True
    )

    [view] = project_groups(group_notifications([notification]), now=NOW)
    [item] = view.notifications

    assert view.repo_name == "widgets"
    assert item.participating is True
    assert item.color_hex == "#6cc644"
    assert item.actor_login == "octocat"
    assert item.relative_time == "3 hours ago"
    assert item.absolute_time == "Mar 1, 2024, 9:00 AM UTC"


def test_relative_label_depends_on_render_time_only():
    groups = group_notifications([build_notification("A", 1, updated_at=hours_ago(1))])

    early = project_groups(groups, now=NOW)
    later = project_groups(groups, now=NOW + timedelta(days=2))

    assert early[0].notifications[0].relative_time == "1 hour ago"
    assert later[0].notifications[0].relative_time == "2 days ago"
    assert early[0].notifications[0].updated_at == later[0].notifications[0].updated_at


def test_absolute_time_uses_requested_timezone():
    groups = group_notifications([build_notification("A", 1, updated_at=NOW)])

    [view] = project_groups(groups, now=NOW, tz=timezone(timedelta(hours=-5)))

    assert view.notifications[0].absolute_time == "Mar 1, 2024, 7:00 AM UTC-05:00"


def test_very_old_timestamps_render_in_negative_offset_timezones():
    ancient = build_notification("A", 1, updated_at=datetime(1, 1, 1, 2, 0, tzinfo=timezone.utc))

    [view] = project_groups(
        group_notifications([ancient]), now=NOW, tz=resolve_timezone("UTC-05:00")
    )

    assert view.notifications[0].absolute_time == ""
    assert view.notifications[0].relative_time == "a long while ago"
