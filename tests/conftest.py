"""Shared fixtures for the inbox test-suite."""

from __future__ import annotations

import os

import pytest

os.environ.setdefault("SECRET_KEY", "test-secret")

from inbox.config import Settings  # noqa: E402
from helpers import SECRET  # noqa: E402


@pytest.fixture()
def settings() -> Settings:
    """Settings backed by an in-memory SQLite database."""

    return Settings(
        _env_file=None,
        secret_key=SECRET,
        database_url="sqlite://",
        notification_store="database",
    )


@pytest.fixture()
def memory_settings() -> Settings:
    """Settings using the in-process notification store."""

    return Settings(_env_file=None, secret_key=SECRET, notification_store="memory")
