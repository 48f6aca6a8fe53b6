"""
Pytest configuration and shared fixtures.
"""
from datetime import datetime, timezone

import pytest

from repo_browser.domain.entities import AnalyticsEvent, RepoRecord
from repo_browser.infrastructure.clock import FixedClock
from repo_browser.infrastructure.config import get_settings

NOW = datetime(2023, 1, 17, 12, 0, 0, tzinfo=timezone.utc)


class RecordingTracker:
    """Tracker double that keeps every event in memory."""

    def __init__(self):
        self.events: list[AnalyticsEvent] = []

    def track(self, event: AnalyticsEvent) -> None:
        self.events.append(event)


def make_repo(name, archived=False, pushed_at=None, description=None):
    return RepoRecord(
        archived=archived,
        description=description,
        html_url=f"https://github.com/pointfreeco/{name.lower()}",
        name=name,
        pushed_at=pushed_at,
    )


@pytest.fixture
def clock():
    return FixedClock(NOW)


@pytest.fixture
def tracker():
    return RecordingTracker()


@pytest.fixture(scope="function")
def clean_env(monkeypatch):
    """
    Clean environment for testing.

    Removes all app-related env vars and resets the settings singleton.
    """
    for var in (
        "REPO_BROWSER_DEFAULT_ENVIRONMENT",
        "REPO_BROWSER_ROUTE_ALL_ERRORS",
        "REPO_BROWSER_FROZEN_NOW",
        "REPO_BROWSER_GITHUB_API_BASE",
        "REPO_BROWSER_REPOS_PATH",
        "REPO_BROWSER_LOG_LEVEL",
    ):
        monkeypatch.delenv(var, raising=False)
    get_settings.cache_clear()
    yield monkeypatch
    get_settings.cache_clear()
