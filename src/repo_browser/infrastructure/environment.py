"""Dependency container — the capabilities a repos screen runs against.

A screen receives its :class:`Environment` at construction, so each screen
instance can run against a different fetcher, clock or tracker.  The presets
mirror the three ways the app is wired: against GitHub, against a literal
list, and against an immediate failure.
"""

from __future__ import annotations

import dataclasses
import platform
from collections.abc import Callable
from dataclasses import dataclass, field

import httpx

from repo_browser.domain.entities import UNKNOWN, AppInfo, RepoRecord
from repo_browser.domain.exceptions import NonHttpResponseError
from repo_browser.domain.ports.clock import Clock
from repo_browser.domain.ports.repo_fetcher import RepoFetcher
from repo_browser.domain.ports.tracker import Tracker
from repo_browser.infrastructure.analytics import LoggingTracker
from repo_browser.infrastructure.clock import FixedClock, SystemClock
from repo_browser.infrastructure.config import EnvironmentName, Settings
from repo_browser.infrastructure.github_rest_adapter import GitHubRestAdapter
from repo_browser.infrastructure.stub_fetchers import FailingFetcher, FixedReposFetcher


def mock_repos(clock: Clock) -> list[RepoRecord]:
    """The literal list served by the mock environment."""
    return [
        RepoRecord(
            archived=False,
            description="Blob's blog",
            html_url="https://www.pointfree.co",
            name="Bloblog",
            pushed_at=clock.now(),
        )
    ]


def app_info_from_settings(settings: Settings) -> AppInfo:
    return AppInfo(
        build=settings.app_build,
        release=settings.app_release,
        system_name=platform.system() or UNKNOWN,
        system_version=platform.release() or UNKNOWN,
    )


def clock_from_settings(settings: Settings) -> Clock:
    if settings.frozen_now is not None:
        return FixedClock(settings.frozen_now)
    return SystemClock()


@dataclass(frozen=True, slots=True)
class Environment:
    """Bundle of the fetch, clock and analytics capabilities."""

    fetcher: RepoFetcher
    clock: Clock = field(default_factory=SystemClock)
    tracker: Tracker = field(default_factory=LoggingTracker)
    app_info: AppInfo = field(default_factory=AppInfo)

    # ── Presets ─────────────────────────────────────────────────────────

    @classmethod
    def live(cls, client: httpx.AsyncClient, settings: Settings) -> Environment:
        """Fetch from the configured GitHub endpoint."""
        return cls(
            fetcher=GitHubRestAdapter(
                client=client,
                base_url=settings.github_api_base,
                repos_path=settings.repos_path,
            ),
            clock=clock_from_settings(settings),
            tracker=LoggingTracker(),
            app_info=app_info_from_settings(settings),
        )

    @classmethod
    def mock(cls, clock: Clock | None = None, **overrides: object) -> Environment:
        """Serve a single literal repository without touching the network."""
        clock = clock or SystemClock()
        return cls(fetcher=FixedReposFetcher(mock_repos(clock)), clock=clock, **overrides)  # type: ignore[arg-type]

    @classmethod
    def error(
        cls,
        error: Exception | Callable[[], Exception] = NonHttpResponseError,
        **overrides: object,
    ) -> Environment:
        """Fail every fetch immediately with ``error``."""
        return cls(fetcher=FailingFetcher(error), **overrides)  # type: ignore[arg-type]

    def with_overrides(self, **changes: object) -> Environment:
        """Return a copy with some capabilities swapped out."""
        return dataclasses.replace(self, **changes)  # type: ignore[arg-type]


def build_environment(
    name: EnvironmentName, client: httpx.AsyncClient, settings: Settings
) -> Environment:
    """Resolve a preset by name, using the settings for shared metadata."""
    if name == "live":
        return Environment.live(client, settings)

    clock = clock_from_settings(settings)
    app_info = app_info_from_settings(settings)
    if name == "mock":
        return Environment.mock(clock=clock, app_info=app_info)
    if name == "error":
        return Environment.error(clock=clock, app_info=app_info)
    raise ValueError(f"Unknown environment: {name!r}")
