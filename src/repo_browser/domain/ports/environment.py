"""Port: screen environment — the capability bundle a repos screen runs against."""

from __future__ import annotations

from typing import Protocol

from repo_browser.domain.entities import AppInfo
from repo_browser.domain.ports.clock import Clock
from repo_browser.domain.ports.repo_fetcher import RepoFetcher
from repo_browser.domain.ports.tracker import Tracker


class ScreenEnvironment(Protocol):
    """Fetcher, clock and tracker fixed for one screen's lifetime."""

    @property
    def fetcher(self) -> RepoFetcher: ...

    @property
    def clock(self) -> Clock: ...

    @property
    def tracker(self) -> Tracker: ...

    @property
    def app_info(self) -> AppInfo: ...
