"""Port: analytics tracker."""

from __future__ import annotations

from typing import Protocol

from repo_browser.domain.entities import AnalyticsEvent


class Tracker(Protocol):
    """Abstract contract for recording analytics events.

    Implementations must not raise; the caller never handles tracking errors.
    """

    def track(self, event: AnalyticsEvent) -> None:
        ...
