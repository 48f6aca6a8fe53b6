"""Analytics tracker backed by the application log."""

from __future__ import annotations

import logging

from repo_browser.domain.entities import AnalyticsEvent

logger = logging.getLogger(__name__)


class LoggingTracker:
    """Concrete ``Tracker`` that writes every event to the log."""

    def __init__(self, log: logging.Logger = logger) -> None:
        self._log = log

    def track(self, event: AnalyticsEvent) -> None:
        self._log.info("Tracked %s %s", event.name, event.properties)
