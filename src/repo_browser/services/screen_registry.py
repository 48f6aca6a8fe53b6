"""In-memory registry of open repos screens."""

from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass

from repo_browser.domain.exceptions import FetchError, ScreenNotFoundError
from repo_browser.domain.ports.environment import ScreenEnvironment
from repo_browser.services.repos_screen import DEFAULT_ROUTED_ERRORS, ReposScreen

logger = logging.getLogger(__name__)

DEFAULT_MAX_SCREENS = 100


@dataclass(frozen=True, slots=True)
class ScreenEntry:
    """A registered screen and the name of the environment it runs against."""

    screen_id: str
    environment_name: str
    screen: ReposScreen


class ScreenRegistry:
    """Keeps screens addressable by id between requests.

    At most ``max_screens`` screens are held; opening one more closes and
    drops the oldest.
    """

    def __init__(
        self,
        routed_errors: tuple[type[FetchError], ...] = DEFAULT_ROUTED_ERRORS,
        max_screens: int = DEFAULT_MAX_SCREENS,
    ) -> None:
        if max_screens < 1:
            raise ValueError("max_screens must be at least 1")
        self._routed_errors = routed_errors
        self._max_screens = max_screens
        self._entries: dict[str, ScreenEntry] = {}

    def __len__(self) -> int:
        return len(self._entries)

    def open(self, environment: ScreenEnvironment, environment_name: str) -> ScreenEntry:
        """Create and register a new, not yet activated screen."""
        while len(self._entries) >= self._max_screens:
            self._evict_oldest()
        entry = ScreenEntry(
            screen_id=uuid.uuid4().hex,
            environment_name=environment_name,
            screen=ReposScreen(environment, routed_errors=self._routed_errors),
        )
        self._entries[entry.screen_id] = entry
        logger.debug("Opened screen %s (%s)", entry.screen_id, environment_name)
        return entry

    def get(self, screen_id: str) -> ScreenEntry:
        try:
            return self._entries[screen_id]
        except KeyError:
            raise ScreenNotFoundError(f"Screen {screen_id!r} not found.") from None

    def close(self, screen_id: str) -> None:
        """Tear a screen down and forget it."""
        entry = self.get(screen_id)
        entry.screen.close()
        del self._entries[screen_id]
        logger.debug("Closed screen %s", screen_id)

    def _evict_oldest(self) -> None:
        screen_id = next(iter(self._entries))
        self._entries.pop(screen_id).screen.close()
        logger.info("Evicted screen %s (registry full)", screen_id)

    def close_all(self) -> None:
        for entry in self._entries.values():
            entry.screen.close()
        self._entries.clear()
