"""Repos screen — the navigation state machine around one fetch.

A screen starts in :class:`ListView`, runs exactly one fetch when activated,
and then moves between the list, a repository's detail page and an error
page.  Only the error kinds in ``routed_errors`` reach the error page; any
other fetch failure is logged and leaves the state untouched.

The screen owns its fetch task.  :meth:`ReposScreen.close` cancels it, and a
result that arrives after close is dropped without mutating state.
"""

from __future__ import annotations

import asyncio
import logging

from repo_browser.domain.entities import (
    AnalyticsEvent,
    DetailView,
    ErrorKind,
    ErrorView,
    ListView,
    NavigationState,
    RepoRecord,
)
from repo_browser.domain.exceptions import (
    FetchError,
    InvalidTransitionError,
    NonHttpResponseError,
    NonSuccessStatusError,
    ScreenAlreadyActivatedError,
    ScreenClosedError,
    UnknownRepoError,
)
from repo_browser.domain.ports.environment import ScreenEnvironment
from repo_browser.services.repo_list_pipeline import process
from repo_browser.services.time_ago import time_ago_since

logger = logging.getLogger(__name__)

DEFAULT_ROUTED_ERRORS: tuple[type[FetchError], ...] = (
    NonHttpResponseError,
    NonSuccessStatusError,
)
ALL_FETCH_ERRORS: tuple[type[FetchError], ...] = (FetchError,)


class ReposScreen:
    """One activation of the repository list screen.

    Parameters
    ----------
    environment:
        Capabilities the screen runs against, fixed for its lifetime.
    routed_errors:
        Fetch error types that move the screen to :class:`ErrorView`.
    """

    def __init__(
        self,
        environment: ScreenEnvironment,
        *,
        routed_errors: tuple[type[FetchError], ...] = DEFAULT_ROUTED_ERRORS,
    ) -> None:
        self._env = environment
        self._routed_errors = routed_errors
        self._state: NavigationState = ListView()
        self._repos: list[RepoRecord] = []
        self._task: asyncio.Task[None] | None = None
        self._alive = True

    # ── Read-only view ──────────────────────────────────────────────────

    @property
    def environment(self) -> ScreenEnvironment:
        return self._env

    @property
    def state(self) -> NavigationState:
        return self._state

    @property
    def repos(self) -> list[RepoRecord]:
        return list(self._repos)

    @property
    def is_alive(self) -> bool:
        return self._alive

    @property
    def is_loading(self) -> bool:
        return self._task is not None and not self._task.done()

    def pushed_ago(self, repo: RepoRecord) -> str | None:
        if repo.pushed_at is None:
            return None
        return time_ago_since(repo.pushed_at, self._env.clock.now())

    # ── Lifecycle ───────────────────────────────────────────────────────

    def activate(self) -> asyncio.Task[None]:
        """Start the screen's single fetch and return its task."""
        if not self._alive:
            raise ScreenClosedError("Screen has been closed.")
        if self._task is not None:
            raise ScreenAlreadyActivatedError("Screen was already activated.")
        self._task = asyncio.get_running_loop().create_task(self._load())
        return self._task

    def close(self) -> None:
        """Tear the screen down, cancelling an outstanding fetch."""
        if not self._alive:
            return
        self._alive = False
        if self._task is not None and not self._task.done():
            self._task.cancel()

    async def _load(self) -> None:
        try:
            raw = await self._env.fetcher.fetch_repos()
        except self._routed_errors as exc:
            if not self._alive:
                logger.debug("Discarding fetch error for closed screen: %s", exc)
                return
            self._state = ErrorView(kind=ErrorKind.from_exception(exc), message=str(exc))
            return
        except Exception:
            logger.exception(
                "Unhandled error while fetching repositories; keeping %s",
                type(self._state).__name__,
            )
            return

        if not self._alive:
            logger.debug("Discarding %d repositories for closed screen", len(raw))
            return
        self._repos = process(raw)
        self._state = ListView()
        logger.info("Loaded %d visible repositories", len(self._repos))

    # ── Navigation ──────────────────────────────────────────────────────

    def find(self, repo_id: str) -> RepoRecord:
        for repo in self._repos:
            if repo.id == repo_id:
                return repo
        raise UnknownRepoError(f"No visible repository with id {repo_id!r}.")

    def select(self, repo: RepoRecord) -> None:
        """Open ``repo``'s detail page, tracking the tap first."""
        self._ensure_alive()
        if not isinstance(self._state, ListView):
            raise InvalidTransitionError(
                f"Cannot select a repository from {type(self._state).__name__}."
            )
        if repo not in self._repos:
            raise UnknownRepoError(f"Repository {repo.name!r} is not in the visible list.")

        self._env.tracker.track(AnalyticsEvent.tapped_repo(repo, self._env.app_info))
        self._state = DetailView(repo=repo)

    def select_by_id(self, repo_id: str) -> None:
        self.select(self.find(repo_id))

    def dismiss(self) -> None:
        """Return from the detail page to the list without re-fetching."""
        self._ensure_alive()
        if not isinstance(self._state, DetailView):
            raise InvalidTransitionError(
                f"Nothing to dismiss from {type(self._state).__name__}."
            )
        self._state = ListView()

    def _ensure_alive(self) -> None:
        if not self._alive:
            raise ScreenClosedError("Screen has been closed.")
