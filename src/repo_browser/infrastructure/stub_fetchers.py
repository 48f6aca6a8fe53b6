"""In-process RepoFetcher implementations that never touch the network."""

from __future__ import annotations

from collections.abc import Callable, Sequence

from repo_browser.domain.entities import RepoRecord
from repo_browser.domain.exceptions import NonHttpResponseError


class FixedReposFetcher:
    """Returns the same literal list on every call."""

    def __init__(self, repos: Sequence[RepoRecord]) -> None:
        self._repos = tuple(repos)

    async def fetch_repos(self) -> list[RepoRecord]:
        return list(self._repos)


class FailingFetcher:
    """Fails immediately with the configured error.

    ``error`` may be an exception instance or a zero-argument factory; a
    factory gives every call a fresh exception object.
    """

    def __init__(
        self, error: Exception | Callable[[], Exception] = NonHttpResponseError
    ) -> None:
        self._error = error

    async def fetch_repos(self) -> list[RepoRecord]:
        if isinstance(self._error, BaseException):
            raise self._error
        raise self._error()
