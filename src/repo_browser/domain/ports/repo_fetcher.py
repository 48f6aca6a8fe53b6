"""Port: repository fetcher — defined by the domain, implemented by infrastructure."""

from __future__ import annotations

from typing import Protocol

from repo_browser.domain.entities import RepoRecord


class RepoFetcher(Protocol):
    """Abstract contract for fetching an organization's repositories."""

    async def fetch_repos(self) -> list[RepoRecord]:
        """Return the decoded repository list, or raise a ``FetchError``."""
        ...
