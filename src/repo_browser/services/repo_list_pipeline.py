"""Filter and order a fetched repository list for display.

Archived repositories are dropped.  The rest are ordered most recently
pushed first; records without ``pushed_at`` go last, in input order.
"""

from __future__ import annotations

from collections.abc import Iterable

from repo_browser.domain.entities import RepoRecord


def _sort_key(repo: RepoRecord) -> tuple[int, float]:
    if repo.pushed_at is None:
        return (1, 0.0)
    return (0, -repo.pushed_at.timestamp())


def process(raw: Iterable[RepoRecord]) -> list[RepoRecord]:
    """Return the visible repositories, newest push first."""
    visible = [repo for repo in raw if not repo.archived]
    return sorted(visible, key=_sort_key)
