"""Domain entities — pure data structures with no external dependencies."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum

from repo_browser.domain.exceptions import (
    DecodeError,
    FetchError,
    NetworkError,
    NonHttpResponseError,
    NonSuccessStatusError,
)

UNKNOWN = "Unknown"


@dataclass(frozen=True, slots=True)
class RepoRecord:
    """One repository summary from the GitHub org listing."""

    archived: bool
    description: str | None
    html_url: str
    name: str
    pushed_at: datetime | None = None

    @property
    def id(self) -> str:
        """Stable identifier derived from ``html_url``."""
        return str(uuid.uuid5(uuid.NAMESPACE_URL, self.html_url))


@dataclass(frozen=True, slots=True)
class AppInfo:
    """Build and platform metadata attached to analytics events."""

    build: str = UNKNOWN
    release: str = UNKNOWN
    system_name: str = UNKNOWN
    system_version: str = UNKNOWN


@dataclass(frozen=True, slots=True)
class AnalyticsEvent:
    """A named analytics event with string properties."""

    name: str
    properties: dict[str, str] = field(default_factory=dict)

    @classmethod
    def tapped_repo(cls, repo: RepoRecord, app_info: AppInfo) -> AnalyticsEvent:
        return cls(
            name="tapped_repo",
            properties={
                "repo_name": repo.name,
                "build": app_info.build,
                "release": app_info.release,
                "system_name": app_info.system_name,
                "system_version": app_info.system_version,
            },
        )


# ── Navigation ──────────────────────────────────────────────────────────────


class ErrorKind(str, Enum):
    """Failure kinds a screen can display."""

    NON_HTTP_RESPONSE = "non_http_response"
    NON_SUCCESS_STATUS = "non_success_status"
    DECODE = "decode"
    NETWORK = "network"
    FETCH = "fetch"

    @classmethod
    def from_exception(cls, exc: FetchError) -> ErrorKind:
        for exc_type, kind in _ERROR_KINDS:
            if isinstance(exc, exc_type):
                return kind
        return cls.FETCH


_ERROR_KINDS: list[tuple[type[FetchError], ErrorKind]] = [
    (NonHttpResponseError, ErrorKind.NON_HTTP_RESPONSE),
    (NonSuccessStatusError, ErrorKind.NON_SUCCESS_STATUS),
    (DecodeError, ErrorKind.DECODE),
    (NetworkError, ErrorKind.NETWORK),
]


@dataclass(frozen=True, slots=True)
class ListView:
    """The repository list is showing."""


@dataclass(frozen=True, slots=True)
class DetailView:
    """A single repository's page is showing."""

    repo: RepoRecord


@dataclass(frozen=True, slots=True)
class ErrorView:
    """The fetch failed with a displayable error."""

    kind: ErrorKind
    message: str = ""


NavigationState = ListView | DetailView | ErrorView
