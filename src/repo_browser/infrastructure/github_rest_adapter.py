"""GitHub REST API adapter — implements the RepoFetcher port."""

from __future__ import annotations

import logging
import re
from datetime import datetime, timezone
from urllib.parse import urlsplit

import httpx
from pydantic import BaseModel, ConfigDict, StrictBool, StrictStr, TypeAdapter, ValidationError, field_validator

from repo_browser.domain.entities import RepoRecord
from repo_browser.domain.exceptions import (
    DecodeError,
    NetworkError,
    NonHttpResponseError,
    NonSuccessStatusError,
)

logger = logging.getLogger(__name__)

_GITHUB_API = "https://api.github.com"
_ORG_REPOS_PATH = "orgs/pointfreeco/repos"

# Numeric offset with a colon (or "Z"); parsed without touching the locale.
TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%S%z"
_OFFSET_RE = re.compile(r"(?:Z|[+-]\d{2}:\d{2})\Z")


def parse_timestamp(value: str) -> datetime:
    """Parse a GitHub timestamp and normalise it to UTC."""
    if not _OFFSET_RE.search(value):
        raise ValueError(f"Timestamp offset must be Z or ±HH:MM: {value!r}")
    return datetime.strptime(value, TIMESTAMP_FORMAT).astimezone(timezone.utc)


class RepoPayload(BaseModel):
    """Wire shape of one element of ``GET /orgs/{org}/repos``."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    archived: StrictBool
    description: StrictStr | None = None
    html_url: StrictStr
    name: StrictStr
    pushed_at: datetime | None = None

    @field_validator("html_url")
    @classmethod
    def _must_be_absolute(cls, v: str) -> str:
        parts = urlsplit(v)
        if not parts.scheme or not parts.netloc:
            msg = f"html_url is not an absolute URL: {v!r}"
            raise ValueError(msg)
        return v

    @field_validator("pushed_at", mode="before")
    @classmethod
    def _parse_pushed_at(cls, v: object) -> datetime | None:
        if v is None:
            return None
        if not isinstance(v, str):
            msg = "pushed_at must be a string or null"
            raise ValueError(msg)
        return parse_timestamp(v)

    def to_entity(self) -> RepoRecord:
        return RepoRecord(
            archived=self.archived,
            description=self.description,
            html_url=self.html_url,
            name=self.name,
            pushed_at=self.pushed_at,
        )


_REPO_LIST = TypeAdapter(list[RepoPayload])


def decode_repos(body: bytes) -> list[RepoRecord]:
    """Decode a JSON array body into domain records."""
    try:
        payloads = _REPO_LIST.validate_json(body)
    except ValidationError as exc:
        raise DecodeError(
            f"Response body does not match the repository schema: {exc.error_count()} error(s)"
        ) from exc
    return [p.to_entity() for p in payloads]


class GitHubRestAdapter:
    """Concrete RepoFetcher backed by the GitHub v3 REST API."""

    def __init__(
        self,
        client: httpx.AsyncClient,
        base_url: str = _GITHUB_API,
        repos_path: str = _ORG_REPOS_PATH,
    ) -> None:
        self._client = client
        self._base_url = base_url.rstrip("/")
        self._repos_path = repos_path
        self._api_headers: dict[str, str] = {
            "Accept": "application/vnd.github.v3+json",
            "User-Agent": "repo-browser/1.0",
        }

    async def fetch_repos(self) -> list[RepoRecord]:
        """GET /orgs/pointfreeco/repos → [RepoRecord]."""
        return await self.fetch(self._repos_path)

    async def fetch(self, path: str) -> list[RepoRecord]:
        """GET ``path`` relative to the API base and decode the repository list."""
        resp = await self._api_get(path)
        try:
            return decode_repos(resp.content)
        except DecodeError as exc:
            logger.warning("Failed to decode %s: %s", path, exc)
            raise

    async def _api_get(self, path: str) -> httpx.Response:
        """Perform a single GET with error translation."""
        url = f"{self._base_url}/{path.lstrip('/')}"
        logger.debug("GET %s", url)
        try:
            resp = await self._client.get(url, headers=self._api_headers)
        except (httpx.UnsupportedProtocol, httpx.ProtocolError) as exc:
            logger.warning("No HTTP response from %s: %s", url, exc)
            raise NonHttpResponseError(
                f"No HTTP response from {url}: {exc}"
            ) from exc
        except httpx.HTTPError as exc:
            logger.warning("Network error fetching %s: %s", url, exc)
            raise NetworkError(f"Network error fetching {url}: {exc}") from exc

        if 200 <= resp.status_code < 299:
            return resp

        logger.warning("GitHub API returned HTTP %d for %s", resp.status_code, url)
        raise NonSuccessStatusError(
            resp.status_code,
            f"GitHub API returned HTTP {resp.status_code} for {url}",
        )
