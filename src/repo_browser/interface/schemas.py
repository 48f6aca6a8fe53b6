"""Pydantic request / response DTOs for the API boundary."""

from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, field_validator

from repo_browser.domain.entities import DetailView, ErrorView, RepoRecord
from repo_browser.services.screen_registry import ScreenEntry


class SelectRequest(BaseModel):
    """Request body for ``POST /screens/{screen_id}/select``."""

    repo_id: str

    @field_validator("repo_id")
    @classmethod
    def _must_not_be_blank(cls, v: str) -> str:
        stripped = v.strip()
        if not stripped:
            msg = "repo_id must not be empty."
            raise ValueError(msg)
        return stripped


class RepoOut(BaseModel):
    """One visible repository."""

    id: str
    name: str
    description: str | None
    html_url: str
    pushed_at: datetime | None
    pushed_ago: str | None


class ErrorOut(BaseModel):
    kind: str
    message: str


class ScreenResponse(BaseModel):
    """Snapshot of a screen's navigation state."""

    screen_id: str
    environment: str
    state: Literal["list", "detail", "error"]
    loading: bool
    repos: list[RepoOut]
    detail_url: str | None = None
    error: ErrorOut | None = None

    @classmethod
    def from_entry(cls, entry: ScreenEntry) -> ScreenResponse:
        screen = entry.screen
        state = screen.state

        def repo_out(repo: RepoRecord) -> RepoOut:
            return RepoOut(
                id=repo.id,
                name=repo.name,
                description=repo.description,
                html_url=repo.html_url,
                pushed_at=repo.pushed_at,
                pushed_ago=screen.pushed_ago(repo),
            )

        detail_url = None
        error = None
        if isinstance(state, DetailView):
            label = "detail"
            detail_url = state.repo.html_url
        elif isinstance(state, ErrorView):
            label = "error"
            error = ErrorOut(kind=state.kind.value, message=state.message)
        else:
            label = "list"

        return cls(
            screen_id=entry.screen_id,
            environment=entry.environment_name,
            state=label,
            loading=screen.is_loading,
            repos=[repo_out(r) for r in screen.repos],
            detail_url=detail_url,
            error=error,
        )


class ErrorResponse(BaseModel):
    """Standard error envelope returned on all failure paths."""

    status: str = "error"
    message: str
