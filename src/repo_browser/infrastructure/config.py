"""Application configuration — loaded from environment variables."""

from __future__ import annotations

from datetime import datetime
from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

EnvironmentName = Literal["live", "mock", "error"]


class Settings(BaseSettings):
    """Central configuration loaded from ``REPO_BROWSER_*`` env vars (or ``.env`` file)."""

    model_config = SettingsConfigDict(
        env_prefix="REPO_BROWSER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    github_api_base: str = "https://api.github.com"
    repos_path: str = "orgs/pointfreeco/repos"
    default_environment: EnvironmentName = "live"
    route_all_errors: bool = False
    max_screens: int = Field(default=100, ge=1)
    frozen_now: datetime | None = None
    app_build: str = "Unknown"
    app_release: str = "Unknown"
    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 8000


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the singleton application settings (cached after first call)."""
    return Settings()
