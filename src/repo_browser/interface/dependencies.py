"""FastAPI dependency injection wiring."""

from __future__ import annotations

from collections.abc import Callable

import httpx

from repo_browser.infrastructure.config import EnvironmentName, Settings, get_settings
from repo_browser.infrastructure.environment import Environment, build_environment
from repo_browser.services.repos_screen import ALL_FETCH_ERRORS, DEFAULT_ROUTED_ERRORS
from repo_browser.services.screen_registry import ScreenRegistry

EnvironmentFactory = Callable[[EnvironmentName], Environment]

_http_client: httpx.AsyncClient | None = None
_registry: ScreenRegistry | None = None


async def startup() -> None:
    """Initialise shared resources — called from the lifespan context manager."""
    global _http_client, _registry  # noqa: PLW0603

    settings = get_settings()
    _http_client = httpx.AsyncClient()
    _registry = ScreenRegistry(
        routed_errors=ALL_FETCH_ERRORS if settings.route_all_errors else DEFAULT_ROUTED_ERRORS,
        max_screens=settings.max_screens,
    )


async def shutdown() -> None:
    """Release shared resources."""
    global _http_client, _registry  # noqa: PLW0603

    if _registry is not None:
        _registry.close_all()
        _registry = None
    if _http_client:
        await _http_client.aclose()
        _http_client = None


def get_app_settings() -> Settings:
    return get_settings()


def get_registry() -> ScreenRegistry:
    assert _registry is not None, "startup() was not called"
    return _registry


def get_environment_factory() -> EnvironmentFactory:
    """Return a callable that builds a fresh environment per screen."""
    settings = get_settings()

    assert _http_client is not None, "startup() was not called"
    client = _http_client

    def factory(name: EnvironmentName) -> Environment:
        return build_environment(name, client, settings)

    return factory
