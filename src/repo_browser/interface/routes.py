"""API routes — thin controllers that drive repos screens."""

from __future__ import annotations

import asyncio

from fastapi import APIRouter, Depends, Response

from repo_browser.infrastructure.config import EnvironmentName, Settings
from repo_browser.interface.dependencies import (
    EnvironmentFactory,
    get_app_settings,
    get_environment_factory,
    get_registry,
)
from repo_browser.interface.schemas import ErrorResponse, ScreenResponse, SelectRequest
from repo_browser.services.screen_registry import ScreenRegistry

router = APIRouter(prefix="/screens")


@router.post(
    "",
    response_model=ScreenResponse,
    status_code=201,
    responses={422: {"model": ErrorResponse, "description": "Unknown environment name"}},
)
async def open_screen(
    environment: EnvironmentName | None = None,
    wait: bool = True,
    registry: ScreenRegistry = Depends(get_registry),
    make_environment: EnvironmentFactory = Depends(get_environment_factory),
    settings: Settings = Depends(get_app_settings),
) -> ScreenResponse:
    """Open a screen and start its fetch."""
    name = environment or settings.default_environment
    entry = registry.open(make_environment(name), name)
    task = entry.screen.activate()
    if wait:
        await asyncio.wait({task})
    return ScreenResponse.from_entry(entry)


@router.get(
    "/{screen_id}",
    response_model=ScreenResponse,
    responses={404: {"model": ErrorResponse, "description": "Screen not found"}},
)
async def get_screen(
    screen_id: str, registry: ScreenRegistry = Depends(get_registry)
) -> ScreenResponse:
    return ScreenResponse.from_entry(registry.get(screen_id))


@router.post(
    "/{screen_id}/select",
    response_model=ScreenResponse,
    responses={
        404: {"model": ErrorResponse, "description": "Screen or repository not found"},
        409: {"model": ErrorResponse, "description": "Screen is not showing the list"},
    },
)
async def select_repo(
    screen_id: str,
    body: SelectRequest,
    registry: ScreenRegistry = Depends(get_registry),
) -> ScreenResponse:
    """Open a repository's detail page."""
    entry = registry.get(screen_id)
    entry.screen.select_by_id(body.repo_id)
    return ScreenResponse.from_entry(entry)


@router.post(
    "/{screen_id}/dismiss",
    response_model=ScreenResponse,
    responses={
        409: {"model": ErrorResponse, "description": "Screen is not showing a detail page"},
    },
)
async def dismiss_detail(
    screen_id: str, registry: ScreenRegistry = Depends(get_registry)
) -> ScreenResponse:
    """Go back from the detail page to the list."""
    entry = registry.get(screen_id)
    entry.screen.dismiss()
    return ScreenResponse.from_entry(entry)


@router.delete(
    "/{screen_id}",
    status_code=204,
    responses={404: {"model": ErrorResponse, "description": "Screen not found"}},
)
async def close_screen(
    screen_id: str, registry: ScreenRegistry = Depends(get_registry)
) -> Response:
    registry.close(screen_id)
    return Response(status_code=204)
