"""Domain exception hierarchy.

Fetch errors are absorbed by the repos screen and turned into navigation
state.  Screen errors reach the interface layer, where the error handlers
translate them to HTTP status codes.
"""

from __future__ import annotations


class RepoBrowserError(Exception):
    """Base exception for the entire application."""


# ── Fetch errors ────────────────────────────────────────────────────────────


class FetchError(RepoBrowserError):
    """Fetching the repository list failed."""


class NonHttpResponseError(FetchError):
    """The transport did not produce a response classifiable as HTTP."""

    def __init__(self, message: str = "The server did not return an HTTP response.") -> None:
        super().__init__(message)


class NonSuccessStatusError(FetchError):
    """The HTTP status code is outside the success range."""

    def __init__(self, status_code: int, message: str | None = None) -> None:
        self.status_code = status_code
        super().__init__(message or f"GitHub API returned HTTP {status_code}.")


class DecodeError(FetchError):
    """The response body does not match the expected schema."""


class NetworkError(FetchError):
    """Connection, timeout or other transport failure below HTTP."""


# ── Screen errors ───────────────────────────────────────────────────────────


class ScreenError(RepoBrowserError):
    """Invalid use of a repos screen."""


class ScreenNotFoundError(ScreenError):
    """No screen is registered under the given id."""


class ScreenClosedError(ScreenError):
    """The screen has been torn down."""


class ScreenAlreadyActivatedError(ScreenError):
    """The screen already started its fetch."""


class InvalidTransitionError(ScreenError):
    """The requested navigation is not allowed from the current state."""


class UnknownRepoError(ScreenError):
    """The repository is not part of the visible list."""
