"""Port: clock — the source of "now" for relative time display."""

from __future__ import annotations

from datetime import datetime
from typing import Protocol


class Clock(Protocol):
    """Abstract contract for reading the current time."""

    def now(self) -> datetime:
        """Return the current instant as a timezone-aware datetime."""
        ...
