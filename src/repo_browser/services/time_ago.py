"""Abbreviated single-unit relative time ("3d", "5h", "12m", "0s")."""

from __future__ import annotations

from datetime import datetime

_UNITS: list[tuple[str, int]] = [
    ("d", 86_400),
    ("h", 3_600),
    ("m", 60),
    ("s", 1),
]


def time_ago_since(then: datetime, now: datetime) -> str:
    """Largest whole unit between *then* and *now*, truncated toward zero."""
    elapsed = int((now - then).total_seconds())
    sign = "-" if elapsed < 0 else ""
    elapsed = abs(elapsed)
    for suffix, seconds in _UNITS:
        if elapsed >= seconds:
            return f"{sign}{elapsed // seconds}{suffix}"
    return "0s"
