"""Time helpers."""

from __future__ import annotations

from datetime import datetime

from .config import TIMEZONE


def utc_now() -> datetime:
    """Return the current datetime in UTC."""
    return datetime.now(TIMEZONE)
