"""Timestamps and identifiers used in reports."""

from __future__ import annotations

import time
import uuid


def get_now() -> int:
    """Return the current time in milliseconds since the epoch."""
    return time.time_ns() // 1_000_000


def new_uuid() -> uuid.UUID:
    """Return a new time-based UUID."""
    return uuid.uuid1()