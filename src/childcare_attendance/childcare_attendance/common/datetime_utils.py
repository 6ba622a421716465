from __future__ import annotations

import math
import time
from datetime import datetime
from typing import Optional, Protocol, Union

from ..core.constants import PLACEHOLDER

Instant = Union[int, float, datetime]


class Clock(Protocol):
    """Returns the current instant as epoch milliseconds."""

    def __call__(self) -> int:
        raise NotImplementedError


def system_clock() -> int:
    """Current wall-clock time in epoch milliseconds.

    Note: Services take a clock argument so tests can pass a fixed one instead.
    """
    return int(time.time() * 1000)


def to_epoch_ms(value: datetime) -> int:
    """Naive datetimes are interpreted as local time."""
    return int(round(value.timestamp() * 1000))


def _local(instant: Instant) -> datetime:
    if isinstance(instant, datetime):
        return instant.astimezone() if instant.tzinfo is not None else instant
    return datetime.fromtimestamp(instant / 1000)


def day_key(instant: Instant) -> str:
    """Local calendar date of ``instant`` as ``YYYY-MM-DD``."""
    d = _local(instant)
    return f"{d.year:04d}-{d.month:02d}-{d.day:02d}"


def format_clock(ms: Optional[int] = None) -> str:
    """Short time of day, e.g. ``9:05 AM``."""
    if not ms:
        return PLACEHOLDER
    d = _local(ms)
    hour = d.hour % 12 or 12
    suffix = "AM" if d.hour < 12 else "PM"
    return f"{hour}:{d.minute:02d} {suffix}"


def format_duration(minutes: Optional[int] = None) -> str:
    if minutes is None:
        return PLACEHOLDER
    h, m = divmod(int(minutes), 60)
    return f"{h}h {m}m" if h > 0 else f"{m}m"


def minutes_between(start_ms: Optional[int] = None, end_ms: Optional[int] = None) -> Optional[int]:
    """Whole minutes from start to end, rounded half up.

    Returns None when an endpoint is missing or when end precedes start.
    """
    if not start_ms or not end_ms:
        return None
    diff = end_ms - start_ms
    if diff < 0:
        return None
    return int(math.floor(diff / 60000 + 0.5))
