from __future__ import annotations

from enum import Enum


class AttendanceStatus(str, Enum):
    """Per-day status. PRESENT means currently checked in."""

    PRESENT = "PRESENT"
    ABSENT = "ABSENT"


class ActionType(str, Enum):
    """Operator actions on the daily attendance view."""

    CHECK_IN = "CHECK_IN"
    CHECK_OUT = "CHECK_OUT"
