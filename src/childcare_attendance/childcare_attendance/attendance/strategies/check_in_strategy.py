from __future__ import annotations

from typing import Optional

from ...core.enums import AttendanceStatus
from ..model import AttendanceRecord
from .base import AttendanceTransition


class CheckInTransition(AttendanceTransition):
    """Start a new session; any earlier check-out for the day is discarded."""

    def apply(self, *, existing: Optional[AttendanceRecord], now_ms: int, note: str = "") -> AttendanceRecord:
        return AttendanceRecord(
            status=AttendanceStatus.PRESENT,
            check_in_ms=now_ms,
            check_out_ms=None,
            total_minutes=None,
            check_in_note=note or "",
            check_out_note="",
        )
