from __future__ import annotations

from typing import Optional

from ...common.datetime_utils import minutes_between
from ...core.enums import AttendanceStatus
from ..model import AttendanceRecord
from .base import AttendanceTransition


class CheckOutTransition(AttendanceTransition):
    """Close the session, keeping the check-in side of the existing record."""

    def apply(self, *, existing: Optional[AttendanceRecord], now_ms: int, note: str = "") -> AttendanceRecord:
        check_in_ms = existing.check_in_ms if existing else None
        total = minutes_between(check_in_ms, now_ms)
        return AttendanceRecord(
            status=AttendanceStatus.ABSENT,
            check_in_ms=check_in_ms,
            check_out_ms=now_ms,
            total_minutes=total if total is not None else 0,
            check_in_note=(existing.check_in_note if existing else "") or "",
            check_out_note=note or "",
        )
