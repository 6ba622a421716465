from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Mapping, Optional

from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one child's attendance on one day."""

    status: AttendanceStatus
    check_in_ms: Optional[int] = None
    check_out_ms: Optional[int] = None
    total_minutes: Optional[int] = None
    check_in_note: str = ""
    check_out_note: str = ""

    @property
    def is_present(self) -> bool:
        return self.status == AttendanceStatus.PRESENT

    @property
    def counts_as_present(self) -> bool:
        """Whether the record counts as an attended day in reports.

        Tolerates partially filled records: any of status, check-in time or
        a positive duration is enough.
        """
        return self.is_present or bool(self.check_in_ms) or (self.total_minutes or 0) > 0


DayAttendance = Mapping[str, AttendanceRecord]
AttendanceHistory = Mapping[str, DayAttendance]


@dataclass(frozen=True)
class TodayRow:
    """Read-model for the daily attendance view."""

    child_id: str
    name: str
    status: str
    check_in: str
    check_out: str
    total: str
    notes: str
    next_action: str

    def to_dict(self) -> Dict[str, str]:
        return {
            "child_id": self.child_id,
            "name": self.name,
            "status": self.status,
            "check_in": self.check_in,
            "check_out": self.check_out,
            "total": self.total,
            "notes": self.notes,
            "next_action": self.next_action,
        }
