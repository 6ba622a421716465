from __future__ import annotations

from dataclasses import dataclass

from ..common.datetime_utils import format_duration


@dataclass(frozen=True)
class ReportRow:
    """Read-model: cumulative attendance for one child across all stored days."""

    child_id: str
    name: str
    days: int
    minutes: int
    is_active: bool

    @property
    def total(self) -> str:
        return format_duration(self.minutes)

    def to_dict(self) -> dict:
        return {
            "child_id": self.child_id,
            "name": self.name,
            "days": self.days,
            "minutes": self.minutes,
            "total": self.total,
            "is_active": self.is_active,
        }
