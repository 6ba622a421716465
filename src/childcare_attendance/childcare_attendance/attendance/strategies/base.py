from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from ..model import AttendanceRecord


class AttendanceTransition(ABC):
    """Strategy Pattern: how one operator action turns into the day's record.

    Transitions are total: they accept any existing record (or none) and
    never refuse the action.
    """

    @abstractmethod
    def apply(self, *, existing: Optional[AttendanceRecord], now_ms: int, note: str = "") -> AttendanceRecord:
        raise NotImplementedError
