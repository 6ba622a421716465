from __future__ import annotations

import logging
from typing import List, Optional

from ..common.datetime_utils import Clock, day_key, format_clock, format_duration, system_clock
from ..core.enums import ActionType, AttendanceStatus
from ..state.model import Snapshot
from .factory import AttendanceTransitionFactory
from .model import AttendanceRecord, TodayRow

logger = logging.getLogger(__name__)


class AttendanceService:
    """Use case: check children in and out for the current day.

    Every call takes the caller's snapshot and returns a new one; persisting
    it is the caller's job.
    """

    def __init__(
        self,
        *,
        clock: Optional[Clock] = None,
        transition_factory: Optional[AttendanceTransitionFactory] = None,
    ):
        self._clock = clock or system_clock
        self._factory = transition_factory or AttendanceTransitionFactory()

    def today(self) -> str:
        return day_key(self._clock())

    def apply(self, snapshot: Snapshot, child_id: str, action: ActionType, note: str = "") -> Snapshot:
        now_ms = self._clock()
        key = day_key(now_ms)
        existing = snapshot.record(key, child_id)

        transition = self._factory.for_action(action)
        record = transition.apply(existing=existing, now_ms=now_ms, note=note)

        logger.info("%s child=%s day=%s minutes=%s", action.value, child_id, key, record.total_minutes)
        return snapshot.with_record(key, child_id, record)

    def check_in(self, snapshot: Snapshot, child_id: str, note: str = "") -> Snapshot:
        return self.apply(snapshot, child_id, ActionType.CHECK_IN, note)

    def check_out(self, snapshot: Snapshot, child_id: str, note: str = "") -> Snapshot:
        return self.apply(snapshot, child_id, ActionType.CHECK_OUT, note)

    def record_for(self, snapshot: Snapshot, child_id: str, day: Optional[str] = None) -> Optional[AttendanceRecord]:
        return snapshot.record(day or self.today(), child_id)

    def today_rows(self, snapshot: Snapshot) -> List[TodayRow]:
        """Daily view: active children only, in roster order."""
        key = self.today()
        return [
            self.to_row(child.id, child.display_name, snapshot.record(key, child.id))
            for child in snapshot.children
            if child.is_active
        ]

    def to_row(self, child_id: str, name: str, r: Optional[AttendanceRecord]) -> TodayRow:
        present = bool(r and r.is_present)
        notes = []
        if r and r.check_in_note:
            notes.append(f"In: {r.check_in_note}")
        if r and r.check_out_note:
            notes.append(f"Out: {r.check_out_note}")

        return TodayRow(
            child_id=child_id,
            name=name,
            status=(AttendanceStatus.PRESENT if present else AttendanceStatus.ABSENT).value,
            check_in=format_clock(r.check_in_ms if r else None),
            check_out=format_clock(r.check_out_ms if r else None),
            total=format_duration(r.total_minutes if r else None),
            notes=" | ".join(notes),
            next_action=(ActionType.CHECK_OUT if present else ActionType.CHECK_IN).value,
        )
