from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple

from ..attendance.model import AttendanceHistory, AttendanceRecord
from ..children.model import Child


@dataclass(frozen=True)
class Snapshot:
    """Roster plus full attendance history; the unit of persistence.

    Snapshots are never mutated. Operations return a new snapshot that shares
    every untouched day map and record with the old one.
    """

    children: Tuple[Child, ...] = ()
    history: AttendanceHistory = field(default_factory=dict)

    def find_child(self, child_id: str) -> Optional[Child]:
        for child in self.children:
            if child.id == child_id:
                return child
        return None

    def day(self, key: str) -> Dict[str, AttendanceRecord]:
        return dict(self.history.get(key) or {})

    def record(self, key: str, child_id: str) -> Optional[AttendanceRecord]:
        return (self.history.get(key) or {}).get(child_id)

    def with_record(self, key: str, child_id: str, record: AttendanceRecord) -> "Snapshot":
        day = self.day(key)
        day[child_id] = record
        history = dict(self.history)
        history[key] = day
        return Snapshot(children=self.children, history=history)

    def with_children(self, children: Tuple[Child, ...]) -> "Snapshot":
        return Snapshot(children=tuple(children), history=self.history)
