from __future__ import annotations

from typing import Dict, List, Sequence

from ..attendance.model import AttendanceHistory
from ..children.model import Child
from ..state.model import Snapshot
from .model import ReportRow


def aggregate(children: Sequence[Child], history: AttendanceHistory) -> List[ReportRow]:
    """Reduce the whole history into one row per roster child.

    Rows are seeded from the roster, so children without records still show
    up with zero totals. Sorted by minutes, descending; ties keep roster order.
    """
    totals: Dict[str, Dict[str, int]] = {}

    for key in sorted(history.keys()):
        day = history.get(key) or {}
        for child_id, r in day.items():
            s = totals.get(child_id)
            if not s:
                s = {"days": 0, "minutes": 0}
                totals[child_id] = s
            s["minutes"] += r.total_minutes or 0
            if r.counts_as_present:
                s["days"] += 1

    rows = []
    for child in children:
        t = totals.get(child.id) or {"days": 0, "minutes": 0}
        rows.append(
            ReportRow(
                child_id=child.id,
                name=child.display_name,
                days=int(t["days"]),
                minutes=int(t["minutes"]),
                is_active=child.is_active,
            )
        )

    rows.sort(key=lambda x: x.minutes, reverse=True)
    return rows


class ReportService:
    def aggregate(self, snapshot: Snapshot) -> List[ReportRow]:
        return aggregate(snapshot.children, snapshot.history)
