"""Snapshot <-> JSON document.

The stored document keeps the field names the single-device app has always
written: ``{"kids": [...], "attendance": {day: {child_id: record}}}``.
"""

from __future__ import annotations

import json
import math
from typing import Any, Dict, Optional

from ..attendance.model import AttendanceRecord
from ..children.model import Child
from ..core.enums import AttendanceStatus
from ..core.exceptions import StateDecodeError
from .model import Snapshot


def _child_to_dict(c: Child) -> Dict[str, Any]:
    return {
        "id": c.id,
        "firstName": c.first_name,
        "lastName": c.last_name,
        "isActive": c.is_active,
        "guardian": c.guardian,
        "allergies": c.allergies,
    }


def _record_to_dict(r: AttendanceRecord) -> Dict[str, Any]:
    out: Dict[str, Any] = {"status": r.status.value}
    if r.check_in_ms is not None:
        out["checkInMs"] = r.check_in_ms
    if r.check_out_ms is not None:
        out["checkOutMs"] = r.check_out_ms
    if r.total_minutes is not None:
        out["totalMinutes"] = r.total_minutes
    out["checkInNote"] = r.check_in_note
    out["checkOutNote"] = r.check_out_note
    return out


def snapshot_to_dict(snapshot: Snapshot) -> Dict[str, Any]:
    return {
        "kids": [_child_to_dict(c) for c in snapshot.children],
        "attendance": {
            key: {child_id: _record_to_dict(r) for child_id, r in day.items()}
            for key, day in snapshot.history.items()
        },
    }


def _text(raw: Dict[str, Any], name: str, *, required: bool = False) -> str:
    value = raw.get(name)
    if value is None and not required:
        return ""
    if not isinstance(value, str):
        raise StateDecodeError(f"{name} must be a string")
    return value


def _ms(raw: Dict[str, Any], name: str) -> Optional[int]:
    value = raw.get(name)
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise StateDecodeError(f"{name} must be a number")
    if isinstance(value, float) and not math.isfinite(value):
        raise StateDecodeError(f"{name} must be finite")
    return int(value)


def _child_from_dict(raw: Any) -> Child:
    if not isinstance(raw, dict):
        raise StateDecodeError("child entry must be an object")
    is_active = raw.get("isActive", True)
    if not isinstance(is_active, bool):
        raise StateDecodeError("isActive must be a boolean")
    return Child(
        id=_text(raw, "id", required=True),
        first_name=_text(raw, "firstName", required=True),
        last_name=_text(raw, "lastName", required=True),
        guardian=_text(raw, "guardian", required=True),
        allergies=_text(raw, "allergies"),
        is_active=is_active,
    )


def _record_from_dict(raw: Any) -> AttendanceRecord:
    if not isinstance(raw, dict):
        raise StateDecodeError("attendance entry must be an object")
    try:
        status = AttendanceStatus(raw.get("status"))
    except ValueError as e:
        raise StateDecodeError(f"unknown status {raw.get('status')!r}") from e
    return AttendanceRecord(
        status=status,
        check_in_ms=_ms(raw, "checkInMs"),
        check_out_ms=_ms(raw, "checkOutMs"),
        total_minutes=_ms(raw, "totalMinutes"),
        check_in_note=_text(raw, "checkInNote"),
        check_out_note=_text(raw, "checkOutNote"),
    )


def snapshot_from_dict(raw: Any) -> Snapshot:
    if not isinstance(raw, dict):
        raise StateDecodeError("state must be an object")
    kids = raw.get("kids")
    attendance = raw.get("attendance")
    if not isinstance(kids, list):
        raise StateDecodeError("kids must be a list")
    if not isinstance(attendance, dict):
        raise StateDecodeError("attendance must be an object")

    history = {}
    for key, day in attendance.items():
        if not isinstance(day, dict):
            raise StateDecodeError(f"attendance[{key!r}] must be an object")
        history[str(key)] = {str(child_id): _record_from_dict(r) for child_id, r in day.items()}

    return Snapshot(children=tuple(_child_from_dict(c) for c in kids), history=history)


def dumps(snapshot: Snapshot) -> str:
    return json.dumps(snapshot_to_dict(snapshot), ensure_ascii=False)


def loads(payload: Optional[str]) -> Snapshot:
    if not isinstance(payload, str):
        raise StateDecodeError("payload must be a string")
    if not payload:
        raise StateDecodeError("empty payload")
    try:
        raw = json.loads(payload)
    except (ValueError, RecursionError) as e:
        raise StateDecodeError(f"invalid JSON: {e}") from e
    return snapshot_from_dict(raw)
