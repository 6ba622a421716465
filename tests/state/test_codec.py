from __future__ import annotations

import json

import pytest

from childcare_attendance.attendance.model import AttendanceRecord
from childcare_attendance.children.model import Child
from childcare_attendance.core.enums import AttendanceStatus
from childcare_attendance.core.exceptions import StateDecodeError
from childcare_attendance.state import codec

STORED = {
    "kids": [
        {"id": "k1", "firstName": "Hannah", "lastName": "C.", "isActive": True, "guardian": "Andrea", "allergies": ""},
        {"id": "k2", "firstName": "Morgan", "lastName": "C.", "isActive": False, "guardian": "Andrea"},
    ],
    "attendance": {
        "2026-02-01": {
            "k1": {
                "status": "ABSENT",
                "checkInMs": 1769936400000,
                "checkOutMs": 1769938200000,
                "totalMinutes": 30,
                "checkInNote": "Dropped off by Mom",
                "checkOutNote": "",
            },
            "k2": {"status": "PRESENT", "checkInMs": 1769936400000, "checkInNote": "", "checkOutNote": ""},
        }
    },
}


def test_decodes_stored_document():
    snap = codec.loads(json.dumps(STORED))

    assert snap.children[1] == Child(id="k2", first_name="Morgan", last_name="C.", guardian="Andrea", is_active=False)
    assert snap.record("2026-02-01", "k1") == AttendanceRecord(
        status=AttendanceStatus.ABSENT,
        check_in_ms=1769936400000,
        check_out_ms=1769938200000,
        total_minutes=30,
        check_in_note="Dropped off by Mom",
    )
    assert snap.record("2026-02-01", "k2").check_out_ms is None


def test_encoding_omits_unset_times():
    snap = codec.loads(json.dumps(STORED))
    doc = codec.snapshot_to_dict(snap)

    assert doc["attendance"]["2026-02-01"]["k2"] == {
        "status": "PRESENT",
        "checkInMs": 1769936400000,
        "checkInNote": "",
        "checkOutNote": "",
    }
    assert codec.snapshot_from_dict(doc) == snap


@pytest.mark.parametrize(
    "payload",
    [
        None,
        "",
        "not json",
        "[]",
        json.dumps({"kids": []}),
        json.dumps({"kids": {}, "attendance": {}}),
        json.dumps({"kids": [{"id": "k1"}], "attendance": {}}),
        json.dumps({"kids": [], "attendance": {"2026-02-01": []}}),
        json.dumps({"kids": [], "attendance": {"2026-02-01": {"k1": {"status": "LATE"}}}}),
        json.dumps({"kids": [], "attendance": {"2026-02-01": {"k1": {"status": "ABSENT", "checkInMs": "9am"}}}}),
        json.dumps({"kids": [], "attendance": {"2026-02-01": {"k1": {"status": "ABSENT", "totalMinutes": True}}}}),
        5,
        {"kids": [], "attendance": {}},
        '{"kids": [], "attendance": {"2026-02-01": {"k1": {"status": "ABSENT", "checkInMs": NaN}}}}',
        '{"kids": [], "attendance": {"2026-02-01": {"k1": {"status": "ABSENT", "totalMinutes": Infinity}}}}',
        '{"kids": [], "attendance": {"2026-02-01": {"k1": {"status": "ABSENT", "checkOutMs": -Infinity}}}}',
        "[" * 100_000,
    ],
)
def test_malformed_payloads_raise_decode_error(payload):
    with pytest.raises(StateDecodeError):
        codec.loads(payload)
