"""Example: drive the engine through the service layer (no Flask).

The caller owns the snapshot: load it, pass it through each call, commit the result.
"""

import tempfile
from pathlib import Path

from childcare_attendance.container import build_container
from childcare_attendance.state.file_state_store import FileStateStore


def main():
    path = Path(tempfile.mkdtemp()) / "state.json"
    container = build_container(store=FileStateStore(path))

    snapshot = container.state_service.current()
    snapshot = container.attendance_service.check_in(snapshot, "k1", "Dropped off by Mom")
    snapshot = container.state_service.commit(snapshot)

    for row in container.attendance_service.today_rows(snapshot):
        print(row.to_dict())
    for row in container.report_service.aggregate(snapshot):
        print(row.to_dict())


if __name__ == "__main__":
    main()
