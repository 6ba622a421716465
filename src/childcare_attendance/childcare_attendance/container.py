from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .attendance.factory import AttendanceTransitionFactory
from .attendance.service import AttendanceService
from .children.service import IdFactory, RosterService
from .common.datetime_utils import Clock, system_clock
from .core.constants import STORAGE_KEY
from .database.connection import DatabaseConnection, DBConfig
from .reports.service import ReportService
from .state.file_state_store import FileStateStore
from .state.mysql_state_store import MySQLStateStore
from .state.repository import StateStore
from .state.service import StateService


@dataclass(frozen=True)
class Container:
    store: StateStore

    state_service: StateService
    roster_service: RosterService
    attendance_service: AttendanceService
    report_service: ReportService


def build_store(
    *,
    backend: str = "file",
    state_file: str = "instance/state.json",
    state_key: str = STORAGE_KEY,
    db_config: Optional[dict] = None,
) -> StateStore:
    if backend == "mysql":
        conn = DatabaseConnection(DBConfig.from_dict(db_config or {}))
        store = MySQLStateStore(conn, key=state_key)
        store.ensure_schema()
        return store
    if backend == "file":
        return FileStateStore(state_file, key=state_key)
    raise ValueError(f"Unknown state backend: {backend!r}")


def build_container(
    *,
    store: StateStore,
    clock: Optional[Clock] = None,
    id_factory: Optional[IdFactory] = None,
) -> Container:
    clock = clock or system_clock

    return Container(
        store=store,
        state_service=StateService(store, clock=clock),
        roster_service=RosterService(id_factory=id_factory),
        attendance_service=AttendanceService(clock=clock, transition_factory=AttendanceTransitionFactory()),
        report_service=ReportService(),
    )
