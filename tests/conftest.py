from __future__ import annotations

from datetime import datetime, timedelta
from typing import Optional

import pytest

from childcare_attendance.common.datetime_utils import to_epoch_ms
from childcare_attendance.state.model import Snapshot


class FakeClock:
    """Settable clock returning epoch milliseconds."""

    def __init__(self, now: datetime):
        self.now = now

    def __call__(self) -> int:
        return to_epoch_ms(self.now)

    def set(self, now: datetime) -> None:
        self.now = now

    def advance(self, *, minutes: int = 0, seconds: int = 0) -> None:
        self.now = self.now + timedelta(minutes=minutes, seconds=seconds)


class InMemoryStore:
    def __init__(self, snapshot: Optional[Snapshot] = None):
        self.snapshot = snapshot
        self.saves = 0

    def load(self) -> Optional[Snapshot]:
        return self.snapshot

    def save(self, snapshot: Snapshot) -> None:
        self.snapshot = snapshot
        self.saves += 1

    def clear(self) -> None:
        self.snapshot = None


class SequentialIds:
    def __init__(self, prefix: str = "k_test"):
        self._prefix = prefix
        self._n = 0

    def __call__(self) -> str:
        self._n += 1
        return f"{self._prefix}{self._n}"


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2026, 2, 1, 9, 0, 0)


@pytest.fixture
def clock(fixed_now) -> FakeClock:
    return FakeClock(fixed_now)


@pytest.fixture
def memory_store() -> InMemoryStore:
    return InMemoryStore()


@pytest.fixture
def ids() -> SequentialIds:
    return SequentialIds()
