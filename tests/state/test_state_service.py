from __future__ import annotations

from childcare_attendance.state.model import Snapshot
from childcare_attendance.state.service import StateService, default_snapshot


def test_falls_back_to_default_seed(memory_store, clock):
    snap = StateService(memory_store, clock=clock).current()

    assert [c.id for c in snap.children] == ["k1", "k2"]
    assert snap.find_child("k2").allergies == "Peanuts"
    assert snap.history == {"2026-02-01": {}}


def test_current_returns_stored_snapshot(memory_store, clock):
    memory_store.snapshot = Snapshot()
    assert StateService(memory_store, clock=clock).current() == Snapshot()


def test_commit_saves_whole_snapshot(memory_store, clock):
    svc = StateService(memory_store, clock=clock)
    snap = default_snapshot("2026-02-01")

    assert svc.commit(snap) is snap
    assert memory_store.snapshot is snap
    assert memory_store.saves == 1


def test_reset_clears_store_and_reseeds(memory_store, clock):
    memory_store.snapshot = Snapshot()
    snap = StateService(memory_store, clock=clock).reset()

    assert memory_store.snapshot is None
    assert snap == default_snapshot("2026-02-01")
