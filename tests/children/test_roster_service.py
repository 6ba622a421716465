from __future__ import annotations

import pytest

from childcare_attendance.children.model import Child, ChildFields
from childcare_attendance.children.service import RosterService, new_child_id
from childcare_attendance.state.model import Snapshot


def _snapshot() -> Snapshot:
    return Snapshot(
        children=(
            Child(id="k1", first_name="Hannah", last_name="C.", guardian="Andrea"),
            Child(id="k2", first_name="Morgan", last_name="C.", guardian="Andrea", allergies="Peanuts"),
        ),
        history={"2026-02-01": {}},
    )


def test_add_child_uses_injected_id_and_trims(ids):
    svc = RosterService(id_factory=ids)
    before = _snapshot()

    after = svc.add_child(before, ChildFields(first_name=" Ava ", last_name=" B. ", guardian=" Sam ", allergies=" Dairy "))

    assert len(before.children) == 2
    assert after.children[-1] == Child(id="k_test1", first_name="Ava", last_name="B.", guardian="Sam", allergies="Dairy")
    assert after.history is before.history


@pytest.mark.parametrize(
    "fields",
    [
        ChildFields(first_name="", last_name="B.", guardian="Sam"),
        ChildFields(first_name="Ava", last_name="  ", guardian="Sam"),
        ChildFields(first_name="Ava", last_name="B.", guardian=""),
    ],
)
def test_add_child_declines_missing_required_fields(ids, fields):
    before = _snapshot()
    assert RosterService(id_factory=ids).add_child(before, fields) is before


def test_update_child_preserves_identity(ids):
    svc = RosterService(id_factory=ids)
    after = svc.update_child(
        _snapshot(),
        "k2",
        ChildFields(first_name="Morgan", last_name="Carter", guardian="Andrea", allergies="", is_active=False),
    )

    k2 = after.find_child("k2")
    assert k2.id == "k2"
    assert k2.last_name == "Carter"
    assert k2.allergies == ""
    assert k2.is_active is False
    assert [c.id for c in after.children] == ["k1", "k2"]


def test_update_child_declines_invalid_or_unknown(ids):
    svc = RosterService(id_factory=ids)
    before = _snapshot()
    assert svc.update_child(before, "k1", ChildFields(first_name="Hannah", last_name="C.", guardian=" ")) is before
    assert svc.update_child(before, "nope", ChildFields(first_name="A", last_name="B", guardian="C")) is before


def test_toggle_active_archives_and_restores():
    svc = RosterService()
    s = svc.toggle_active(_snapshot(), "k1")
    assert s.find_child("k1").is_active is False
    assert [c.id for c in svc.active_children(s)] == ["k2"]
    s = svc.toggle_active(s, "k1")
    assert s.find_child("k1").is_active is True


def test_roster_orders_active_first_then_by_name(ids):
    svc = RosterService(id_factory=ids)
    s = _snapshot()
    s = svc.add_child(s, ChildFields(first_name="Zed", last_name="Adams", guardian="Kim", is_active=False))
    s = svc.add_child(s, ChildFields(first_name="Ben", last_name="adams", guardian="Kim"))

    names = [c.display_name for c in svc.roster(s)]

    assert names == ["Ben adams", "Hannah C.", "Morgan C.", "Zed Adams"]


def test_default_ids_are_unique_and_prefixed():
    a, b = new_child_id(), new_child_id()
    assert a.startswith("k_")
    assert a != b
