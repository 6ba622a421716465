import pytest

from childcare_attendance.common.notes import compose_note, merge_note, quick_notes_for
from childcare_attendance.core.constants import QUICK_IN, QUICK_OUT
from childcare_attendance.core.enums import ActionType


def test_merge_into_empty_returns_trimmed_addition():
    assert merge_note("", "  Runny nose ") == "Runny nose"
    assert merge_note(None, "Runny nose") == "Runny nose"


def test_empty_addition_returns_trimmed_current():
    assert merge_note("  Late arrival ", "   ") == "Late arrival"
    assert merge_note("Late arrival", None) == "Late arrival"


def test_appends_with_separator():
    assert merge_note("Late arrival", "Runny nose") == "Late arrival • Runny nose"


def test_duplicate_is_suppressed_case_insensitively():
    assert merge_note("Picked up by Mom", "picked up by mom") == "Picked up by Mom"


def test_substring_counts_as_duplicate():
    assert merge_note("Picked up by Mom • No nap", "No nap") == "Picked up by Mom • No nap"


def test_same_quick_note_twice_appears_once():
    note = compose_note("Picked up by Mom", "Picked up by Mom")
    assert note.count("Picked up by Mom") == 1


@pytest.mark.parametrize(
    "current, addition",
    [
        ("", "Ate well"),
        ("No nap", "Ate well"),
        ("No nap • Ate well", "ate well"),
        ("  spaced  ", "  x "),
        ("abc", ""),
    ],
)
def test_merge_is_idempotent(current, addition):
    once = merge_note(current, addition)
    assert merge_note(once, addition) == once


def test_compose_note_keeps_append_order():
    assert compose_note("", "Dropped off by Dad", "Needs wipes") == "Dropped off by Dad • Needs wipes"


def test_quick_notes_per_action():
    assert quick_notes_for(ActionType.CHECK_IN) == QUICK_IN
    assert quick_notes_for(ActionType.CHECK_OUT) == QUICK_OUT
    assert "Picked up by Mom" in quick_notes_for(ActionType.CHECK_OUT)
