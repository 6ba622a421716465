from __future__ import annotations

from functools import reduce
from typing import Optional, Sequence

from ..core.constants import NOTE_SEPARATOR, QUICK_IN, QUICK_OUT
from ..core.enums import ActionType


def merge_note(current: Optional[str], addition: Optional[str]) -> str:
    """Append ``addition`` to ``current`` unless it is already there (case-insensitive)."""
    c = (current or "").strip()
    a = (addition or "").strip()
    if not a:
        return c
    if not c:
        return a
    if a.lower() in c.lower():
        return c
    return f"{c}{NOTE_SEPARATOR}{a}"


def compose_note(*fragments: Optional[str]) -> str:
    """Fold fragments left to right with merge_note."""
    return reduce(merge_note, fragments, "")


def quick_notes_for(action: ActionType) -> Sequence[str]:
    return QUICK_IN if action == ActionType.CHECK_IN else QUICK_OUT
