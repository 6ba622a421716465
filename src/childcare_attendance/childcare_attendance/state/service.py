from __future__ import annotations

import logging
from typing import Optional

from ..children.model import Child
from ..common.datetime_utils import Clock, day_key, system_clock
from ..core.constants import DEFAULT_CHILDREN
from .model import Snapshot
from .repository import StateStore

logger = logging.getLogger(__name__)


def default_snapshot(today: str) -> Snapshot:
    """Seed used when nothing usable is stored: sample roster, empty day."""
    children = tuple(
        Child(
            id=c["id"],
            first_name=c["firstName"],
            last_name=c["lastName"],
            guardian=c["guardian"],
            allergies=c["allergies"],
            is_active=c["isActive"],
        )
        for c in DEFAULT_CHILDREN
    )
    return Snapshot(children=children, history={today: {}})


class StateService:
    """Owns the load/commit cycle between the caller and the store."""

    def __init__(self, store: StateStore, *, clock: Optional[Clock] = None):
        self._store = store
        self._clock = clock or system_clock

    def current(self) -> Snapshot:
        snapshot = self._store.load()
        if snapshot is None:
            logger.info("No stored state; starting from default seed")
            return default_snapshot(day_key(self._clock()))
        return snapshot

    def commit(self, snapshot: Snapshot) -> Snapshot:
        self._store.save(snapshot)
        return snapshot

    def reset(self) -> Snapshot:
        self._store.clear()
        logger.info("Stored state cleared")
        return default_snapshot(day_key(self._clock()))
