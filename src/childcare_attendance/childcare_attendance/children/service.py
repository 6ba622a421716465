from __future__ import annotations

import logging
import uuid
from dataclasses import replace
from typing import Callable, List, Optional

from ..common.validators import optional_text, require_non_empty
from ..core.constants import CHILD_ID_PREFIX
from ..core.exceptions import ValidationError
from ..state.model import Snapshot
from .model import Child, ChildFields

logger = logging.getLogger(__name__)

IdFactory = Callable[[], str]


def new_child_id() -> str:
    return f"{CHILD_ID_PREFIX}{uuid.uuid4().hex[:12]}"


class RosterService:
    """Use case: manage the roster.

    Invalid input never raises out of here; the snapshot comes back unchanged
    and the form collaborator is expected to have flagged the problem already.
    """

    def __init__(self, *, id_factory: Optional[IdFactory] = None):
        self._id_factory = id_factory or new_child_id

    def _clean(self, fields: ChildFields) -> ChildFields:
        return ChildFields(
            first_name=require_non_empty(fields.first_name, "First name"),
            last_name=require_non_empty(fields.last_name, "Last name"),
            guardian=require_non_empty(fields.guardian, "Guardian"),
            allergies=optional_text(fields.allergies),
            is_active=bool(fields.is_active),
        )

    def add_child(self, snapshot: Snapshot, fields: ChildFields) -> Snapshot:
        try:
            f = self._clean(fields)
        except ValidationError as e:
            logger.warning("Add child declined: %s", e)
            return snapshot

        child = Child(
            id=self._id_factory(),
            first_name=f.first_name,
            last_name=f.last_name,
            guardian=f.guardian,
            allergies=f.allergies,
            is_active=f.is_active,
        )
        logger.info("Added child id=%s", child.id)
        return snapshot.with_children(snapshot.children + (child,))

    def update_child(self, snapshot: Snapshot, child_id: str, fields: ChildFields) -> Snapshot:
        if snapshot.find_child(child_id) is None:
            logger.warning("Update declined: unknown child id=%s", child_id)
            return snapshot
        try:
            f = self._clean(fields)
        except ValidationError as e:
            logger.warning("Update child id=%s declined: %s", child_id, e)
            return snapshot

        children = tuple(
            replace(
                c,
                first_name=f.first_name,
                last_name=f.last_name,
                guardian=f.guardian,
                allergies=f.allergies,
                is_active=f.is_active,
            )
            if c.id == child_id
            else c
            for c in snapshot.children
        )
        logger.info("Updated child id=%s", child_id)
        return snapshot.with_children(children)

    def set_active(self, snapshot: Snapshot, child_id: str, is_active: bool) -> Snapshot:
        if snapshot.find_child(child_id) is None:
            return snapshot
        children = tuple(replace(c, is_active=is_active) if c.id == child_id else c for c in snapshot.children)
        logger.info("%s child id=%s", "Restored" if is_active else "Archived", child_id)
        return snapshot.with_children(children)

    def toggle_active(self, snapshot: Snapshot, child_id: str) -> Snapshot:
        child = snapshot.find_child(child_id)
        if child is None:
            return snapshot
        return self.set_active(snapshot, child_id, not child.is_active)

    def roster(self, snapshot: Snapshot) -> List[Child]:
        """Active children first, then by last name and first name."""
        return sorted(
            snapshot.children,
            key=lambda c: (0 if c.is_active else 1, f"{c.last_name} {c.first_name}".casefold()),
        )

    def active_children(self, snapshot: Snapshot) -> List[Child]:
        return [c for c in snapshot.children if c.is_active]
