from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import ActionType
from ..core.exceptions import ValidationError
from .strategies.base import AttendanceTransition
from .strategies.check_in_strategy import CheckInTransition
from .strategies.check_out_strategy import CheckOutTransition


@dataclass
class AttendanceTransitionFactory:
    """Factory Pattern: choose the transition for an operator action."""

    def for_action(self, action: ActionType) -> AttendanceTransition:
        if action == ActionType.CHECK_IN:
            return CheckInTransition()
        if action == ActionType.CHECK_OUT:
            return CheckOutTransition()
        raise ValidationError(f"Unknown action: {action!r}")
