from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Child:
    """Domain entity: a child on the roster.

    Archived children keep ``is_active=False``; they are never deleted so
    historical reports still count them.
    """

    id: str
    first_name: str
    last_name: str
    guardian: str
    allergies: str = ""
    is_active: bool = True

    @property
    def display_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "first_name": self.first_name,
            "last_name": self.last_name,
            "name": self.display_name,
            "guardian": self.guardian,
            "allergies": self.allergies,
            "is_active": self.is_active,
        }


@dataclass(frozen=True)
class ChildFields:
    """Editable roster fields as submitted by the form collaborator."""

    first_name: str
    last_name: str
    guardian: str
    allergies: str = ""
    is_active: bool = True
