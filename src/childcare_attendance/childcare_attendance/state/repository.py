from __future__ import annotations

from typing import Optional, Protocol

from .model import Snapshot


class StateStore(Protocol):
    """Persistence for the whole snapshot under one fixed key.

    ``load`` returns None when nothing is stored or the stored data cannot be
    decoded; it does not raise for either case.
    """

    def load(self) -> Optional[Snapshot]:
        raise NotImplementedError

    def save(self, snapshot: Snapshot) -> None:
        raise NotImplementedError

    def clear(self) -> None:
        raise NotImplementedError
