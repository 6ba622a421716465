from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Dict, Optional, Union

from ..core.constants import STORAGE_KEY
from ..core.exceptions import StateDecodeError
from . import codec
from .model import Snapshot
from .repository import StateStore

logger = logging.getLogger(__name__)


class FileStateStore(StateStore):
    """Key-value JSON file on the local device.

    The file holds ``{key: payload}`` where payload is the encoded snapshot
    string, so several keys can share one file.
    """

    def __init__(self, path: Union[str, Path], *, key: str = STORAGE_KEY):
        self._path = Path(path)
        self._key = key

    def _read_all(self) -> Dict[str, str]:
        if not self._path.exists():
            return {}
        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            logger.warning("State file %s unreadable: %s", self._path, e)
            return {}
        if not isinstance(data, dict):
            logger.warning("State file %s has unexpected layout", self._path)
            return {}
        return data

    def _write_all(self, data: Dict[str, str]) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self._path.with_name(self._path.name + ".tmp")
        tmp.write_text(json.dumps(data, ensure_ascii=False), encoding="utf-8")
        os.replace(tmp, self._path)

    def load(self) -> Optional[Snapshot]:
        payload = self._read_all().get(self._key)
        if payload is None:
            return None
        try:
            return codec.loads(payload)
        except StateDecodeError as e:
            logger.warning("Stored state under %r is malformed: %s", self._key, e)
            return None

    def save(self, snapshot: Snapshot) -> None:
        data = self._read_all()
        data[self._key] = codec.dumps(snapshot)
        self._write_all(data)

    def clear(self) -> None:
        data = self._read_all()
        if self._key in data:
            del data[self._key]
            self._write_all(data)
