from __future__ import annotations

import logging
from typing import Optional

import mysql.connector

from ..core.constants import STORAGE_KEY
from ..core.exceptions import StateDecodeError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone
from . import codec
from .model import Snapshot
from .repository import StateStore

logger = logging.getLogger(__name__)

SCHEMA_SQL = """
CREATE TABLE IF NOT EXISTS app_state (
    state_key VARCHAR(64) NOT NULL PRIMARY KEY,
    payload LONGTEXT NOT NULL,
    updated_at TIMESTAMP NOT NULL DEFAULT CURRENT_TIMESTAMP ON UPDATE CURRENT_TIMESTAMP
)
"""


class MySQLStateStore(StateStore):
    """One row per key in ``app_state``; the payload is the encoded snapshot."""

    def __init__(self, conn_factory: DatabaseConnection, *, key: str = STORAGE_KEY):
        self._conn_factory = conn_factory
        self._key = key

    def ensure_schema(self) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(SCHEMA_SQL)

    def load(self) -> Optional[Snapshot]:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute("SELECT payload FROM app_state WHERE state_key=%s", (self._key,))
                r = fetchone(cur)
        except mysql.connector.Error as e:
            logger.warning("Loading state %r failed: %s", self._key, e)
            return None

        if not r:
            return None
        try:
            return codec.loads(r.get("payload"))
        except StateDecodeError as e:
            logger.warning("Stored state under %r is malformed: %s", self._key, e)
            return None

    def save(self, snapshot: Snapshot) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO app_state(state_key, payload)
                VALUES(%s,%s)
                ON DUPLICATE KEY UPDATE payload=VALUES(payload)
                """,
                (self._key, codec.dumps(snapshot)),
            )

    def clear(self) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM app_state WHERE state_key=%s", (self._key,))
