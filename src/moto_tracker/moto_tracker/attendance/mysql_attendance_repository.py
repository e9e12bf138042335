from __future__ import annotations

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone
from . import codec
from .model import AttendanceStore, DayRecord


class MySQLAttendanceRepository:
    """Stores the serialized store in one row of `kv_store`."""

    def __init__(self, conn: DatabaseConnection, *, key: str):
        self._conn = conn
        self._key = key

    @property
    def key(self) -> str:
        return self._key

    def load(self) -> dict[str, DayRecord]:
        with db_cursor(self._conn) as (_, cur):
            cur.execute("SELECT slot_value FROM kv_store WHERE slot_key=%s", (self._key,))
            row = fetchone(cur)
        if not row:
            return {}
        return codec.loads(row.get("slot_value"))

    def save(self, store: AttendanceStore) -> None:
        with db_cursor(self._conn) as (_, cur):
            cur.execute(
                """
                INSERT INTO kv_store (slot_key, slot_value)
                VALUES (%s, %s)
                ON DUPLICATE KEY UPDATE slot_value=VALUES(slot_value)
                """,
                (self._key, codec.dumps(store)),
            )
