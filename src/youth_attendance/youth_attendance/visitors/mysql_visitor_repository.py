from __future__ import annotations

from typing import Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import as_iso_date, db_cursor, fetchall, fetchone
from .repository import VisitorRepository


class MySQLVisitorRepository(VisitorRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def insert(self, *, date: str) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("INSERT INTO visitors(date) VALUES(%s)", (date,))
            return int(cur.lastrowid)

    def list_dates(self) -> Sequence[str]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT date FROM visitors ORDER BY date DESC")
            return [as_iso_date(r["date"]) for r in fetchall(cur)]

    def count_for_date(self, date: str) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT COUNT(*) AS cnt FROM visitors WHERE date=%s", (date,))
            row = fetchone(cur)
            return int(row["cnt"]) if row else 0
