from __future__ import annotations

from datetime import datetime
from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import as_iso_date, db_cursor, fetchall, fetchone
from .model import AttendanceEntry
from .repository import AttendanceRepository

_SELECT = """
    SELECT a.attendance_id, a.member_id, a.date, a.created_at, m.name
    FROM attendances a
    JOIN members m ON m.member_id = a.member_id
"""


def _to_entry(r: dict) -> AttendanceEntry:
    return AttendanceEntry(
        attendance_id=int(r["attendance_id"]),
        member_id=int(r["member_id"]),
        date=as_iso_date(r["date"]),
        name=r.get("name") or "",
        created_at=r.get("created_at"),
    )


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def insert(self, *, member_id: int, date: str) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "INSERT INTO attendances(member_id, date) VALUES(%s,%s)",
                (int(member_id), date),
            )
            return int(cur.lastrowid)

    def get_by_id(self, attendance_id: int) -> Optional[AttendanceEntry]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_SELECT + " WHERE a.attendance_id=%s", (int(attendance_id),))
            r = fetchone(cur)
            return _to_entry(r) if r else None

    def list_all(self) -> Sequence[AttendanceEntry]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_SELECT + " ORDER BY a.date DESC, a.created_at ASC")
            return [_to_entry(r) for r in fetchall(cur)]

    def list_for_date(self, date: str) -> Sequence[AttendanceEntry]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_SELECT + " WHERE a.date=%s ORDER BY a.created_at ASC", (date,))
            return [_to_entry(r) for r in fetchall(cur)]

    def list_between(self, start: str, end: str) -> Sequence[AttendanceEntry]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                _SELECT + " WHERE a.date BETWEEN %s AND %s ORDER BY a.date ASC, a.created_at ASC",
                (start, end),
            )
            return [_to_entry(r) for r in fetchall(cur)]

    def delete(self, attendance_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM attendances WHERE attendance_id=%s", (int(attendance_id),))
            return cur.rowcount > 0

    def update_created_at(self, attendance_id: int, created_at: datetime) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "UPDATE attendances SET created_at=%s WHERE attendance_id=%s",
                (created_at, int(attendance_id)),
            )
            return cur.rowcount > 0
