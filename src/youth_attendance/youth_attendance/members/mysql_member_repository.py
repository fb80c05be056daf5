from __future__ import annotations

from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import as_iso_date, db_cursor, fetchall, fetchone
from .model import Member
from .repository import MemberRepository

_COLUMNS = "member_id, name, phone, birth_date, is_new_member, memo, created_at"


def _to_member(row: dict) -> Member:
    return Member(
        member_id=int(row["member_id"]),
        name=row["name"],
        phone=row["phone"],
        birth_date=as_iso_date(row.get("birth_date")),
        is_new_member=bool(row.get("is_new_member", True)),
        memo=row.get("memo"),
        created_at=row.get("created_at"),
    )


class MySQLMemberRepository(MemberRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[Member]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM members ORDER BY name ASC, member_id ASC")
            return [_to_member(r) for r in fetchall(cur)]

    def list_by_birth_date(self) -> Sequence[Member]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM members
                ORDER BY birth_date IS NULL, birth_date ASC, name ASC
                """
            )
            return [_to_member(r) for r in fetchall(cur)]

    def get_by_id(self, member_id: int) -> Optional[Member]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM members WHERE member_id=%s", (int(member_id),))
            row = fetchone(cur)
            return _to_member(row) if row else None

    def find_by_phone_suffix(self, digits: str) -> Sequence[Member]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM members
                WHERE REPLACE(REPLACE(phone, '-', ''), ' ', '') LIKE %s
                ORDER BY name ASC
                """,
                (f"%{digits}",),
            )
            return [_to_member(r) for r in fetchall(cur)]

    def create(
        self,
        *,
        name: str,
        phone: str,
        birth_date: Optional[str],
        is_new_member: bool,
        memo: Optional[str],
    ) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO members(name, phone, birth_date, is_new_member, memo)
                VALUES(%s,%s,%s,%s,%s)
                """,
                (name, phone, birth_date, int(is_new_member), memo),
            )
            return int(cur.lastrowid)

    def update(
        self,
        member_id: int,
        *,
        name: str,
        phone: str,
        birth_date: Optional[str],
        is_new_member: bool,
        memo: Optional[str],
    ) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE members
                SET name=%s, phone=%s, birth_date=%s, is_new_member=%s, memo=%s
                WHERE member_id=%s
                """,
                (name, phone, birth_date, int(is_new_member), memo, int(member_id)),
            )
            return cur.rowcount > 0

    def delete(self, member_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM members WHERE member_id=%s", (int(member_id),))
            return cur.rowcount > 0
