from __future__ import annotations

from typing import Optional, Sequence

from ..core.enums import Role
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import User
from .repository import UserRepository

_COLUMNS = "user_id, email, name, password_hash, role, approved, created_at"


def _to_user(r: dict) -> User:
    return User(
        user_id=int(r["user_id"]),
        email=r["email"],
        name=r.get("name") or "",
        password_hash=r["password_hash"],
        role=Role(r["role"]),
        approved=bool(r.get("approved")),
        created_at=r.get("created_at"),
    )


class MySQLUserRepository(UserRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, user_id: int) -> Optional[User]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM users WHERE user_id=%s", (int(user_id),))
            r = fetchone(cur)
            return _to_user(r) if r else None

    def get_by_email(self, email: str) -> Optional[User]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM users WHERE email=%s", (email,))
            r = fetchone(cur)
            return _to_user(r) if r else None

    def create_user(self, *, email: str, name: str, password_hash: str, role: Role, approved: bool) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO users(email, name, password_hash, role, approved)
                VALUES(%s,%s,%s,%s,%s)
                """,
                (email, name, password_hash, role.value, int(approved)),
            )
            return int(cur.lastrowid)

    def list_pending(self) -> Sequence[User]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM users WHERE approved=0 ORDER BY created_at ASC, user_id ASC")
            return [_to_user(r) for r in fetchall(cur)]

    def set_approved(self, user_id: int, *, approved: bool) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("UPDATE users SET approved=%s WHERE user_id=%s", (int(approved), int(user_id)))
            return cur.rowcount > 0
