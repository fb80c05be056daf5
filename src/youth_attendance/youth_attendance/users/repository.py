from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ..core.enums import Role
from .model import User


class UserRepository(Protocol):
    """관리자 계정 저장소 인터페이스 (email은 유일 키)."""

    def get_by_id(self, user_id: int) -> Optional[User]:
        raise NotImplementedError

    def get_by_email(self, email: str) -> Optional[User]:
        raise NotImplementedError

    def create_user(self, *, email: str, name: str, password_hash: str, role: Role, approved: bool) -> int:
        raise NotImplementedError

    def list_pending(self) -> Sequence[User]:
        """Unapproved accounts, oldest first."""
        raise NotImplementedError

    def set_approved(self, user_id: int, *, approved: bool) -> bool:
        raise NotImplementedError
