from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Member


class MemberRepository(Protocol):
    """명단 저장소 인터페이스.

    서비스 계층은 이 인터페이스에만 의존하고 구체적인 DB에는 의존하지 않는다.
    create/update는 전화번호 중복 시 DuplicateKeyError를 발생시킨다.
    """

    def list_all(self) -> Sequence[Member]:
        """Ordered by name, then member_id."""
        raise NotImplementedError

    def list_by_birth_date(self) -> Sequence[Member]:
        """Ordered by birth_date ascending (missing last), then name."""
        raise NotImplementedError

    def get_by_id(self, member_id: int) -> Optional[Member]:
        raise NotImplementedError

    def find_by_phone_suffix(self, digits: str) -> Sequence[Member]:
        raise NotImplementedError

    def create(
        self,
        *,
        name: str,
        phone: str,
        birth_date: Optional[str],
        is_new_member: bool,
        memo: Optional[str],
    ) -> int:
        raise NotImplementedError

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
        raise NotImplementedError

    def delete(self, member_id: int) -> bool:
        raise NotImplementedError
