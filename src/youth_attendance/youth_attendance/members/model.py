from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class Member:
    """도메인 엔티티: 청년 명단의 한 사람.

    birth_date는 YYYY-MM-DD 문자열 (없으면 None).
    """

    member_id: int
    name: str
    phone: str
    birth_date: Optional[str] = None
    is_new_member: bool = True
    memo: Optional[str] = None
    created_at: Optional[datetime] = None

    @property
    def cohort(self) -> str:
        """또래: 출생년도 두 자리 (생년월일이 없으면 '-')."""
        if not self.birth_date:
            return "-"
        return f"{int(self.birth_date[:4]) % 100:02d}"
