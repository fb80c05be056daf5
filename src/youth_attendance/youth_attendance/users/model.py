from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..core.enums import Role


@dataclass(frozen=True)
class User:
    """도메인 엔티티: 대시보드 관리자 계정.

    staff 계정은 owner/admin의 승인(approved) 후에만 대시보드를 사용할 수 있다.
    """

    user_id: int
    email: str
    name: str
    password_hash: str
    role: Role
    approved: bool = False
    created_at: Optional[datetime] = None
