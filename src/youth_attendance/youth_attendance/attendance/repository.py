from __future__ import annotations

from datetime import datetime
from typing import Optional, Protocol, Sequence

from .model import AttendanceEntry


class AttendanceRepository(Protocol):
    """출석 저장소 인터페이스.

    (member_id, date)는 유일 키이며, insert 시 중복이면 DuplicateKeyError를 발생시킨다.
    조회 결과의 name은 members 테이블에서 가져온다.
    """

    def insert(self, *, member_id: int, date: str) -> int:
        raise NotImplementedError

    def get_by_id(self, attendance_id: int) -> Optional[AttendanceEntry]:
        raise NotImplementedError

    def list_all(self) -> Sequence[AttendanceEntry]:
        """Ordered by date descending, then check-in time."""
        raise NotImplementedError

    def list_for_date(self, date: str) -> Sequence[AttendanceEntry]:
        """Ordered by check-in time."""
        raise NotImplementedError

    def list_between(self, start: str, end: str) -> Sequence[AttendanceEntry]:
        raise NotImplementedError

    def delete(self, attendance_id: int) -> bool:
        raise NotImplementedError

    def update_created_at(self, attendance_id: int, created_at: datetime) -> bool:
        raise NotImplementedError
