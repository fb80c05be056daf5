from __future__ import annotations

from typing import Protocol, Sequence


class VisitorRepository(Protocol):
    """방문자 저장소. 방문자는 이름 없이 날짜별 인원수로만 집계된다."""

    def insert(self, *, date: str) -> int:
        raise NotImplementedError

    def list_dates(self) -> Sequence[str]:
        """One entry per visitor row (dates repeat)."""
        raise NotImplementedError

    def count_for_date(self, date: str) -> int:
        raise NotImplementedError
