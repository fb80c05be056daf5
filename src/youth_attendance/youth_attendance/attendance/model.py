from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Optional

from ..common.datetime_utils import format_korean_date
from ..members.model import Member


@dataclass(frozen=True)
class AttendanceEntry:
    """도메인 엔티티: (청년, 날짜) 출석 기록 한 건.

    created_at은 출석 처리 시각이며 관리자 화면에서 수정할 수 있다.
    """

    attendance_id: int
    member_id: int
    date: str  # YYYY-MM-DD
    name: str = ""
    created_at: Optional[datetime] = None

    @property
    def time_label(self) -> str:
        return self.created_at.strftime("%H:%M") if self.created_at else "-"


@dataclass(frozen=True)
class DateSummary:
    """출석 목록 화면의 날짜별 요약 (read-model)."""

    date: str
    names: tuple[str, ...]
    visitor_count: int = 0

    @property
    def member_count(self) -> int:
        return len(self.names)

    @property
    def total(self) -> int:
        return self.member_count + self.visitor_count

    @property
    def label(self) -> str:
        return format_korean_date(self.date)


@dataclass(frozen=True)
class DateDetail:
    date: str
    attendees: list[AttendanceEntry]
    absent: list[Member]
    visitor_count: int

    @property
    def label(self) -> str:
        return format_korean_date(self.date)


@dataclass(frozen=True)
class GridRow:
    member: Member
    attended: tuple[bool, ...]

    @property
    def attended_count(self) -> int:
        return sum(1 for a in self.attended if a)


@dataclass(frozen=True)
class MonthlyGrid:
    """월별 주일 출석표: 행 = 청년, 열 = 그 달의 주일."""

    year: int
    month: int
    sundays: list[date]
    rows: list[GridRow] = field(default_factory=list)

    @property
    def sunday_totals(self) -> list[int]:
        return [sum(1 for r in self.rows if r.attended[i]) for i in range(len(self.sundays))]
