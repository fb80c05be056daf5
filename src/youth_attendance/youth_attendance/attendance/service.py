from __future__ import annotations

from collections import Counter
from datetime import datetime
from typing import Optional

from ..common.datetime_utils import month_bounds, parse_hhmm, parse_iso_date, sundays_in_month, today_local
from ..core.exceptions import DuplicateKeyError, ValidationError
from ..members.repository import MemberRepository
from ..visitors.repository import VisitorRepository
from .model import DateDetail, DateSummary, GridRow, MonthlyGrid
from .repository import AttendanceRepository


class AttendanceService:
    """Use case: 출석 이력 조회/수정 (관리자 대시보드).

    - 날짜별 요약 목록 (연도 필터)
    - 날짜 상세: 출석자 / 결석자 / 방문자 수
    - 개별 추가, 삭제, 출석 시각 수정
    - 월별 주일 출석표
    """

    def __init__(self, attendance: AttendanceRepository, members: MemberRepository, visitors: VisitorRepository):
        self._attendance = attendance
        self._members = members
        self._visitors = visitors

    def list_date_summaries(self, year: Optional[int] = None) -> list[DateSummary]:
        names_by_date: dict[str, list[str]] = {}
        for e in self._attendance.list_all():
            names = names_by_date.setdefault(e.date, [])
            if e.name not in names:
                names.append(e.name)

        visitor_counts = Counter(self._visitors.list_dates())
        dates = set(names_by_date) | set(visitor_counts)
        if year is not None:
            dates = {d for d in dates if d.startswith(f"{int(year):04d}-")}

        return [
            DateSummary(date=d, names=tuple(names_by_date.get(d, [])), visitor_count=visitor_counts.get(d, 0))
            for d in sorted(dates, reverse=True)
        ]

    def available_years(self, selected: Optional[int] = None) -> list[int]:
        """Years that have any record, newest first; always contains ``selected``."""
        years = {int(e.date[:4]) for e in self._attendance.list_all()}
        years |= {int(d[:4]) for d in self._visitors.list_dates()}
        years.add(int(selected) if selected is not None else today_local().year)
        return sorted(years, reverse=True)

    def get_date_detail(self, date: str) -> DateDetail:
        date = self._check_date(date)
        attendees = list(self._attendance.list_for_date(date))
        present = {a.member_id for a in attendees}
        absent = [m for m in self._members.list_by_birth_date() if m.member_id not in present]
        return DateDetail(
            date=date,
            attendees=attendees,
            absent=absent,
            visitor_count=self._visitors.count_for_date(date),
        )

    def add_attendance(self, *, member_id: int, date: str) -> int:
        date = self._check_date(date)
        if not self._members.get_by_id(int(member_id)):
            raise ValidationError("존재하지 않는 청년입니다.")
        try:
            return self._attendance.insert(member_id=int(member_id), date=date)
        except DuplicateKeyError:
            raise ValidationError("이미 이 날 출석 처리된 청년입니다.")

    def delete_attendance(self, attendance_id: int) -> None:
        if not self._attendance.delete(int(attendance_id)):
            raise ValidationError("출석 기록을 찾을 수 없습니다.")

    def update_check_in_time(self, *, attendance_id: int, date: str, hhmm: str) -> None:
        """Set the check-in time of a record to ``date`` ``HH:MM``."""
        date = self._check_date(date)
        parsed = parse_hhmm(hhmm)
        if parsed is None:
            raise ValidationError("시간 형식이 잘못되었습니다. (HH:MM, 0~23시 0~59분)")
        entry = self._attendance.get_by_id(int(attendance_id))
        if not entry:
            raise ValidationError("출석 기록을 찾을 수 없습니다.")

        hour, minute = parsed
        when = datetime.combine(parse_iso_date(date), datetime.min.time()).replace(hour=hour, minute=minute)
        self._attendance.update_created_at(entry.attendance_id, when)

    def monthly_grid(self, year: int, month: int) -> MonthlyGrid:
        if not (1 <= int(month) <= 12):
            raise ValidationError("월은 1~12 사이여야 합니다.")
        year, month = int(year), int(month)

        sundays = sundays_in_month(year, month)
        start, end = month_bounds(year, month)
        attended = {(e.member_id, e.date) for e in self._attendance.list_between(start.isoformat(), end.isoformat())}

        rows = [
            GridRow(member=m, attended=tuple((m.member_id, s.isoformat()) in attended for s in sundays))
            for m in self._members.list_by_birth_date()
        ]
        return MonthlyGrid(year=year, month=month, sundays=sundays, rows=rows)

    @staticmethod
    def _check_date(value: str) -> str:
        try:
            return parse_iso_date((value or "").strip()).isoformat()
        except ValueError:
            raise ValidationError("날짜 형식이 잘못되었습니다. (YYYY-MM-DD)")
