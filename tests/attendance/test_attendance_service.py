from __future__ import annotations

from datetime import date, datetime

import pytest

from src.youth_attendance.youth_attendance.attendance.service import AttendanceService
from src.youth_attendance.youth_attendance.core.exceptions import ValidationError
from tests.fakes import InMemoryAttendance, InMemoryMembers, InMemoryVisitors, member


@pytest.fixture()
def repos():
    members_repo = InMemoryMembers(
        [
            member(1, "홍길동", "010-1", "1995-03-01"),
            member(2, "김영희", "010-2", "1998-06-01", is_new_member=False),
            member(3, "이철수", "010-3"),
            member(4, "박민수", "010-4", "1995-01-15"),
        ]
    )
    return members_repo, InMemoryAttendance(members_repo), InMemoryVisitors()


@pytest.fixture()
def svc(repos):
    members_repo, attendance_repo, visitors_repo = repos
    return AttendanceService(attendance_repo, members_repo, visitors_repo)


def test_date_summaries_group_by_date_newest_first(svc, repos):
    _, attendance_repo, visitors_repo = repos
    attendance_repo.insert(member_id=1, date="2025-01-05")
    attendance_repo.insert(member_id=2, date="2025-01-05")
    attendance_repo.insert(member_id=1, date="2025-01-12")
    attendance_repo.insert(member_id=1, date="2024-12-29")
    visitors_repo.insert(date="2025-01-05")
    visitors_repo.insert(date="2025-01-19")

    summaries = svc.list_date_summaries(2025)

    assert [s.date for s in summaries] == ["2025-01-19", "2025-01-12", "2025-01-05"]
    jan5 = summaries[2]
    assert set(jan5.names) == {"홍길동", "김영희"}
    assert (jan5.member_count, jan5.visitor_count, jan5.total) == (2, 1, 3)
    assert jan5.label == "2025년 1월 5일 (일)"
    assert summaries[0].member_count == 0


def test_available_years_always_include_the_selected_year(svc, repos):
    repos[1].insert(member_id=1, date="2024-12-29")
    assert svc.available_years(2026) == [2026, 2024]


def test_date_detail_lists_attendees_and_absent_in_birth_order(svc, repos):
    repos[1].insert(member_id=2, date="2025-01-05")

    detail = svc.get_date_detail("2025-01-05")

    assert [a.name for a in detail.attendees] == ["김영희"]
    assert [m.name for m in detail.absent] == ["박민수", "홍길동", "이철수"]
    assert detail.visitor_count == 0


def test_adding_the_same_member_twice_is_rejected(svc):
    svc.add_attendance(member_id=1, date="2025-01-05")
    with pytest.raises(ValidationError) as exc:
        svc.add_attendance(member_id=1, date="2025-01-05")
    assert str(exc.value) == "이미 이 날 출석 처리된 청년입니다."


def test_delete_attendance(svc, repos):
    attendance_id = svc.add_attendance(member_id=1, date="2025-01-05")
    svc.delete_attendance(attendance_id)
    assert repos[1].list_all() == []
    with pytest.raises(ValidationError):
        svc.delete_attendance(attendance_id)


def test_update_check_in_time(svc, repos):
    attendance_id = svc.add_attendance(member_id=1, date="2025-01-05")

    svc.update_check_in_time(attendance_id=attendance_id, date="2025-01-05", hhmm="09:45")

    assert repos[1].get_by_id(attendance_id).created_at == datetime(2025, 1, 5, 9, 45)


@pytest.mark.parametrize("hhmm", ["24:00", "12:60", "9", "ab:cd", ""])
def test_update_check_in_time_rejects_bad_values(svc, hhmm):
    attendance_id = svc.add_attendance(member_id=1, date="2025-01-05")
    with pytest.raises(ValidationError):
        svc.update_check_in_time(attendance_id=attendance_id, date="2025-01-05", hhmm=hhmm)


def test_monthly_grid_marks_sundays_per_member(svc, repos):
    repos[1].insert(member_id=1, date="2025-01-05")
    repos[1].insert(member_id=1, date="2025-01-26")
    repos[1].insert(member_id=2, date="2025-01-12")
    repos[1].insert(member_id=3, date="2025-01-08")  # Wednesday, not a column

    grid = svc.monthly_grid(2025, 1)

    assert grid.sundays == [date(2025, 1, d) for d in (5, 12, 19, 26)]
    assert [r.member.name for r in grid.rows] == ["박민수", "홍길동", "김영희", "이철수"]
    by_name = {r.member.name: r for r in grid.rows}
    assert by_name["홍길동"].attended == (True, False, False, True)
    assert by_name["이철수"].attended_count == 0
    assert by_name["홍길동"].member.cohort == "95"
    assert by_name["이철수"].member.cohort == "-"
    assert grid.sunday_totals == [1, 1, 0, 1]


def test_monthly_grid_rejects_bad_month(svc):
    with pytest.raises(ValidationError):
        svc.monthly_grid(2025, 13)
