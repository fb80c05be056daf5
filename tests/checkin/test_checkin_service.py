from __future__ import annotations

from datetime import date

import pytest

from src.youth_attendance.youth_attendance.checkin.service import CheckInService
from src.youth_attendance.youth_attendance.core.enums import CheckInResult
from src.youth_attendance.youth_attendance.core.exceptions import ValidationError
from tests.fakes import FailingAttendance, InMemoryAttendance, InMemoryMembers, InMemoryVisitors, member

TODAY = date(2025, 1, 5)


def _service(members):
    members_repo = InMemoryMembers(members)
    attendance_repo = InMemoryAttendance(members_repo)
    visitors_repo = InMemoryVisitors()
    return CheckInService(members_repo, attendance_repo, visitors_repo), attendance_repo, visitors_repo


def test_single_match_is_checked_in_immediately():
    svc, attendance_repo, _ = _service([member(1, "홍길동", "010-1234-5678")])

    outcome = svc.lookup("5678", today=TODAY)

    assert outcome.result == CheckInResult.RECORDED
    assert outcome.message == "홍길동님 출석 완료"
    assert [a.member_id for a in attendance_repo.list_for_date("2025-01-05")] == [1]


def test_second_check_in_same_day_is_reported_as_already():
    svc, _, _ = _service([member(1, "홍길동", "010-1234-5678")])
    svc.lookup("5678", today=TODAY)

    outcome = svc.lookup("5678", today=TODAY)

    assert outcome.result == CheckInResult.ALREADY
    assert outcome.message == "이미 오늘 출석 처리되었습니다."


def test_several_matches_return_candidates_without_recording():
    svc, attendance_repo, _ = _service([member(1, "홍길동", "010-1111-5678"), member(2, "김영희", "010 2222 5678")])

    outcome = svc.lookup("5678", today=TODAY)

    assert outcome.result == CheckInResult.MULTIPLE
    assert {m.member_id for m in outcome.candidates} == {1, 2}
    assert attendance_repo.list_all() == []

    chosen = svc.check_in_member(2, today=TODAY)
    assert chosen.message == "김영희님 출석 완료"


def test_no_match_offers_visitor_registration():
    svc, _, visitors_repo = _service([member(1, "홍길동", "010-1234-5678")])

    outcome = svc.lookup("0000", today=TODAY)
    assert outcome.result == CheckInResult.NO_MATCH
    assert outcome.message == "등록된 번호가 없습니다. 방문자로 등록할까요?"

    visitor = svc.check_in_visitor(today=TODAY)
    assert visitor.message == "방문자로 등록되었습니다."
    assert visitors_repo.count_for_date("2025-01-05") == 1


@pytest.mark.parametrize("digits", ["", "123", "12345", "12a4"])
def test_lookup_requires_four_digits(digits):
    svc, _, _ = _service([])
    with pytest.raises(ValidationError):
        svc.lookup(digits)


def test_store_failure_is_reported_not_raised():
    members_repo = InMemoryMembers([member(1, "홍길동", "010-1234-5678")])
    svc = CheckInService(members_repo, FailingAttendance(), InMemoryVisitors())

    outcome = svc.lookup("5678", today=TODAY)

    assert outcome.success is False
    assert outcome.message == "출석 처리에 실패했습니다."
    assert outcome.to_json()["success"] is False
