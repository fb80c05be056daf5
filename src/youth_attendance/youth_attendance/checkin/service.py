from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from datetime import date
from typing import Optional

from ..attendance.repository import AttendanceRepository
from ..common.datetime_utils import today_local
from ..core.constants import PHONE_SUFFIX_LENGTH
from ..core.enums import CheckInResult
from ..core.exceptions import DuplicateKeyError, ValidationError
from ..members.model import Member
from ..members.repository import MemberRepository
from ..visitors.repository import VisitorRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CheckInOutcome:
    """키오스크 화면에 보여줄 결과. success=False면 message를 오류로 표시한다."""

    result: CheckInResult
    message: str
    success: bool = True
    candidates: list[Member] = field(default_factory=list)

    def to_json(self) -> dict:
        return {
            "success": self.success,
            "result": self.result.value,
            "message": self.message,
            "candidates": [{"member_id": m.member_id, "name": m.name, "phone": m.phone} for m in self.candidates],
        }


class CheckInService:
    """Use case: 현장 출석 체크 (전화번호 뒷자리 4자리).

    0건 → 방문자 등록 안내, 1건 → 즉시 출석, 여러 건 → 본인 선택.
    """

    def __init__(self, members: MemberRepository, attendance: AttendanceRepository, visitors: VisitorRepository):
        self._members = members
        self._attendance = attendance
        self._visitors = visitors

    def lookup(self, digits: str, today: Optional[date] = None) -> CheckInOutcome:
        digits = (digits or "").strip()
        if not re.fullmatch(rf"\d{{{PHONE_SUFFIX_LENGTH}}}", digits):
            raise ValidationError("전화번호 뒷자리 4자리를 입력해 주세요.")

        matches = list(self._members.find_by_phone_suffix(digits))
        if not matches:
            return CheckInOutcome(CheckInResult.NO_MATCH, "등록된 번호가 없습니다. 방문자로 등록할까요?")
        if len(matches) > 1:
            return CheckInOutcome(CheckInResult.MULTIPLE, "본인 이름을 선택해 주세요.", candidates=matches)
        return self._record(matches[0], today)

    def check_in_member(self, member_id: int, today: Optional[date] = None) -> CheckInOutcome:
        member = self._members.get_by_id(int(member_id))
        if not member:
            raise ValidationError("존재하지 않는 청년입니다.")
        return self._record(member, today)

    def check_in_visitor(self, today: Optional[date] = None) -> CheckInOutcome:
        day = (today or today_local()).isoformat()
        try:
            self._visitors.insert(date=day)
        except Exception:
            logger.exception("visitor check-in failed date=%s", day)
            return CheckInOutcome(CheckInResult.VISITOR, "방문자 등록에 실패했습니다.", success=False)
        return CheckInOutcome(CheckInResult.VISITOR, "방문자로 등록되었습니다.")

    def _record(self, member: Member, today: Optional[date]) -> CheckInOutcome:
        day = (today or today_local()).isoformat()
        try:
            self._attendance.insert(member_id=member.member_id, date=day)
        except DuplicateKeyError:
            return CheckInOutcome(CheckInResult.ALREADY, "이미 오늘 출석 처리되었습니다.")
        except Exception:
            logger.exception("check-in failed member_id=%s date=%s", member.member_id, day)
            return CheckInOutcome(CheckInResult.RECORDED, "출석 처리에 실패했습니다.", success=False)
        logger.info("check-in member_id=%s date=%s", member.member_id, day)
        return CheckInOutcome(CheckInResult.RECORDED, f"{member.name}님 출석 완료")
