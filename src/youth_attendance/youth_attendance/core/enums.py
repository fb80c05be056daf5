from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """관리자 계정 역할 (권한 검사에 사용)."""

    OWNER = "owner"
    ADMIN = "admin"
    STAFF = "staff"

    @property
    def can_manage_approvals(self) -> bool:
        return self in (Role.OWNER, Role.ADMIN)


class OutcomeKind(str, Enum):
    """일괄 업로드 시 행 단위 처리 결과."""

    INSERTED = "INSERTED"
    DUPLICATE_SKIPPED = "DUPLICATE_SKIPPED"
    UNRESOLVED_REFERENCE = "UNRESOLVED_REFERENCE"
    FAILED = "FAILED"


class CheckInResult(str, Enum):
    RECORDED = "RECORDED"
    ALREADY = "ALREADY"
    MULTIPLE = "MULTIPLE"
    NO_MATCH = "NO_MATCH"
    VISITOR = "VISITOR"


class DashboardAccess(str, Enum):
    ALLOWED = "ALLOWED"
    NOT_REGISTERED = "NOT_REGISTERED"
    PENDING_APPROVAL = "PENDING_APPROVAL"


class ImportFlow(str, Enum):
    ATTENDANCE = "attendance"
    MEMBERS = "members"
