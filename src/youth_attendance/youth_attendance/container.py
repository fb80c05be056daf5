from __future__ import annotations

from dataclasses import dataclass

from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceService
from .checkin.service import CheckInService
from .database.connection import DBConfig, DatabaseConnection
from .imports.service import BulkImportService
from .members.mysql_member_repository import MySQLMemberRepository
from .members.repository import MemberRepository
from .members.service import MemberService
from .users.mysql_user_repository import MySQLUserRepository
from .users.repository import UserRepository
from .users.service import ApprovalService, AuthService
from .visitors.mysql_visitor_repository import MySQLVisitorRepository
from .visitors.repository import VisitorRepository


@dataclass(frozen=True)
class Container:
    members_repo: MemberRepository
    attendance_repo: AttendanceRepository
    visitors_repo: VisitorRepository
    users_repo: UserRepository

    member_service: MemberService
    attendance_service: AttendanceService
    checkin_service: CheckInService
    import_service: BulkImportService
    auth_service: AuthService
    approval_service: ApprovalService


def build_services(
    *,
    members_repo: MemberRepository,
    attendance_repo: AttendanceRepository,
    visitors_repo: VisitorRepository,
    users_repo: UserRepository,
) -> Container:
    """Wire services over any repository implementation (MySQL or in-memory)."""
    return Container(
        members_repo=members_repo,
        attendance_repo=attendance_repo,
        visitors_repo=visitors_repo,
        users_repo=users_repo,
        member_service=MemberService(members_repo),
        attendance_service=AttendanceService(attendance_repo, members_repo, visitors_repo),
        checkin_service=CheckInService(members_repo, attendance_repo, visitors_repo),
        import_service=BulkImportService(attendance_repo, members_repo),
        auth_service=AuthService(users_repo),
        approval_service=ApprovalService(users_repo),
    )


def build_container(*, db_config: dict) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))
    return build_services(
        members_repo=MySQLMemberRepository(conn),
        attendance_repo=MySQLAttendanceRepository(conn),
        visitors_repo=MySQLVisitorRepository(conn),
        users_repo=MySQLUserRepository(conn),
    )
