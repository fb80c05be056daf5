from __future__ import annotations

import pytest
from werkzeug.security import generate_password_hash

from src.youth_attendance.youth_attendance.core.enums import DashboardAccess, Role
from src.youth_attendance.youth_attendance.core.exceptions import (
    AuthenticationError,
    AuthorizationError,
    ValidationError,
)
from src.youth_attendance.youth_attendance.users.model import User
from src.youth_attendance.youth_attendance.users.service import ApprovalService, AuthService, SessionUser
from tests.fakes import InMemoryUsers


def _owner() -> User:
    return User(
        user_id=1,
        email="owner@example.com",
        name="관리자",
        password_hash=generate_password_hash("owner1234"),
        role=Role.OWNER,
        approved=True,
    )


def test_authenticate_success_and_failure():
    svc = AuthService(InMemoryUsers([_owner()]))

    s_user = svc.authenticate("Owner@Example.com ", "owner1234")
    assert s_user.role == Role.OWNER

    with pytest.raises(AuthenticationError) as exc:
        svc.authenticate("owner@example.com", "wrong")
    assert str(exc.value) == "이메일 또는 비밀번호를 확인해 주세요."

    with pytest.raises(AuthenticationError):
        svc.authenticate("nobody@example.com", "owner1234")


def test_signup_creates_pending_staff():
    users = InMemoryUsers([_owner()])
    svc = AuthService(users)

    user_id = svc.register(email="staff@example.com", name="간사", password="secret1")

    assert svc.dashboard_access(user_id) == DashboardAccess.PENDING_APPROVAL
    assert svc.dashboard_access(1) == DashboardAccess.ALLOWED
    assert svc.dashboard_access(404) == DashboardAccess.NOT_REGISTERED

    with pytest.raises(ValidationError):
        svc.register(email="staff@example.com", name="간사", password="secret1")


def test_short_password_is_rejected():
    with pytest.raises(ValidationError):
        AuthService(InMemoryUsers()).register(email="a@b.c", name="a", password="123")


def test_owner_approves_pending_staff():
    users = InMemoryUsers([_owner()])
    auth = AuthService(users)
    approvals = ApprovalService(users)
    first = auth.register(email="a@example.com", name="A", password="secret1")
    second = auth.register(email="b@example.com", name="B", password="secret1")
    owner = auth.authenticate("owner@example.com", "owner1234")

    assert [u.user_id for u in approvals.list_pending(owner)] == [first, second]

    approvals.approve(owner, first)

    assert auth.dashboard_access(first) == DashboardAccess.ALLOWED
    assert [u.user_id for u in approvals.list_pending(owner)] == [second]


def test_staff_cannot_use_approvals():
    users = InMemoryUsers([_owner()])
    approvals = ApprovalService(users)
    staff = SessionUser(user_id=5, email="s@example.com", name="S", role=Role.STAFF, approved=True)

    with pytest.raises(AuthorizationError) as exc:
        approvals.list_pending(staff)
    assert str(exc.value) == "이 메뉴는 관리자(owner, admin)만 이용할 수 있습니다."
    with pytest.raises(AuthorizationError):
        approvals.approve(staff, 1)


def test_session_round_trip():
    s_user = SessionUser(user_id=3, email="a@b.c", name="A", role=Role.ADMIN, approved=True)
    assert SessionUser.from_session(s_user.to_session()) == s_user
    assert SessionUser.from_session({}) is None
