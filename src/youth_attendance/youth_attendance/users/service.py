from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Sequence

from werkzeug.security import check_password_hash, generate_password_hash

from ..common.validators import require_min_length, require_non_empty
from ..core.enums import DashboardAccess, Role
from ..core.exceptions import AuthenticationError, AuthorizationError, DuplicateKeyError, ValidationError
from .model import User
from .repository import UserRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SessionUser:
    """What we store into Flask session after login."""

    user_id: int
    email: str
    name: str
    role: Role
    approved: bool

    def to_session(self) -> dict:
        return {
            "user_id": self.user_id,
            "email": self.email,
            "name": self.name,
            "role": self.role.value,
            "approved": self.approved,
        }

    @classmethod
    def from_session(cls, data) -> Optional["SessionUser"]:
        if not data or "user_id" not in data:
            return None
        return cls(
            user_id=int(data["user_id"]),
            email=data.get("email", ""),
            name=data.get("name", ""),
            role=Role(data.get("role", Role.STAFF.value)),
            approved=bool(data.get("approved")),
        )


def _to_session_user(user: User) -> SessionUser:
    return SessionUser(
        user_id=user.user_id,
        email=user.email,
        name=user.name,
        role=user.role,
        approved=user.approved,
    )


class AuthService:
    """Use case: login, signup, dashboard access check."""

    def __init__(self, users: UserRepository):
        self._users = users

    def authenticate(self, email: str, password: str) -> SessionUser:
        user = self._users.get_by_email((email or "").strip().lower())
        if not user:
            raise AuthenticationError("이메일 또는 비밀번호를 확인해 주세요.")

        try:
            ok = check_password_hash(user.password_hash, password or "")
        except ValueError:
            # unknown hash method / corrupted value
            ok = False

        if not ok:
            raise AuthenticationError("이메일 또는 비밀번호를 확인해 주세요.")

        logger.info("login user_id=%s role=%s", user.user_id, user.role.value)
        return _to_session_user(user)

    def register(self, *, email: str, name: str, password: str) -> int:
        email = require_non_empty(email, "이메일").lower()
        name = require_non_empty(name, "이름")
        require_min_length(password, "비밀번호", 6)

        if self._users.get_by_email(email):
            raise ValidationError("이미 가입된 이메일입니다.")
        try:
            user_id = self._users.create_user(
                email=email,
                name=name,
                password_hash=generate_password_hash(password),
                role=Role.STAFF,
                approved=False,
            )
        except DuplicateKeyError:
            raise ValidationError("이미 가입된 이메일입니다.")
        logger.info("signup user_id=%s email=%s (pending approval)", user_id, email)
        return user_id

    def dashboard_access(self, user_id: int) -> DashboardAccess:
        user = self._users.get_by_id(int(user_id))
        if not user:
            return DashboardAccess.NOT_REGISTERED
        if user.role == Role.STAFF and not user.approved:
            return DashboardAccess.PENDING_APPROVAL
        return DashboardAccess.ALLOWED


class ApprovalService:
    """Use case: owner/admin가 가입 대기 중인 staff 계정을 승인한다."""

    def __init__(self, users: UserRepository):
        self._users = users

    @staticmethod
    def _require_manager(actor: SessionUser) -> None:
        if not actor.role.can_manage_approvals:
            raise AuthorizationError("이 메뉴는 관리자(owner, admin)만 이용할 수 있습니다.")

    def list_pending(self, actor: SessionUser) -> Sequence[User]:
        self._require_manager(actor)
        return self._users.list_pending()

    def approve(self, actor: SessionUser, user_id: int) -> None:
        self._require_manager(actor)
        if not self._users.get_by_id(int(user_id)):
            raise ValidationError("존재하지 않는 계정입니다.")
        self._users.set_approved(int(user_id), approved=True)
        logger.info("user_id=%s approved by user_id=%s", user_id, actor.user_id)
