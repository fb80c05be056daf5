from __future__ import annotations

from dataclasses import dataclass
from functools import wraps
from typing import Callable, Optional

from flask import flash, redirect, render_template, session, url_for

from ..core.enums import DashboardAccess
from ..users.service import AuthService, SessionUser


def current_user() -> Optional[SessionUser]:
    return SessionUser.from_session(session)


def render_forbidden(message: str = "이 메뉴는 관리자(owner, admin)만 이용할 수 있습니다."):
    return render_template("403.html", current_user=current_user(), message=message), 403


@dataclass(frozen=True)
class Guards:
    """Route decorators shared by the dashboard controllers.

    approved_required → 로그인 + 승인된 계정 (대기 중이면 안내 화면)
    manager_required  → 승인 + owner/admin
    """

    approved_required: Callable
    manager_required: Callable


def make_guards(auth_service: AuthService) -> Guards:
    def approved_required(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            if "user_id" not in session:
                flash("로그인이 필요합니다.", "warning")
                return redirect(url_for("login"))

            # Approval can change while the session lives; re-check every request.
            access = auth_service.dashboard_access(int(session["user_id"]))
            if access == DashboardAccess.NOT_REGISTERED:
                session.clear()
                flash("등록되지 않은 계정입니다.", "danger")
                return redirect(url_for("login"))
            if access == DashboardAccess.PENDING_APPROVAL:
                return render_template("pending.html", current_user=current_user()), 403

            session["approved"] = True
            return view(*args, **kwargs)

        return wrapper

    def manager_required(view):
        @approved_required
        @wraps(view)
        def wrapper(*args, **kwargs):
            user = current_user()
            if not user or not user.role.can_manage_approvals:
                return render_forbidden()
            return view(*args, **kwargs)

        return wrapper

    return Guards(
        approved_required=approved_required,
        manager_required=manager_required,
    )
