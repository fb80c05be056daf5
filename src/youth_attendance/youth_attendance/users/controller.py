from __future__ import annotations

import logging
from datetime import timedelta

from flask import Flask, flash, redirect, render_template, request, session, url_for

from ..common.datetime_utils import today_local
from ..common.guards import current_user, make_guards, render_forbidden
from ..core.constants import DEFAULT_SESSION_DAYS
from ..core.exceptions import AuthenticationError, AuthorizationError, ValidationError
from ..container import Container

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    guards = make_guards(container.auth_service)

    @app.route("/login", methods=["GET", "POST"], endpoint="login")
    def login():
        if "user_id" in session:
            return redirect(url_for("dashboard"))

        if request.method == "POST":
            email = request.form.get("email", "")
            password = request.form.get("password", "")
            remember = request.form.get("remember_me")

            try:
                s_user = container.auth_service.authenticate(email, password)

                session.clear()
                session.permanent = bool(remember)
                app.permanent_session_lifetime = timedelta(days=DEFAULT_SESSION_DAYS)
                session.update(s_user.to_session())

                return redirect(url_for("dashboard"))
            except AuthenticationError as e:
                flash(str(e), "danger")
            except Exception:
                logger.exception("login failed")
                flash("로그인 중 오류가 발생했습니다.", "danger")

        return render_template("login.html")

    @app.route("/signup", methods=["GET", "POST"], endpoint="signup")
    def signup():
        if request.method == "POST":
            try:
                container.auth_service.register(
                    email=request.form.get("email", ""),
                    name=request.form.get("name", ""),
                    password=request.form.get("password", ""),
                )
                flash("가입 신청이 완료되었습니다. 관리자 승인 후 이용할 수 있습니다.", "success")
                return redirect(url_for("login"))
            except ValidationError as e:
                flash(str(e), "danger")
            except Exception:
                logger.exception("signup failed")
                flash("가입 처리 중 오류가 발생했습니다.", "danger")

        return render_template("signup.html")

    @app.route("/logout", endpoint="logout")
    def logout():
        session.clear()
        flash("로그아웃되었습니다.", "info")
        return redirect(url_for("login"))

    @app.route("/dashboard", endpoint="dashboard")
    @guards.approved_required
    def dashboard():
        today = today_local().isoformat()
        detail = container.attendance_service.get_date_detail(today)
        return render_template(
            "dashboard/index.html",
            current_user=current_user(),
            detail=detail,
            member_count=len(container.member_service.list_members()),
            active_page="dashboard",
        )

    @app.route("/dashboard/approvals", endpoint="approvals")
    @guards.manager_required
    def approvals():
        try:
            pending = container.approval_service.list_pending(current_user())
        except AuthorizationError as e:
            return render_forbidden(str(e))
        return render_template(
            "dashboard/approvals.html",
            current_user=current_user(),
            pending=pending,
            active_page="approvals",
        )

    @app.route("/dashboard/approvals/<int:user_id>/approve", methods=["POST"], endpoint="approve_user")
    @guards.manager_required
    def approve_user(user_id: int):
        try:
            container.approval_service.approve(current_user(), user_id)
            flash("승인되었습니다.", "success")
        except AuthorizationError as e:
            return render_forbidden(str(e))
        except ValidationError as e:
            flash(str(e), "danger")
        except Exception:
            logger.exception("approve failed user_id=%s", user_id)
            flash("승인 처리에 실패했습니다.", "danger")
        return redirect(url_for("approvals"))
