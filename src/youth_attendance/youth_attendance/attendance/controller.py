from __future__ import annotations

import logging

from flask import Flask, flash, redirect, render_template, request, url_for

from ..common.datetime_utils import today_local
from ..common.guards import current_user, make_guards
from ..core.exceptions import ValidationError
from ..container import Container
from ..imports.controller_helpers import run_upload, send_template
from ..imports.templates import attendance_template

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    guards = make_guards(container.auth_service)

    def _int_arg(name: str, default: int) -> int:
        try:
            return int(request.args.get(name, default))
        except (TypeError, ValueError):
            return default

    @app.route("/dashboard/attendance", endpoint="attendance_list")
    @guards.approved_required
    def attendance_list():
        year = _int_arg("year", today_local().year)
        return render_template(
            "dashboard/attendance_list.html",
            current_user=current_user(),
            year=year,
            years=container.attendance_service.available_years(year),
            summaries=container.attendance_service.list_date_summaries(year),
            active_page="attendance",
        )

    @app.route("/dashboard/attendance/grid", endpoint="attendance_grid")
    @guards.approved_required
    def attendance_grid():
        today = today_local()
        year = _int_arg("year", today.year)
        month = _int_arg("month", today.month)
        try:
            grid = container.attendance_service.monthly_grid(year, month)
        except ValidationError as e:
            flash(str(e), "warning")
            grid = container.attendance_service.monthly_grid(today.year, today.month)
        return render_template(
            "dashboard/attendance_grid.html",
            current_user=current_user(),
            grid=grid,
            active_page="attendance_grid",
        )

    @app.route("/dashboard/attendance/<date>", endpoint="attendance_detail")
    @guards.approved_required
    def attendance_detail(date: str):
        try:
            detail = container.attendance_service.get_date_detail(date)
        except ValidationError as e:
            flash(str(e), "warning")
            return redirect(url_for("attendance_list"))
        return render_template(
            "dashboard/attendance_detail.html",
            current_user=current_user(),
            detail=detail,
            active_page="attendance",
        )

    @app.route("/dashboard/attendance/<date>/add", methods=["POST"], endpoint="attendance_add")
    @guards.approved_required
    def attendance_add(date: str):
        try:
            container.attendance_service.add_attendance(member_id=int(request.form.get("member_id") or 0), date=date)
            flash("출석 처리되었습니다.", "success")
        except ValidationError as e:
            flash(str(e), "warning")
        except Exception:
            logger.exception("add attendance failed date=%s", date)
            flash("출석 처리에 실패했습니다.", "danger")
        return redirect(url_for("attendance_detail", date=date))

    @app.route(
        "/dashboard/attendance/<date>/<int:attendance_id>/delete",
        methods=["POST"],
        endpoint="attendance_delete",
    )
    @guards.approved_required
    def attendance_delete(date: str, attendance_id: int):
        try:
            container.attendance_service.delete_attendance(attendance_id)
            flash("출석 기록을 삭제했습니다.", "success")
        except ValidationError as e:
            flash(str(e), "warning")
        except Exception:
            logger.exception("delete attendance failed id=%s", attendance_id)
            flash("삭제에 실패했습니다.", "danger")
        return redirect(url_for("attendance_detail", date=date))

    @app.route(
        "/dashboard/attendance/<date>/<int:attendance_id>/time",
        methods=["POST"],
        endpoint="attendance_edit_time",
    )
    @guards.approved_required
    def attendance_edit_time(date: str, attendance_id: int):
        try:
            container.attendance_service.update_check_in_time(
                attendance_id=attendance_id,
                date=date,
                hhmm=request.form.get("time", ""),
            )
            flash("출석 시간을 수정했습니다.", "success")
        except ValidationError as e:
            flash(str(e), "warning")
        except Exception:
            logger.exception("edit time failed id=%s", attendance_id)
            flash("시간 수정에 실패했습니다.", "danger")
        return redirect(url_for("attendance_detail", date=date))

    @app.route("/dashboard/attendance/import", methods=["POST"], endpoint="attendance_import")
    @guards.approved_required
    def attendance_import():
        run_upload(container.import_service.import_attendance)
        return redirect(url_for("attendance_list"))

    @app.route("/dashboard/attendance/template", endpoint="attendance_template")
    @guards.approved_required
    def attendance_template_download():
        return send_template(attendance_template)
