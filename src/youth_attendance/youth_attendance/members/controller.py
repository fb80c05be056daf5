from __future__ import annotations

import logging

from flask import Flask, flash, redirect, render_template, request, url_for

from ..common.guards import current_user, make_guards
from ..core.exceptions import ValidationError
from ..container import Container
from ..imports.controller_helpers import run_upload, send_template
from ..imports.templates import member_template

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    guards = make_guards(container.auth_service)

    def _form_fields() -> dict:
        return {
            "name": request.form.get("name", ""),
            "phone": request.form.get("phone", ""),
            "birth_date": request.form.get("birth_date", ""),
            "is_new_member": request.form.get("is_new_member") in {"on", "1", "true", "Y"},
            "memo": request.form.get("memo", ""),
        }

    @app.route("/dashboard/members", endpoint="members")
    @guards.approved_required
    def members():
        return render_template(
            "dashboard/members.html",
            current_user=current_user(),
            members=container.member_service.list_members(),
            active_page="members",
        )

    @app.route("/dashboard/members/add", methods=["POST"], endpoint="member_add")
    @guards.approved_required
    def member_add():
        try:
            container.member_service.create_member(**_form_fields())
            flash("등록되었습니다.", "success")
        except ValidationError as e:
            flash(str(e), "warning")
        except Exception:
            logger.exception("member create failed")
            flash("등록에 실패했습니다.", "danger")
        return redirect(url_for("members"))

    @app.route("/dashboard/members/<int:member_id>/edit", methods=["POST"], endpoint="member_edit")
    @guards.approved_required
    def member_edit(member_id: int):
        try:
            container.member_service.update_member(member_id, **_form_fields())
            flash("수정되었습니다.", "success")
        except ValidationError as e:
            flash(str(e), "warning")
        except Exception:
            logger.exception("member update failed id=%s", member_id)
            flash("수정에 실패했습니다.", "danger")
        return redirect(url_for("members"))

    @app.route("/dashboard/members/<int:member_id>/delete", methods=["POST"], endpoint="member_delete")
    @guards.approved_required
    def member_delete(member_id: int):
        try:
            container.member_service.delete_member(member_id)
            flash("삭제되었습니다.", "success")
        except ValidationError as e:
            flash(str(e), "warning")
        except Exception:
            logger.exception("member delete failed id=%s", member_id)
            flash("삭제에 실패했습니다.", "danger")
        return redirect(url_for("members"))

    @app.route("/dashboard/members/import", methods=["POST"], endpoint="members_import")
    @guards.approved_required
    def members_import():
        run_upload(container.import_service.import_members)
        return redirect(url_for("members"))

    @app.route("/dashboard/members/template", endpoint="members_template")
    @guards.approved_required
    def members_template_download():
        return send_template(member_template)
