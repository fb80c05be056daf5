from __future__ import annotations

import logging

from flask import Flask, jsonify, render_template, request

from ..core.exceptions import ValidationError
from ..container import Container

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    """Public kiosk pages and JSON API (no login: the kiosk runs unattended)."""

    def _error(message: str, status: int):
        return jsonify({"success": False, "message": message}), status

    @app.route("/", endpoint="home")
    def home():
        return render_template("home.html")

    @app.route("/checkin", endpoint="checkin")
    def checkin():
        return render_template("checkin.html")

    @app.route("/api/checkin/lookup", methods=["POST"], endpoint="api_checkin_lookup")
    def api_checkin_lookup():
        data = request.get_json(silent=True) or {}
        try:
            outcome = container.checkin_service.lookup(str(data.get("digits", "")))
        except ValidationError as e:
            return _error(str(e), 400)
        except Exception:
            logger.exception("kiosk lookup failed")
            return _error("출석 처리에 실패했습니다.", 500)
        return jsonify(outcome.to_json()), 200 if outcome.success else 500

    @app.route("/api/checkin/member", methods=["POST"], endpoint="api_checkin_member")
    def api_checkin_member():
        data = request.get_json(silent=True) or {}
        try:
            outcome = container.checkin_service.check_in_member(int(data.get("member_id") or 0))
        except (TypeError, ValueError):
            return _error("잘못된 요청입니다.", 400)
        except ValidationError as e:
            return _error(str(e), 400)
        return jsonify(outcome.to_json()), 200 if outcome.success else 500

    @app.route("/api/checkin/visitor", methods=["POST"], endpoint="api_checkin_visitor")
    def api_checkin_visitor():
        outcome = container.checkin_service.check_in_visitor()
        return jsonify(outcome.to_json()), 200 if outcome.success else 500
