from __future__ import annotations

from dataclasses import asdict

from flask import Flask, jsonify, request

from ..container import Container
from ..core.constants import BIRTHDAY_BOARD_WINDOW_DAYS
from ..core.exceptions import ValidationError


def register(app: Flask, container: Container) -> None:
    @app.route("/api/dashboard", methods=["GET"], endpoint="dashboard")
    def dashboard():
        summary = container.dashboard_service.summary()
        return jsonify({"success": True, "academy": app.config.get("ACADEMY_NAME"), **asdict(summary)})

    @app.route("/api/birthdays", methods=["GET"], endpoint="birthdays")
    def birthdays():
        try:
            days = request.args.get("days", BIRTHDAY_BOARD_WINDOW_DAYS)
            board = container.dashboard_service.birthday_board(days=days)
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        return jsonify({"success": True, **board})
