from __future__ import annotations

import logging

from flask import Flask, jsonify, request

from ..common.datetime_utils import format_iso_date, today_local
from ..container import Container
from ..core.exceptions import ValidationError

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/api/attendance/today", methods=["GET"], endpoint="attendance_today")
    def attendance_today():
        today = today_local()
        rows = container.attendance_service.todays_roll_call(today=today)
        return jsonify({"success": True, "date": format_iso_date(today), "students": [r.to_dict() for r in rows]})

    @app.route("/api/attendance/<student_id>", methods=["POST"], endpoint="attendance_mark")
    def attendance_mark(student_id: str):
        data = request.get_json(silent=True) or {}
        if not isinstance(data, dict):
            return jsonify({"success": False, "message": "Request body must be a JSON object"}), 400
        try:
            record = container.attendance_service.mark(student_id, data.get("status", ""))
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        except Exception:
            logger.exception("failed to mark attendance for %s", student_id)
            return jsonify({"success": False, "message": "Unexpected error while marking attendance"}), 500

        return jsonify(
            {
                "success": True,
                "student_id": record.student_id,
                "date": format_iso_date(record.date),
                "status": record.status.value,
            }
        )
