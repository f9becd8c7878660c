from __future__ import annotations

from flask import Flask, jsonify

from ..common.datetime_utils import format_iso_date, today_local
from ..container import Container
from ..dashboard.service import student_card
from .service import weekday_for


def register(app: Flask, container: Container) -> None:
    @app.route("/api/schedule", methods=["GET"], endpoint="schedule_week")
    def schedule_week():
        planner = container.schedule_service.weekly_planner()
        return jsonify(
            {
                "success": True,
                "days": [
                    {"day": day.value, "students": [student_card(s) for s in students]}
                    for day, students in planner.items()
                ],
            }
        )

    @app.route("/api/schedule/today", methods=["GET"], endpoint="schedule_today")
    def schedule_today():
        today = today_local()
        weekday = weekday_for(today)
        students = container.schedule_service.for_date(today)
        return jsonify(
            {
                "success": True,
                "date": format_iso_date(today),
                "day": weekday.value if weekday else None,
                "students": [student_card(s) for s in students],
            }
        )
