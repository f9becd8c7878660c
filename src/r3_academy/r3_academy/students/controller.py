from __future__ import annotations

from flask import Flask, jsonify, request

from ..container import Container
from ..core.exceptions import NotFoundError
from ..dashboard.service import student_card
from .model import Student


def _detail(s: Student) -> dict:
    card = student_card(s)
    card.update(
        {
            "father_name": s.father_name,
            "mother_name": s.mother_name,
            "phone": s.phone,
            "alt_phone": s.alt_phone,
            "address": s.address,
            "notes": s.notes,
        }
    )
    return card

def register(app: Flask, container: Container) -> None:
    @app.route("/api/students", methods=["GET"], endpoint="students_list")
    def students_list():
        query = request.args.get("q")
        if query:
            students = container.student_service.search(query)
        else:
            students = container.student_service.list_all()
        return jsonify({"success": True, "students": [_detail(s) for s in students]})

    @app.route("/api/students/<student_id>", methods=["GET"], endpoint="students_detail")
    def students_detail(student_id: str):
        try:
            student = container.student_service.get(student_id)
        except NotFoundError as e:
            return jsonify({"success": False, "message": str(e)}), 404
        return jsonify({"success": True, "student": _detail(student)})
