from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.serializers import to_json
from ..container import Container
from ..core.exceptions import NotFoundError

_MUTABLE_FIELDS = ("name", "email", "phone", "sport_or_subject", "batch", "monthly_fee", "status")


def register(app: Flask, container: Container) -> None:
    @app.route("/api/students", endpoint="list_students")
    def list_students():
        students = container.student_service.list_by_coach(container.current_coach_id())
        container.state.set_students(students)
        filtered = container.state.search_students(request.args.get("q", ""), request.args.get("status"))
        return jsonify(to_json(filtered))

    @app.route("/api/students", methods=["POST"], endpoint="add_student")
    def add_student():
        data = request.get_json(silent=True) or {}
        student_id = container.student_service.create(
            coach_id=data.get("coach_id") or container.current_coach_id(),
            name=data.get("name", ""),
            email=data.get("email"),
            phone=data.get("phone"),
            sport_or_subject=data.get("sport_or_subject"),
            batch=data.get("batch"),
            monthly_fee=data.get("monthly_fee"),
        )
        student = container.student_service.require(student_id)
        container.state.add_student(student)
        container.state.set_success_message("Student added successfully!")
        return jsonify(to_json(student)), 201

    @app.route("/api/students/<int:student_id>", endpoint="student_detail")
    def student_detail(student_id: int):
        overview = container.report_service.student_overview(student_id, month=request.args.get("month"))
        container.state.set_selected_student(overview.student)
        body = to_json(overview)
        body["attendance_total"] = overview.attendance_total
        return jsonify(body)

    @app.route("/api/students/<int:student_id>", methods=["PUT"], endpoint="update_student")
    def update_student(student_id: int):
        data = request.get_json(silent=True) or {}
        affected = container.student_service.update(student_id, **{k: data.get(k) for k in _MUTABLE_FIELDS})
        if not affected:
            raise NotFoundError(f"Student {student_id} not found")

        student = container.student_service.require(student_id)
        container.state.update_student(student_id, **{k: getattr(student, k) for k in _MUTABLE_FIELDS})
        return jsonify(to_json(student))

    @app.route("/api/students/<int:student_id>", methods=["DELETE"], endpoint="delete_student")
    def delete_student(student_id: int):
        if not container.student_service.delete(student_id):
            raise NotFoundError(f"Student {student_id} not found")
        container.state.remove_student(student_id)
        container.state.set_success_message("Student deleted successfully")
        return jsonify({"deleted": student_id})
