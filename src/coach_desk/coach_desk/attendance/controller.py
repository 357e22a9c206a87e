from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.datetime_utils import now_local
from ..common.serializers import to_json
from ..container import Container
from ..core.exceptions import ValidationError


def register(app: Flask, container: Container) -> None:
    @app.route("/api/attendance", endpoint="attendance_sheet")
    def attendance_sheet():
        day = request.args.get("date") or now_local().date().isoformat()
        coach_id = container.current_coach_id()

        students = container.student_service.list_active(coach_id)
        rows = container.attendance_service.list_for_date(coach_id, day)
        container.state.set_attendance([r.to_record() for r in rows])

        marks = {r.student_id: r.status.value for r in rows}
        return jsonify(
            {
                "date": day,
                "students": to_json(students),
                "marks": {str(k): v for k, v in marks.items()},
                "present": sum(1 for v in marks.values() if v == "present"),
                "absent": sum(1 for v in marks.values() if v == "absent"),
            }
        )

    @app.route("/api/attendance", methods=["POST"], endpoint="save_attendance")
    def save_attendance():
        data = request.get_json(silent=True) or {}
        marks = data.get("marks") or {}
        if not marks:
            raise ValidationError("No attendance marked for this date")

        day = data.get("date") or now_local().date().isoformat()
        saved = container.attendance_service.mark_batch(day, marks)

        rows = container.attendance_service.list_for_date(container.current_coach_id(), day)
        container.state.set_attendance([r.to_record() for r in rows])
        container.state.set_success_message("Attendance saved successfully!")
        return jsonify({"date": day, "saved": saved})

    @app.route("/api/students/<int:student_id>/attendance", methods=["POST"], endpoint="mark_attendance")
    def mark_attendance(student_id: int):
        data = request.get_json(silent=True) or {}
        day = data.get("date") or now_local().date().isoformat()
        container.attendance_service.mark(student_id, day, data.get("status", "present"), data.get("notes"))

        record = container.attendance_service.get_for_day(student_id, day)
        container.state.add_attendance_record(record)
        return jsonify(to_json(record)), 201

    @app.route("/api/students/<int:student_id>/attendance", endpoint="student_attendance")
    def student_attendance(student_id: int):
        records = container.attendance_service.list_for_student(
            student_id,
            request.args.get("start", ""),
            request.args.get("end", ""),
        )
        return jsonify(to_json(records))

    @app.route("/api/students/<int:student_id>/attendance/summary", endpoint="attendance_summary")
    def attendance_summary(student_id: int):
        month = request.args.get("month") or container.state.selected_month
        return jsonify(container.attendance_service.summarize(student_id, month))
