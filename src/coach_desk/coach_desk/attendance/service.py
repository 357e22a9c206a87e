from __future__ import annotations

from typing import Dict, Mapping, Optional, Sequence

from ..app_logger import get_logger
from ..common.datetime_utils import parse_iso_date, parse_month
from ..common.validators import optional_text, parse_choice, parse_id
from ..core.enums import AttendanceStatus
from ..core.exceptions import ValidationError
from .model import AttendanceRecord, DailyAttendanceRow
from .repository import AttendanceRepository

log = get_logger(__name__)


class AttendanceService:
    def __init__(self, attendance: AttendanceRepository):
        self._attendance = attendance

    def mark(self, student_id, day, status=AttendanceStatus.PRESENT, notes: Optional[str] = None) -> int:
        """Record the day's status; marking the same day again replaces status and notes."""
        student_id = parse_id(student_id, "Student")
        day = parse_iso_date(day)
        status = parse_choice(status, AttendanceStatus, "Attendance status")

        record_id = self._attendance.upsert(student_id=student_id, day=day, status=status, notes=optional_text(notes))
        log.info("attendance student_id=%s date=%s status=%s", student_id, day, status.value)
        return record_id

    def mark_batch(self, day, marks: Mapping[object, object]) -> int:
        """Save a whole day sheet, one upsert after the other.

        The first failure propagates; records saved before it stay saved.
        """
        day = parse_iso_date(day)
        if not isinstance(marks, Mapping):
            raise ValidationError("Attendance marks must map student ids to statuses")
        parsed = [
            (parse_id(student_id, "Student"), parse_choice(status, AttendanceStatus, "Attendance status"))
            for student_id, status in marks.items()
        ]

        saved = 0
        for student_id, status in parsed:
            self._attendance.upsert(student_id=student_id, day=day, status=status, notes=None)
            saved += 1
        log.info("attendance sheet date=%s saved=%s", day, saved)
        return saved

    def get_for_day(self, student_id, day) -> Optional[AttendanceRecord]:
        return self._attendance.get_for_student_and_date(parse_id(student_id, "Student"), parse_iso_date(day))

    def list_for_student(self, student_id, start_date, end_date) -> Sequence[AttendanceRecord]:
        """Records between start_date and end_date inclusive, newest first."""
        return self._attendance.list_for_student(
            student_id=parse_id(student_id, "Student"),
            start_date=parse_iso_date(start_date),
            end_date=parse_iso_date(end_date),
        )

    def summarize(self, student_id, month) -> Dict[str, int]:
        counts = self._attendance.count_by_status(student_id=parse_id(student_id, "Student"), month=parse_month(month))
        summary = {s.value: 0 for s in AttendanceStatus}
        summary.update({k: int(v) for k, v in counts.items()})
        return summary

    def list_for_date(self, coach_id, day) -> Sequence[DailyAttendanceRow]:
        return self._attendance.list_for_coach_on_date(coach_id=parse_id(coach_id, "Coach"), day=parse_iso_date(day))

    def status_by_student(self, coach_id, day) -> Dict[int, AttendanceStatus]:
        """Day sheet as {student_id: status}; unmarked students are left out."""
        return {row.student_id: row.status for row in self.list_for_date(coach_id, day)}
