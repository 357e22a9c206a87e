from __future__ import annotations

from datetime import date
from typing import Mapping, Optional, Protocol, Sequence

from ..core.enums import AttendanceStatus
from .model import AttendanceRecord, DailyAttendanceRow


class AttendanceRepository(Protocol):
    def upsert(
        self,
        *,
        student_id: int,
        day: date,
        status: AttendanceStatus,
        notes: Optional[str] = None,
    ) -> int:
        """Insert the day's mark or replace status/notes of the existing one."""

        raise NotImplementedError

    def get_for_student_and_date(self, student_id: int, day: date) -> Optional[AttendanceRecord]:
        raise NotImplementedError

    def list_for_student(self, *, student_id: int, start_date: date, end_date: date) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def count_by_status(self, *, student_id: int, month: str) -> Mapping[str, int]:
        raise NotImplementedError

    def list_for_coach_on_date(self, *, coach_id: int, day: date) -> Sequence[DailyAttendanceRow]:
        raise NotImplementedError
