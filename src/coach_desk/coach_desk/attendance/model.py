from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class AttendanceRecord:
    """One student's mark for one calendar day."""

    id: int
    student_id: int
    date: date
    status: AttendanceStatus
    notes: Optional[str] = None
    created_at: Optional[datetime] = None


@dataclass(frozen=True)
class DailyAttendanceRow:
    """Read-model for the coach's day sheet (record joined with student name)."""

    id: int
    student_id: int
    student_name: str
    date: date
    status: AttendanceStatus
    notes: Optional[str] = None

    def to_record(self) -> AttendanceRecord:
        return AttendanceRecord(
            id=self.id,
            student_id=self.student_id,
            date=self.date,
            status=self.status,
            notes=self.notes,
        )
