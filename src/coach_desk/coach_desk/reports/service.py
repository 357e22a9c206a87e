from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional, Sequence

from ..attendance.model import AttendanceRecord
from ..attendance.repository import AttendanceRepository
from ..common.datetime_utils import month_bounds, month_of, now_local, parse_iso_date, parse_month
from ..common.validators import parse_id
from ..core.enums import AttendanceStatus
from ..core.exceptions import NotFoundError
from ..payments.model import Payment
from ..payments.repository import PaymentRepository
from ..students.model import Student
from ..students.repository import StudentRepository


@dataclass(frozen=True)
class DashboardStats:
    total_students: int
    active_students: int
    monthly_revenue: float
    expected_monthly_revenue: float
    attendance_today: int
    pending_payments: int


@dataclass(frozen=True)
class StudentOverview:
    student: Student
    payments: Sequence[Payment]
    attendance: Sequence[AttendanceRecord]
    present: int
    absent: int
    total_paid: float

    @property
    def attendance_total(self) -> int:
        return len(self.attendance)


class ReportService:
    """Read-only aggregates for the dashboard and the student detail view."""

    def __init__(
        self,
        students: StudentRepository,
        attendance: AttendanceRepository,
        payments: PaymentRepository,
    ):
        self._students = students
        self._attendance = attendance
        self._payments = payments

    def dashboard(self, coach_id, *, today: Optional[date] = None) -> DashboardStats:
        coach_id = parse_id(coach_id, "Coach")
        today = parse_iso_date(today) if today else now_local().date()

        students = self._students.list_by_coach(coach_id)
        summary = self._payments.summary_for_month(coach_id=coach_id, month=month_of(today))
        marked_today = self._attendance.list_for_coach_on_date(coach_id=coach_id, day=today)
        pending = self._payments.list_pending(coach_id)

        return DashboardStats(
            total_students=len(students),
            active_students=sum(1 for s in students if s.is_active),
            monthly_revenue=summary.total,
            expected_monthly_revenue=sum(s.monthly_fee for s in students),
            attendance_today=len(marked_today),
            pending_payments=len(pending),
        )

    def student_overview(self, student_id, *, month=None) -> StudentOverview:
        student_id = parse_id(student_id, "Student")
        student = self._students.get_by_id(student_id)
        if not student:
            raise NotFoundError(f"Student {student_id} not found")

        month = parse_month(month) if month else month_of(now_local().date())
        start, end = month_bounds(month)

        payments = self._payments.list_for_student(student_id)
        attendance = self._attendance.list_for_student(student_id=student_id, start_date=start, end_date=end)

        return StudentOverview(
            student=student,
            payments=payments,
            attendance=attendance,
            present=sum(1 for a in attendance if a.status == AttendanceStatus.PRESENT),
            absent=sum(1 for a in attendance if a.status == AttendanceStatus.ABSENT),
            total_paid=sum(p.amount for p in payments),
        )
