"""Session-scoped mirror of what the presentation layer last loaded.

The database stays the source of truth: every collection here can be
replaced wholesale by a fresh load, and nothing is written back.
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields, replace
from typing import Any, List, Optional, Sequence

from ..attendance.model import AttendanceRecord
from ..coaches.model import Coach
from ..common.datetime_utils import month_of, now_local, parse_month
from ..common.validators import parse_amount, parse_choice, parse_fee
from ..core.enums import PaymentStatus, StudentStatus
from ..core.exceptions import ValidationError
from ..payments.model import Payment
from ..students.model import Student


def _current_month() -> str:
    return month_of(now_local().date())


def _merge(entity, patch: dict):
    allowed = {f.name for f in fields(entity)} - {"id"}
    unknown = set(patch) - allowed
    if unknown:
        raise ValidationError(f"Unknown fields: {', '.join(sorted(unknown))}")

    values = dict(patch)
    if "status" in values:
        status_cls = PaymentStatus if isinstance(entity, Payment) else StudentStatus
        values["status"] = parse_choice(values["status"], status_cls, "Status")
    if "monthly_fee" in values:
        values["monthly_fee"] = parse_fee(values["monthly_fee"])
    if "amount" in values:
        values["amount"] = parse_amount(values["amount"])
    return replace(entity, **values)


@dataclass
class AppState:
    coach: Optional[Coach] = None
    students: List[Student] = field(default_factory=list)
    attendance: List[AttendanceRecord] = field(default_factory=list)
    payments: List[Payment] = field(default_factory=list)

    loading: bool = False
    error: Optional[str] = None
    success_message: Optional[str] = None
    selected_month: str = field(default_factory=_current_month)
    selected_student: Optional[Student] = None

    # coach
    def set_coach(self, coach: Optional[Coach]) -> None:
        self.coach = coach

    # students
    def set_students(self, students: Sequence[Student]) -> None:
        self.students = list(students)

    def add_student(self, student: Student) -> None:
        self.students = [*self.students, student]

    def update_student(self, student_id: int, **patch: Any) -> None:
        """Merge patch onto the cached student; unknown ids are ignored."""
        self.students = [_merge(s, patch) if s.id == student_id else s for s in self.students]
        if self.selected_student and self.selected_student.id == student_id:
            self.selected_student = self.find_student(student_id)

    def remove_student(self, student_id: int) -> None:
        self.students = [s for s in self.students if s.id != student_id]
        # history is deleted with the student, so drop it here too
        self.attendance = [a for a in self.attendance if a.student_id != student_id]
        self.payments = [p for p in self.payments if p.student_id != student_id]
        if self.selected_student and self.selected_student.id == student_id:
            self.selected_student = None

    def find_student(self, student_id: int) -> Optional[Student]:
        return next((s for s in self.students if s.id == student_id), None)

    def active_students(self) -> List[Student]:
        return [s for s in self.students if s.status == StudentStatus.ACTIVE]

    def search_students(self, query: str = "", status: Optional[str] = None) -> List[Student]:
        """Roster filter: status tab plus a case-insensitive name/email/phone match."""
        result = self.students
        if status and status != "all":
            wanted = parse_choice(status, StudentStatus, "Status")
            result = [s for s in result if s.status == wanted]

        needle = (query or "").strip().lower()
        if needle:
            result = [
                s
                for s in result
                if needle in s.name.lower()
                or needle in (s.email or "").lower()
                or needle in (s.phone or "")
            ]
        return list(result)

    # attendance
    def set_attendance(self, records: Sequence[AttendanceRecord]) -> None:
        self.attendance = list(records)

    def add_attendance_record(self, record: AttendanceRecord) -> None:
        """Append; a cached mark for the same student and day is replaced, as in the table."""
        kept = [a for a in self.attendance if (a.student_id, a.date) != (record.student_id, record.date)]
        self.attendance = [*kept, record]

    # payments
    def set_payments(self, payments: Sequence[Payment]) -> None:
        self.payments = list(payments)

    def add_payment(self, payment: Payment) -> None:
        self.payments = [*self.payments, payment]

    def update_payment(self, payment_id: int, **patch: Any) -> None:
        self.payments = [_merge(p, patch) if p.id == payment_id else p for p in self.payments]

    def payments_for_month(self, month: Optional[str] = None) -> List[Payment]:
        month = parse_month(month) if month else self.selected_month
        return [p for p in self.payments if p.month == month]

    # ui
    def set_loading(self, loading: bool) -> None:
        self.loading = bool(loading)

    def set_error(self, error: Optional[str]) -> None:
        self.error = error

    def set_success_message(self, message: Optional[str]) -> None:
        self.success_message = message

    def set_selected_month(self, month: str) -> None:
        self.selected_month = parse_month(month)

    def set_selected_student(self, student: Optional[Student]) -> None:
        self.selected_student = student

    def clear_error(self) -> None:
        self.error = None

    def clear_success(self) -> None:
        self.success_message = None
