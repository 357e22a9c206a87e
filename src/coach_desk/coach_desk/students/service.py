from __future__ import annotations

from typing import Optional, Sequence

from ..app_logger import get_logger
from ..common.validators import (
    optional_email,
    optional_text,
    parse_choice,
    parse_fee,
    parse_id,
    require_non_empty,
)
from ..core.enums import StudentStatus
from ..core.exceptions import NotFoundError
from .model import Student
from .repository import StudentRepository

log = get_logger(__name__)


class StudentService:
    """Use case: manage the coach's roster."""

    def __init__(self, students: StudentRepository):
        self._students = students

    def create(
        self,
        *,
        coach_id,
        name: str,
        email: Optional[str] = None,
        phone: Optional[str] = None,
        sport_or_subject: Optional[str] = None,
        batch: Optional[str] = None,
        monthly_fee=None,
    ) -> int:
        student_id = self._students.create(
            coach_id=parse_id(coach_id, "Coach"),
            name=require_non_empty(name, "Student name"),
            email=optional_email(email),
            phone=optional_text(phone),
            sport_or_subject=optional_text(sport_or_subject),
            batch=optional_text(batch),
            monthly_fee=parse_fee(monthly_fee),
        )
        log.info("created student id=%s coach_id=%s", student_id, coach_id)
        return student_id

    def get(self, student_id) -> Optional[Student]:
        return self._students.get_by_id(parse_id(student_id, "Student"))

    def require(self, student_id) -> Student:
        student = self.get(student_id)
        if not student:
            raise NotFoundError(f"Student {student_id} not found")
        return student

    def list_by_coach(self, coach_id, *, status=None) -> Sequence[Student]:
        wanted = parse_choice(status, StudentStatus, "Status") if status else None
        return self._students.list_by_coach(parse_id(coach_id, "Coach"), status=wanted)

    def list_active(self, coach_id) -> Sequence[Student]:
        return self.list_by_coach(coach_id, status=StudentStatus.ACTIVE)

    def update(
        self,
        student_id,
        *,
        name: str,
        email: Optional[str],
        phone: Optional[str],
        sport_or_subject: Optional[str],
        batch: Optional[str],
        monthly_fee,
        status,
    ) -> int:
        """Replace every mutable field at once; partial updates are not supported."""
        affected = self._students.update(
            student_id=parse_id(student_id, "Student"),
            name=require_non_empty(name, "Student name"),
            email=optional_email(email),
            phone=optional_text(phone),
            sport_or_subject=optional_text(sport_or_subject),
            batch=optional_text(batch),
            monthly_fee=parse_fee(monthly_fee),
            status=parse_choice(status, StudentStatus, "Status"),
        )
        log.info("updated student id=%s affected=%s", student_id, affected)
        return affected

    def delete(self, student_id) -> int:
        affected = self._students.delete(parse_id(student_id, "Student"))
        log.info("deleted student id=%s affected=%s", student_id, affected)
        return affected
