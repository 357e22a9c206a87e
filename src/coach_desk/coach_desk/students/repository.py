from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ..core.enums import StudentStatus
from .model import Student


class StudentRepository(Protocol):
    """Student persistence.

    Services depend on this interface, never on a concrete database.
    """

    def create(
        self,
        *,
        coach_id: int,
        name: str,
        email: Optional[str],
        phone: Optional[str],
        sport_or_subject: Optional[str],
        batch: Optional[str],
        monthly_fee: float,
    ) -> int:
        raise NotImplementedError

    def get_by_id(self, student_id: int) -> Optional[Student]:
        raise NotImplementedError

    def list_by_coach(self, coach_id: int, *, status: Optional[StudentStatus] = None) -> Sequence[Student]:
        raise NotImplementedError

    def update(
        self,
        *,
        student_id: int,
        name: str,
        email: Optional[str],
        phone: Optional[str],
        sport_or_subject: Optional[str],
        batch: Optional[str],
        monthly_fee: float,
        status: StudentStatus,
    ) -> int:
        raise NotImplementedError

    def delete(self, student_id: int) -> int:
        raise NotImplementedError
