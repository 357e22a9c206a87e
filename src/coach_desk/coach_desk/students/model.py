from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..core.enums import StudentStatus


@dataclass(frozen=True)
class Student:
    """A coached student/client. Belongs to exactly one coach."""

    id: int
    coach_id: int
    name: str
    email: Optional[str] = None
    phone: Optional[str] = None
    sport_or_subject: Optional[str] = None
    batch: Optional[str] = None
    enrollment_date: Optional[datetime] = None
    status: StudentStatus = StudentStatus.ACTIVE
    monthly_fee: float = 0.0
    created_at: Optional[datetime] = None

    @property
    def is_active(self) -> bool:
        return self.status == StudentStatus.ACTIVE
