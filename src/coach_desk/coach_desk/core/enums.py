from __future__ import annotations

from enum import Enum


class StudentStatus(str, Enum):
    """Roster status; only active students are attendance-eligible."""

    ACTIVE = "active"
    INACTIVE = "inactive"


class AttendanceStatus(str, Enum):
    PRESENT = "present"
    ABSENT = "absent"


class PaymentStatus(str, Enum):
    COMPLETED = "completed"
    PENDING = "pending"
