from __future__ import annotations

from datetime import datetime
from typing import Optional, Protocol, Sequence

from ..core.enums import PaymentStatus
from .model import Payment, PaymentSummary


class PaymentRepository(Protocol):
    def create(
        self,
        *,
        student_id: int,
        amount: float,
        payment_method: Optional[str],
        status: PaymentStatus,
        month: str,
        notes: Optional[str],
        transaction_id: str,
        payment_date: Optional[datetime] = None,
    ) -> int:
        raise NotImplementedError

    def get_by_id(self, payment_id: int) -> Optional[Payment]:
        raise NotImplementedError

    def list_for_student(self, student_id: int) -> Sequence[Payment]:
        raise NotImplementedError

    def list_for_coach(self, coach_id: int) -> Sequence[Payment]:
        raise NotImplementedError

    def summary_for_month(self, *, coach_id: int, month: str) -> PaymentSummary:
        """Completed payments tagged with `month`: total amount and row count."""

        raise NotImplementedError

    def list_pending(self, coach_id: int) -> Sequence[Payment]:
        raise NotImplementedError

    def update_status(self, *, payment_id: int, status: PaymentStatus) -> int:
        raise NotImplementedError
