from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from ..common.validators import mask_secret
from ..core.enums import PaymentStatus


@dataclass(frozen=True)
class Payment:
    """A fee payment. `month` is the reporting tag, independent of payment_date."""

    id: int
    student_id: int
    amount: float
    payment_date: Optional[datetime]
    payment_method: Optional[str]
    status: PaymentStatus
    month: Optional[str]
    notes: Optional[str] = None
    transaction_id: Optional[str] = None
    created_at: Optional[datetime] = None
    # Filled only by coach-level listings (joined from students).
    student_name: Optional[str] = None


@dataclass(frozen=True)
class PaymentSummary:
    total: float = 0.0
    count: int = 0

    @property
    def average(self) -> float:
        return self.total / self.count if self.count else 0.0

    def as_dict(self) -> dict:
        return {"total": self.total, "count": self.count}


@dataclass(frozen=True)
class PaymentMethodConfig:
    """Stored gateway configuration. Never invoked; the key stays secret."""

    id: int
    coach_id: int
    method_type: Optional[str]
    provider: Optional[str]
    api_key: Optional[str] = field(default=None, repr=False)
    is_active: bool = True
    created_at: Optional[datetime] = None

    @property
    def masked_api_key(self) -> str:
        return mask_secret(self.api_key)
