from __future__ import annotations

from datetime import datetime
from typing import Optional, Sequence
from uuid import uuid4

from ..app_logger import get_logger
from ..common.datetime_utils import now_local, parse_month, parse_timestamp
from ..common.validators import optional_text, parse_amount, parse_choice, parse_id, require_non_empty
from ..core.constants import DEFAULT_PAYMENT_METHOD, TRANSACTION_ID_PREFIX
from ..core.enums import PaymentStatus
from ..core.exceptions import NotFoundError
from .method_repository import PaymentMethodRepository
from .model import Payment, PaymentMethodConfig, PaymentSummary
from .repository import PaymentRepository

log = get_logger(__name__)


def new_transaction_id(now: Optional[datetime] = None) -> str:
    now = now or now_local()
    return f"{TRANSACTION_ID_PREFIX}-{int(now.timestamp() * 1000)}-{uuid4().hex[:6].upper()}"


class PaymentService:
    """Use case: record fee payments and build the revenue views."""

    def __init__(self, payments: PaymentRepository):
        self._payments = payments

    def record(
        self,
        *,
        student_id,
        amount,
        month,
        payment_method: Optional[str] = DEFAULT_PAYMENT_METHOD,
        status=PaymentStatus.COMPLETED,
        notes: Optional[str] = None,
        transaction_id: Optional[str] = None,
        payment_date=None,
    ) -> int:
        student_id = parse_id(student_id, "Student")
        amount = parse_amount(amount)
        month = parse_month(month)
        status = parse_choice(status, PaymentStatus, "Payment status")
        transaction_id = optional_text(transaction_id) or new_transaction_id()

        payment_id = self._payments.create(
            student_id=student_id,
            amount=amount,
            payment_method=optional_text(payment_method) or DEFAULT_PAYMENT_METHOD,
            status=status,
            month=month,
            notes=optional_text(notes),
            transaction_id=transaction_id,
            payment_date=parse_timestamp(payment_date) if payment_date else None,
        )
        log.info("payment id=%s student_id=%s month=%s status=%s", payment_id, student_id, month, status.value)
        return payment_id

    def get(self, payment_id) -> Optional[Payment]:
        return self._payments.get_by_id(parse_id(payment_id, "Payment"))

    def require(self, payment_id) -> Payment:
        payment = self.get(payment_id)
        if not payment:
            raise NotFoundError(f"Payment {payment_id} not found")
        return payment

    def list_for_student(self, student_id) -> Sequence[Payment]:
        return self._payments.list_for_student(parse_id(student_id, "Student"))

    def list_for_coach(self, coach_id) -> Sequence[Payment]:
        return self._payments.list_for_coach(parse_id(coach_id, "Coach"))

    def monthly_summary(self, coach_id, month) -> PaymentSummary:
        return self._payments.summary_for_month(coach_id=parse_id(coach_id, "Coach"), month=parse_month(month))

    def list_pending(self, coach_id) -> Sequence[Payment]:
        """Pending payments, oldest first."""
        return self._payments.list_pending(parse_id(coach_id, "Coach"))

    def set_status(self, payment_id, status) -> int:
        payment_id = parse_id(payment_id, "Payment")
        status = parse_choice(status, PaymentStatus, "Payment status")
        affected = self._payments.update_status(payment_id=payment_id, status=status)
        log.info("payment id=%s status=%s affected=%s", payment_id, status.value, affected)
        return affected

    def mark_completed(self, payment_id) -> int:
        return self.set_status(payment_id, PaymentStatus.COMPLETED)


class PaymentMethodService:
    """Use case: keep gateway settings. Keys are stored, never used or logged."""

    def __init__(self, methods: PaymentMethodRepository):
        self._methods = methods

    def upsert(self, *, coach_id, method_type: str, provider: str, api_key: str, is_active: bool = True) -> int:
        coach_id = parse_id(coach_id, "Coach")
        method_type = require_non_empty(method_type, "Method type").lower()
        provider = require_non_empty(provider, "Provider").lower()
        api_key = require_non_empty(api_key, "API key")

        existing = self._methods.find(coach_id=coach_id, method_type=method_type, provider=provider)
        if existing:
            self._methods.update(
                method_id=existing.id,
                method_type=method_type,
                provider=provider,
                api_key=api_key,
                is_active=bool(is_active),
            )
            log.info("payment method id=%s updated (%s/%s)", existing.id, method_type, provider)
            return existing.id

        method_id = self._methods.create(
            coach_id=coach_id,
            method_type=method_type,
            provider=provider,
            api_key=api_key,
            is_active=bool(is_active),
        )
        log.info("payment method id=%s created (%s/%s)", method_id, method_type, provider)
        return method_id

    def update(self, method_id, *, method_type: str, provider: str, api_key: str, is_active: bool) -> int:
        return self._methods.update(
            method_id=parse_id(method_id, "Payment method"),
            method_type=require_non_empty(method_type, "Method type").lower(),
            provider=require_non_empty(provider, "Provider").lower(),
            api_key=require_non_empty(api_key, "API key"),
            is_active=bool(is_active),
        )

    def deactivate(self, method_id) -> int:
        method_id = parse_id(method_id, "Payment method")
        affected = self._methods.set_active(method_id, is_active=False)
        log.info("payment method id=%s deactivated affected=%s", method_id, affected)
        return affected

    def list_active(self, coach_id) -> Sequence[PaymentMethodConfig]:
        return self._methods.list_active(parse_id(coach_id, "Coach"))
