from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional, Sequence

from ..common.datetime_utils import parse_timestamp
from ..core.enums import PaymentStatus
from ..database.connection import DatabaseConnection
from ..database.sqlite_base import db_cursor, fetchall, fetchone
from .model import Payment, PaymentSummary
from .repository import PaymentRepository

_COLUMNS = (
    "p.id, p.student_id, p.amount, p.payment_date, p.payment_method, p.status, "
    "p.month, p.notes, p.transaction_id, p.created_at"
)

# Same text layout as CURRENT_TIMESTAMP so explicit and defaulted dates sort together.
_TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


def _row_to_payment(r: dict) -> Payment:
    return Payment(
        id=int(r["id"]),
        student_id=int(r["student_id"]),
        amount=float(r["amount"]),
        payment_date=parse_timestamp(r["payment_date"]) if r.get("payment_date") else None,
        payment_method=r.get("payment_method"),
        status=PaymentStatus(r["status"]),
        month=r.get("month"),
        notes=r.get("notes"),
        transaction_id=r.get("transaction_id"),
        created_at=parse_timestamp(r["created_at"]) if r.get("created_at") else None,
        student_name=r.get("student_name"),
    )


def _to_utc_text(value: datetime) -> str:
    # CURRENT_TIMESTAMP is UTC; naive values are taken as already UTC.
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc).replace(tzinfo=None)
    return value.strftime(_TIMESTAMP_FORMAT)


class SQLitePaymentRepository(PaymentRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

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
        stamp = _to_utc_text(payment_date) if payment_date else None
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO payments(student_id, amount, payment_date, payment_method, status, month, notes, transaction_id)
                VALUES(?, ?, COALESCE(?, CURRENT_TIMESTAMP), ?, ?, ?, ?, ?)
                """,
                (int(student_id), float(amount), stamp, payment_method, status.value, month, notes, transaction_id),
            )
            return int(cur.lastrowid)

    def get_by_id(self, payment_id: int) -> Optional[Payment]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}, s.name AS student_name
                FROM payments p
                LEFT JOIN students s ON s.id = p.student_id
                WHERE p.id=?
                """,
                (int(payment_id),),
            )
            r = fetchone(cur)
            return _row_to_payment(r) if r else None

    def list_for_student(self, student_id: int) -> Sequence[Payment]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM payments p
                WHERE p.student_id=?
                ORDER BY p.payment_date DESC, p.id DESC
                """,
                (int(student_id),),
            )
            return [_row_to_payment(r) for r in fetchall(cur)]

    def list_for_coach(self, coach_id: int) -> Sequence[Payment]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}, s.name AS student_name
                FROM payments p
                JOIN students s ON s.id = p.student_id
                WHERE s.coach_id=?
                ORDER BY p.payment_date DESC, p.id DESC
                """,
                (int(coach_id),),
            )
            return [_row_to_payment(r) for r in fetchall(cur)]

    def summary_for_month(self, *, coach_id: int, month: str) -> PaymentSummary:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT COALESCE(SUM(p.amount), 0) AS total, COUNT(p.id) AS count
                FROM payments p
                JOIN students s ON s.id = p.student_id
                WHERE s.coach_id=? AND p.month=? AND p.status=?
                """,
                (int(coach_id), month, PaymentStatus.COMPLETED.value),
            )
            r = fetchone(cur) or {}
            return PaymentSummary(total=float(r.get("total") or 0), count=int(r.get("count") or 0))

    def list_pending(self, coach_id: int) -> Sequence[Payment]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}, s.name AS student_name
                FROM payments p
                JOIN students s ON s.id = p.student_id
                WHERE s.coach_id=? AND p.status=?
                ORDER BY p.payment_date ASC, p.id ASC
                """,
                (int(coach_id), PaymentStatus.PENDING.value),
            )
            return [_row_to_payment(r) for r in fetchall(cur)]

    def update_status(self, *, payment_id: int, status: PaymentStatus) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("UPDATE payments SET status=? WHERE id=?", (status.value, int(payment_id)))
            return int(cur.rowcount)
