from __future__ import annotations

from typing import Optional, Sequence

from ..common.datetime_utils import parse_timestamp
from ..database.connection import DatabaseConnection
from ..database.sqlite_base import db_cursor, fetchall, fetchone
from .method_repository import PaymentMethodRepository
from .model import PaymentMethodConfig

_COLUMNS = "id, coach_id, method_type, provider, api_key, is_active, created_at"


def _row_to_method(r: dict) -> PaymentMethodConfig:
    return PaymentMethodConfig(
        id=int(r["id"]),
        coach_id=int(r["coach_id"]),
        method_type=r.get("method_type"),
        provider=r.get("provider"),
        api_key=r.get("api_key"),
        is_active=bool(r.get("is_active", 1)),
        created_at=parse_timestamp(r["created_at"]) if r.get("created_at") else None,
    )


class SQLitePaymentMethodRepository(PaymentMethodRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def create(self, *, coach_id: int, method_type: str, provider: str, api_key: str, is_active: bool = True) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO payment_methods(coach_id, method_type, provider, api_key, is_active)
                VALUES(?,?,?,?,?)
                """,
                (int(coach_id), method_type, provider, api_key, 1 if is_active else 0),
            )
            return int(cur.lastrowid)

    def get_by_id(self, method_id: int) -> Optional[PaymentMethodConfig]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM payment_methods WHERE id=?", (int(method_id),))
            r = fetchone(cur)
            return _row_to_method(r) if r else None

    def find(self, *, coach_id: int, method_type: str, provider: str) -> Optional[PaymentMethodConfig]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM payment_methods
                WHERE coach_id=? AND method_type=? AND provider=?
                ORDER BY id DESC
                LIMIT 1
                """,
                (int(coach_id), method_type, provider),
            )
            r = fetchone(cur)
            return _row_to_method(r) if r else None

    def update(
        self,
        *,
        method_id: int,
        method_type: str,
        provider: str,
        api_key: str,
        is_active: bool,
    ) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE payment_methods
                SET method_type=?, provider=?, api_key=?, is_active=?
                WHERE id=?
                """,
                (method_type, provider, api_key, 1 if is_active else 0, int(method_id)),
            )
            return int(cur.rowcount)

    def set_active(self, method_id: int, *, is_active: bool) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "UPDATE payment_methods SET is_active=? WHERE id=?",
                (1 if is_active else 0, int(method_id)),
            )
            return int(cur.rowcount)

    def list_active(self, coach_id: int) -> Sequence[PaymentMethodConfig]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM payment_methods WHERE coach_id=? AND is_active=1 ORDER BY id ASC",
                (int(coach_id),),
            )
            return [_row_to_method(r) for r in fetchall(cur)]
