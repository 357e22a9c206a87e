from __future__ import annotations

from typing import Optional

from ..common.datetime_utils import parse_timestamp
from ..database.connection import DatabaseConnection
from ..database.sqlite_base import db_cursor, fetchone
from .model import Coach
from .repository import CoachRepository

_COLUMNS = "id, name, email, phone, specialization, business_name, created_at"


def _row_to_coach(r: dict) -> Coach:
    return Coach(
        id=int(r["id"]),
        name=r["name"],
        email=r["email"],
        phone=r.get("phone"),
        specialization=r.get("specialization"),
        business_name=r.get("business_name"),
        created_at=parse_timestamp(r["created_at"]) if r.get("created_at") else None,
    )


class SQLiteCoachRepository(CoachRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def create(
        self,
        *,
        name: str,
        email: str,
        phone: Optional[str] = None,
        specialization: Optional[str] = None,
        business_name: Optional[str] = None,
    ) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO coaches(name, email, phone, specialization, business_name)
                VALUES(?,?,?,?,?)
                """,
                (name, email, phone, specialization, business_name),
            )
            return int(cur.lastrowid)

    def get_by_id(self, coach_id: int) -> Optional[Coach]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM coaches WHERE id=?", (int(coach_id),))
            r = fetchone(cur)
            return _row_to_coach(r) if r else None

    def get_by_email(self, email: str) -> Optional[Coach]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM coaches WHERE email=?", (email,))
            r = fetchone(cur)
            return _row_to_coach(r) if r else None
