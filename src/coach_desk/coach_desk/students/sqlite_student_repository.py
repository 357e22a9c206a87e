from __future__ import annotations

from typing import Optional, Sequence

from ..common.datetime_utils import parse_timestamp
from ..core.enums import StudentStatus
from ..database.connection import DatabaseConnection
from ..database.sqlite_base import db_cursor, fetchall, fetchone
from .model import Student
from .repository import StudentRepository

_COLUMNS = (
    "id, coach_id, name, email, phone, sport_or_subject, batch, "
    "enrollment_date, status, monthly_fee, created_at"
)


def _row_to_student(r: dict) -> Student:
    return Student(
        id=int(r["id"]),
        coach_id=int(r["coach_id"]),
        name=r["name"],
        email=r.get("email"),
        phone=r.get("phone"),
        sport_or_subject=r.get("sport_or_subject"),
        batch=r.get("batch"),
        enrollment_date=parse_timestamp(r["enrollment_date"]) if r.get("enrollment_date") else None,
        status=StudentStatus(r["status"]),
        monthly_fee=float(r.get("monthly_fee") or 0),
        created_at=parse_timestamp(r["created_at"]) if r.get("created_at") else None,
    )


class SQLiteStudentRepository(StudentRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

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
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO students(coach_id, name, email, phone, sport_or_subject, batch, monthly_fee)
                VALUES(?,?,?,?,?,?,?)
                """,
                (int(coach_id), name, email, phone, sport_or_subject, batch, float(monthly_fee)),
            )
            return int(cur.lastrowid)

    def get_by_id(self, student_id: int) -> Optional[Student]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM students WHERE id=?", (int(student_id),))
            r = fetchone(cur)
            return _row_to_student(r) if r else None

    def list_by_coach(self, coach_id: int, *, status: Optional[StudentStatus] = None) -> Sequence[Student]:
        clauses = ["coach_id=?"]
        params: list[object] = [int(coach_id)]
        if status is not None:
            clauses.append("status=?")
            params.append(status.value)

        where = " AND ".join(clauses)

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM students WHERE {where} ORDER BY name ASC, id ASC",
                tuple(params),
            )
            return [_row_to_student(r) for r in fetchall(cur)]

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
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE students
                SET name=?, email=?, phone=?, sport_or_subject=?, batch=?, monthly_fee=?, status=?
                WHERE id=?
                """,
                (name, email, phone, sport_or_subject, batch, float(monthly_fee), status.value, int(student_id)),
            )
            return int(cur.rowcount)

    def delete(self, student_id: int) -> int:
        # attendance and payments rows go with it (ON DELETE CASCADE)
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM students WHERE id=?", (int(student_id),))
            return int(cur.rowcount)
