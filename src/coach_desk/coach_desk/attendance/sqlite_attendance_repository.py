from __future__ import annotations

from datetime import date
from typing import Mapping, Optional, Sequence

from ..common.datetime_utils import parse_iso_date, parse_timestamp
from ..core.enums import AttendanceStatus
from ..database.connection import DatabaseConnection
from ..database.sqlite_base import db_cursor, fetchall, fetchone
from .model import AttendanceRecord, DailyAttendanceRow
from .repository import AttendanceRepository


def _row_to_record(r: dict) -> AttendanceRecord:
    return AttendanceRecord(
        id=int(r["id"]),
        student_id=int(r["student_id"]),
        date=parse_iso_date(r["date"]),
        status=AttendanceStatus(r["status"]),
        notes=r.get("notes"),
        created_at=parse_timestamp(r["created_at"]) if r.get("created_at") else None,
    )


class SQLiteAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def upsert(
        self,
        *,
        student_id: int,
        day: date,
        status: AttendanceStatus,
        notes: Optional[str] = None,
    ) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO attendance(student_id, date, status, notes)
                VALUES(?,?,?,?)
                ON CONFLICT(student_id, date) DO UPDATE SET status=excluded.status, notes=excluded.notes
                """,
                (int(student_id), day.isoformat(), status.value, notes),
            )

            # lastrowid is not reliable when the conflict branch ran; look the row up.
            cur.execute(
                "SELECT id FROM attendance WHERE student_id=? AND date=?",
                (int(student_id), day.isoformat()),
            )
            r = fetchone(cur)
            return int(r["id"]) if r else 0

    def get_for_student_and_date(self, student_id: int, day: date) -> Optional[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT id, student_id, date, status, notes, created_at
                FROM attendance
                WHERE student_id=? AND date=?
                """,
                (int(student_id), day.isoformat()),
            )
            r = fetchone(cur)
            return _row_to_record(r) if r else None

    def list_for_student(self, *, student_id: int, start_date: date, end_date: date) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT id, student_id, date, status, notes, created_at
                FROM attendance
                WHERE student_id=? AND date BETWEEN ? AND ?
                ORDER BY date DESC
                """,
                (int(student_id), start_date.isoformat(), end_date.isoformat()),
            )
            return [_row_to_record(r) for r in fetchall(cur)]

    def count_by_status(self, *, student_id: int, month: str) -> Mapping[str, int]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT status, COUNT(*) AS count
                FROM attendance
                WHERE student_id=? AND strftime('%Y-%m', date)=?
                GROUP BY status
                """,
                (int(student_id), month),
            )
            return {r["status"]: int(r["count"]) for r in fetchall(cur)}

    def list_for_coach_on_date(self, *, coach_id: int, day: date) -> Sequence[DailyAttendanceRow]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT a.id, a.student_id, s.name AS student_name, a.date, a.status, a.notes
                FROM attendance a
                JOIN students s ON s.id = a.student_id
                WHERE s.coach_id=? AND a.date=?
                ORDER BY s.name ASC, s.id ASC
                """,
                (int(coach_id), day.isoformat()),
            )
            return [
                DailyAttendanceRow(
                    id=int(r["id"]),
                    student_id=int(r["student_id"]),
                    student_name=r["student_name"],
                    date=parse_iso_date(r["date"]),
                    status=AttendanceStatus(r["status"]),
                    notes=r.get("notes"),
                )
                for r in fetchall(cur)
            ]
