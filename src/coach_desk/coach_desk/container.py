from __future__ import annotations

from dataclasses import dataclass

from .attendance.service import AttendanceService
from .attendance.sqlite_attendance_repository import SQLiteAttendanceRepository
from .coaches.service import CoachService
from .coaches.sqlite_coach_repository import SQLiteCoachRepository
from .core.constants import DEFAULT_COACH_ID, DEFAULT_DB_TIMEOUT_SECONDS
from .database.connection import DBConfig, DatabaseConnection
from .payments.service import PaymentMethodService, PaymentService
from .payments.sqlite_method_repository import SQLitePaymentMethodRepository
from .payments.sqlite_payment_repository import SQLitePaymentRepository
from .reports.service import ReportService
from .state.store import AppState
from .students.service import StudentService
from .students.sqlite_student_repository import SQLiteStudentRepository


@dataclass(frozen=True)
class Container:
    conn: DatabaseConnection

    coaches_repo: SQLiteCoachRepository
    students_repo: SQLiteStudentRepository
    attendance_repo: SQLiteAttendanceRepository
    payments_repo: SQLitePaymentRepository
    payment_methods_repo: SQLitePaymentMethodRepository

    coach_service: CoachService
    student_service: StudentService
    attendance_service: AttendanceService
    payment_service: PaymentService
    payment_method_service: PaymentMethodService
    report_service: ReportService

    state: AppState
    default_coach_id: int = DEFAULT_COACH_ID

    def current_coach_id(self) -> int:
        coach = self.state.coach
        return coach.id if coach else self.default_coach_id


def build_container(*, db_config: dict, default_coach_id: int = DEFAULT_COACH_ID) -> Container:
    config = DBConfig(
        path=str(db_config["path"]),
        timeout=float(db_config.get("timeout", DEFAULT_DB_TIMEOUT_SECONDS)),
    )
    conn = DatabaseConnection.get_instance(config)

    coaches_repo = SQLiteCoachRepository(conn)
    students_repo = SQLiteStudentRepository(conn)
    attendance_repo = SQLiteAttendanceRepository(conn)
    payments_repo = SQLitePaymentRepository(conn)
    payment_methods_repo = SQLitePaymentMethodRepository(conn)

    return Container(
        conn=conn,
        coaches_repo=coaches_repo,
        students_repo=students_repo,
        attendance_repo=attendance_repo,
        payments_repo=payments_repo,
        payment_methods_repo=payment_methods_repo,
        coach_service=CoachService(coaches_repo),
        student_service=StudentService(students_repo),
        attendance_service=AttendanceService(attendance_repo),
        payment_service=PaymentService(payments_repo),
        payment_method_service=PaymentMethodService(payment_methods_repo),
        report_service=ReportService(students_repo, attendance_repo, payments_repo),
        state=AppState(),
        default_coach_id=int(default_coach_id),
    )
