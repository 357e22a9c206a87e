from __future__ import annotations

from datetime import date

import pytest

from coach_desk.attendance.model import AttendanceRecord
from coach_desk.core.enums import AttendanceStatus, PaymentStatus, StudentStatus
from coach_desk.core.exceptions import ValidationError
from coach_desk.payments.model import Payment
from coach_desk.state.store import AppState
from coach_desk.students.model import Student


def _student(sid: int, name: str, **kw) -> Student:
    return Student(id=sid, coach_id=1, name=name, **kw)


def _payment(pid: int, student_id: int, month: str = "2024-03", status=PaymentStatus.COMPLETED) -> Payment:
    return Payment(
        id=pid,
        student_id=student_id,
        amount=100.0,
        payment_date=None,
        payment_method="cash",
        status=status,
        month=month,
    )


def _mark(rid: int, student_id: int, day: date, status=AttendanceStatus.PRESENT) -> AttendanceRecord:
    return AttendanceRecord(id=rid, student_id=student_id, date=day, status=status)


@pytest.fixture
def state() -> AppState:
    s = AppState(selected_month="2024-03")
    s.set_students([_student(1, "Asha", email="asha@example.com"), _student(2, "Ravi", phone="98765")])
    return s


def test_update_merges_patch_onto_matching_student(state):
    state.update_student(1, monthly_fee=1500.0, status=StudentStatus.INACTIVE)

    asha = state.find_student(1)
    assert asha.monthly_fee == 1500.0
    assert asha.status == StudentStatus.INACTIVE
    assert asha.name == "Asha"
    assert [s.id for s in state.active_students()] == [2]


def test_update_of_unknown_id_is_noop(state):
    before = list(state.students)
    state.update_student(99, name="Ghost")

    assert state.students == before


def test_update_rejects_unknown_field(state):
    with pytest.raises(ValidationError):
        state.update_student(1, nickname="A")


def test_update_refreshes_selected_student(state):
    state.set_selected_student(state.find_student(1))
    state.update_student(1, batch="Morning")

    assert state.selected_student.batch == "Morning"


def test_remove_student_drops_cached_history(state):
    state.set_selected_student(state.find_student(1))
    state.set_attendance([_mark(1, 1, date(2024, 3, 1)), _mark(2, 2, date(2024, 3, 1))])
    state.set_payments([_payment(1, 1), _payment(2, 2)])

    state.remove_student(1)

    assert [s.id for s in state.students] == [2]
    assert [a.student_id for a in state.attendance] == [2]
    assert [p.student_id for p in state.payments] == [2]
    assert state.selected_student is None


def test_attendance_record_for_same_day_replaces_cached_one(state):
    state.add_attendance_record(_mark(1, 1, date(2024, 3, 1)))
    state.add_attendance_record(_mark(1, 1, date(2024, 3, 1), AttendanceStatus.ABSENT))
    state.add_attendance_record(_mark(2, 1, date(2024, 3, 2)))

    assert [(a.date.day, a.status) for a in state.attendance] == [
        (1, AttendanceStatus.ABSENT),
        (2, AttendanceStatus.PRESENT),
    ]


def test_payment_status_patch_and_month_view(state):
    state.add_payment(_payment(1, 1, status=PaymentStatus.PENDING))
    state.add_payment(_payment(2, 2, month="2024-02"))

    state.update_payment(1, status=PaymentStatus.COMPLETED)

    assert [p.id for p in state.payments_for_month()] == [1]
    assert state.payments_for_month()[0].status == PaymentStatus.COMPLETED
    assert [p.id for p in state.payments_for_month("2024-02")] == [2]


@pytest.mark.parametrize(
    "query, status, expected",
    [
        ("", None, [1, 2]),
        ("ASHA", None, [1]),
        ("example.com", "all", [1]),
        ("987", None, [2]),
        ("", "inactive", []),
        ("", "active", [1, 2]),
    ],
)
def test_search_students(state, query, status, expected):
    assert [s.id for s in state.search_students(query, status)] == expected


def test_ui_flags_and_messages():
    state = AppState()
    state.set_loading(True)
    state.set_error("boom")
    state.set_success_message("saved")

    assert state.loading is True
    state.clear_error()
    state.clear_success()
    assert state.error is None
    assert state.success_message is None


def test_selected_month_is_validated(state):
    state.set_selected_month("2024-04")
    assert state.selected_month == "2024-04"

    with pytest.raises(ValidationError):
        state.set_selected_month("2024-13")


def test_update_rejects_unknown_student_status(state):
    with pytest.raises(ValidationError):
        state.update_student(1, status="paused")

    assert state.find_student(1).status == StudentStatus.ACTIVE


def test_update_normalizes_patched_values(state):
    state.update_student(1, status="Inactive", monthly_fee="1500")

    asha = state.find_student(1)
    assert asha.status == StudentStatus.INACTIVE
    assert asha.monthly_fee == 1500.0


def test_payment_patch_values_are_validated(state):
    state.add_payment(_payment(1, 1))

    with pytest.raises(ValidationError):
        state.update_payment(1, status="refunded")
    with pytest.raises(ValidationError):
        state.update_payment(1, amount="abc")

    state.update_payment(1, status="pending", amount="250")
    assert state.payments[0].status == PaymentStatus.PENDING
    assert state.payments[0].amount == 250.0
