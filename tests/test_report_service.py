from __future__ import annotations

from datetime import date

import pytest

from coach_desk.core.exceptions import NotFoundError


@pytest.fixture
def roster(container):
    students = container.student_service
    asha = students.create(coach_id=1, name="Asha", monthly_fee=1500)
    ravi = students.create(coach_id=1, name="Ravi", monthly_fee="1000")
    students.update(
        ravi, name="Ravi", email=None, phone=None, sport_or_subject=None, batch=None, monthly_fee=1000, status="inactive"
    )
    return asha, ravi


def test_dashboard_aggregates(container, roster, fixed_now):
    asha, ravi = roster
    container.attendance_service.mark(asha, fixed_now.date(), "present")
    container.attendance_service.mark(ravi, "2024-03-14", "present")
    container.payment_service.record(student_id=asha, amount=1500, month="2024-03")
    container.payment_service.record(student_id=ravi, amount=1000, month="2024-03", status="pending")

    stats = container.report_service.dashboard(1, today=fixed_now.date())

    assert stats.total_students == 2
    assert stats.active_students == 1
    assert stats.monthly_revenue == 1500.0
    assert stats.expected_monthly_revenue == 2500.0
    assert stats.attendance_today == 1
    assert stats.pending_payments == 1


def test_dashboard_for_empty_roster(container):
    stats = container.report_service.dashboard(1, today="2024-03-15")

    assert stats.total_students == 0
    assert stats.monthly_revenue == 0
    assert stats.pending_payments == 0


def test_student_overview_limits_attendance_to_month(container, roster):
    asha, _ = roster
    container.attendance_service.mark(asha, "2024-03-01", "present")
    container.attendance_service.mark(asha, "2024-03-31", "absent")
    container.attendance_service.mark(asha, "2024-04-01", "present")
    container.payment_service.record(student_id=asha, amount=1500, month="2024-02")
    container.payment_service.record(student_id=asha, amount=1500, month="2024-03")

    overview = container.report_service.student_overview(asha, month="2024-03")

    assert overview.student.name == "Asha"
    assert [a.date for a in overview.attendance] == [date(2024, 3, 31), date(2024, 3, 1)]
    assert (overview.present, overview.absent, overview.attendance_total) == (1, 1, 2)
    assert overview.total_paid == 3000.0
    assert len(overview.payments) == 2


def test_student_overview_requires_existing_student(container):
    with pytest.raises(NotFoundError):
        container.report_service.student_overview(42, month="2024-03")
