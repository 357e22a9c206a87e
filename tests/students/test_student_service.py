from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

import pytest

from coach_desk.core.enums import StudentStatus
from coach_desk.core.exceptions import NotFoundError, ValidationError
from coach_desk.students.model import Student
from coach_desk.students.service import StudentService


@dataclass
class InMemoryStudents:
    rows: dict[int, Student] = field(default_factory=dict)
    updates: list[dict] = field(default_factory=list)

    def create(self, *, coach_id, name, email, phone, sport_or_subject, batch, monthly_fee) -> int:
        sid = len(self.rows) + 1
        self.rows[sid] = Student(
            id=sid,
            coach_id=coach_id,
            name=name,
            email=email,
            phone=phone,
            sport_or_subject=sport_or_subject,
            batch=batch,
            monthly_fee=monthly_fee,
        )
        return sid

    def get_by_id(self, student_id: int) -> Optional[Student]:
        return self.rows.get(student_id)

    def list_by_coach(self, coach_id: int, *, status=None):
        items = [s for s in self.rows.values() if s.coach_id == coach_id and (status is None or s.status == status)]
        return sorted(items, key=lambda s: s.name)

    def update(self, **kwargs) -> int:
        self.updates.append(kwargs)
        return 1 if kwargs["student_id"] in self.rows else 0

    def delete(self, student_id: int) -> int:
        return 1 if self.rows.pop(student_id, None) else 0


def test_create_trims_and_defaults_fee():
    repo = InMemoryStudents()
    svc = StudentService(repo)

    sid = svc.create(coach_id="1", name="  Asha ", email="", phone=" ", monthly_fee="not a number")

    student = repo.rows[sid]
    assert student.name == "Asha"
    assert student.email is None
    assert student.phone is None
    assert student.monthly_fee == 0.0


def test_create_requires_name():
    with pytest.raises(ValidationError):
        StudentService(InMemoryStudents()).create(coach_id=1, name="   ")


def test_create_rejects_malformed_email():
    with pytest.raises(ValidationError):
        StudentService(InMemoryStudents()).create(coach_id=1, name="Asha", email="asha.example.com")


def test_update_rejects_unknown_status():
    repo = InMemoryStudents()
    svc = StudentService(repo)
    sid = svc.create(coach_id=1, name="Asha")

    with pytest.raises(ValidationError):
        svc.update(
            sid, name="Asha", email=None, phone=None, sport_or_subject=None, batch=None, monthly_fee=0, status="paused"
        )
    assert repo.updates == []


def test_update_forwards_normalized_status():
    repo = InMemoryStudents()
    svc = StudentService(repo)
    sid = svc.create(coach_id=1, name="Asha")

    svc.update(sid, name="Asha", email=None, phone=None, sport_or_subject=None, batch=None, monthly_fee="10", status="INACTIVE")

    assert repo.updates[0]["status"] is StudentStatus.INACTIVE
    assert repo.updates[0]["monthly_fee"] == 10.0


def test_list_filters_by_status():
    repo = InMemoryStudents()
    svc = StudentService(repo)
    svc.create(coach_id=1, name="B")
    svc.create(coach_id=1, name="A")

    assert [s.name for s in svc.list_active(1)] == ["A", "B"]
    assert svc.list_by_coach(1, status="inactive") == []


def test_require_missing_student_raises_not_found():
    with pytest.raises(NotFoundError):
        StudentService(InMemoryStudents()).require(7)
    assert StudentService(InMemoryStudents()).get(7) is None
