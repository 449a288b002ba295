from __future__ import annotations

from datetime import date, datetime, timezone
from typing import Optional

import pytest

from src.student_attendance.student_attendance.attendance.model import AttendanceRecord
from src.student_attendance.student_attendance.classes.model import SchoolClass
from src.student_attendance.student_attendance.container import assemble
from src.student_attendance.student_attendance.core.enums import AttendanceStatus, Role
from src.student_attendance.student_attendance.students.model import Student
from src.student_attendance.student_attendance.users.model import AdminUser

FIXED_NOW = datetime(2024, 1, 2, 9, 30, 0, tzinfo=timezone.utc)


class InMemoryStudents:
    def __init__(self, students=()):
        self._by_id: dict[str, Student] = {s.id: s for s in students}

    def list_all(self):
        return list(self._by_id.values())

    def get_by_id(self, student_id: str) -> Optional[Student]:
        return self._by_id.get(student_id)

    def save(self, student: Student) -> None:
        self._by_id[student.id] = student

    def delete_by_id(self, student_id: str) -> bool:
        return self._by_id.pop(student_id, None) is not None


class InMemoryAttendance:
    def __init__(self, records=()):
        self._by_key: dict[tuple[str, date], AttendanceRecord] = {}
        for r in records:
            self.upsert(r)

    def list_for_date(self, day: date):
        return [r for r in self._by_key.values() if r.date == day]

    def list_all(self):
        return list(self._by_key.values())

    def get(self, student_id: str, day: date) -> Optional[AttendanceRecord]:
        return self._by_key.get((student_id, day))

    def upsert(self, record: AttendanceRecord) -> None:
        self._by_key[(record.student_id, record.date)] = record

    def delete_for_student(self, student_id: str) -> int:
        keys = [k for k in self._by_key if k[0] == student_id]
        for k in keys:
            del self._by_key[k]
        return len(keys)


class InMemoryClasses:
    def __init__(self, classes=()):
        self._classes: list[SchoolClass] = list(classes)

    def list_all(self):
        return list(self._classes)

    def replace_all(self, classes) -> None:
        self._classes = list(classes)


class InMemoryAdmins:
    def __init__(self):
        self._by_email: dict[str, AdminUser] = {}
        self._id = 0

    def get_by_email(self, email: str) -> Optional[AdminUser]:
        return self._by_email.get(email)

    def create_user(self, *, email: str, full_name: str, password_hash: str, role: Role) -> int:
        self._id += 1
        self._by_email[email] = AdminUser(
            user_id=self._id, email=email, full_name=full_name, password_hash=password_hash, role=role
        )
        return self._id


class FakePhotoStorage:
    def __init__(self):
        self.objects: dict[str, tuple[bytes, str]] = {}

    def put(self, key: str, data: bytes, *, content_type: str) -> None:
        self.objects[key] = (data, content_type)

    def signed_url(self, key: str, *, expires_in: int) -> Optional[str]:
        return f"https://photos.example.test/{key}?expires={expires_in}"


def make_student(
    student_id: str,
    *,
    first_name: str = "Asha",
    father_name: str = "Ravi",
    surname: str = "Patil",
    standard: int = 5,
    school: Optional[str] = None,
    mobile_number: str = "9876543210",
) -> Student:
    return Student(
        id=student_id,
        first_name=first_name,
        father_name=father_name,
        surname=surname,
        date_of_birth=date(2014, 6, 1),
        mobile_number=mobile_number,
        standard=standard,
        address="",
        created_at=FIXED_NOW,
        updated_at=FIXED_NOW,
        school=school,
    )


def mark(student_id: str, day: date, status: AttendanceStatus) -> AttendanceRecord:
    return AttendanceRecord(student_id=student_id, date=day, status=status, marked_at=FIXED_NOW)


@pytest.fixture
def fixed_now() -> datetime:
    return FIXED_NOW


@pytest.fixture
def students_repo():
    return InMemoryStudents()


@pytest.fixture
def attendance_repo():
    return InMemoryAttendance()


@pytest.fixture
def classes_repo():
    return InMemoryClasses()


@pytest.fixture
def admins_repo():
    return InMemoryAdmins()


@pytest.fixture
def photo_storage():
    return FakePhotoStorage()


@pytest.fixture
def container(students_repo, attendance_repo, classes_repo, admins_repo, photo_storage):
    return assemble(
        students_repo=students_repo,
        attendance_repo=attendance_repo,
        classes_repo=classes_repo,
        admins_repo=admins_repo,
        photo_storage=photo_storage,
    )


@pytest.fixture
def app(monkeypatch, container):
    monkeypatch.setenv("APP_ENV", "testing")
    from src.student_attendance.student_attendance.main import create_app

    return create_app(container=container)


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def student_factory():
    return make_student


@pytest.fixture
def mark_factory():
    return mark
