from datetime import date

import pytest

from src.student_attendance.student_attendance.attendance.service import AttendanceService
from src.student_attendance.student_attendance.core.enums import AttendanceStatus
from src.student_attendance.student_attendance.core.exceptions import NotFoundError


@pytest.fixture
def service(students_repo, attendance_repo, student_factory):
    students_repo.save(student_factory("a", standard=3))
    students_repo.save(student_factory("b", standard=3))
    students_repo.save(student_factory("c", standard=8))
    return AttendanceService(attendance_repo, students_repo)


def test_bulk_mark_then_roster(service, fixed_now):
    result = service.bulk_mark(
        [
            {"studentId": "a", "date": "2024-01-10", "status": "present"},
            {"studentId": "b", "date": "2024-01-10", "status": "absent"},
        ],
        now=fixed_now,
    )

    assert len(result.written) == 2
    assert result.skipped == []

    rows = service.get_daily_roster(date(2024, 1, 10), standard=3)
    assert [(r.student.id, r.status) for r in rows] == [
        ("a", AttendanceStatus.PRESENT),
        ("b", AttendanceStatus.ABSENT),
    ]
    assert rows[0].to_dict()["markedAt"] == "2024-01-02T09:30:00.000Z"


def test_marking_twice_overwrites(service, attendance_repo, fixed_now):
    day = date(2024, 1, 10)
    service.mark(student_id="a", day=day, status=AttendanceStatus.PRESENT, now=fixed_now)
    service.mark(student_id="a", day=day, status=AttendanceStatus.ABSENT, now=fixed_now)

    assert len(attendance_repo.list_all()) == 1
    assert attendance_repo.get("a", day).status == AttendanceStatus.ABSENT


def test_mark_unknown_student_is_not_found(service):
    with pytest.raises(NotFoundError):
        service.mark(student_id="nobody", day=date(2024, 1, 10), status=AttendanceStatus.PRESENT)


def test_bulk_mark_reports_each_skipped_entry(service, attendance_repo, fixed_now):
    result = service.bulk_mark(
        [
            {"studentId": "a", "date": "2024-01-10", "status": "PRESENT"},
            "not-an-object",
            {"studentId": "b", "date": "2024-01-10"},
            {"studentId": "b", "date": "2024-01-10", "status": "late"},
            {"studentId": "b", "date": "10/01/2024", "status": "present"},
            {"studentId": "zz", "date": "2024-01-10", "status": "present"},
        ],
        now=fixed_now,
    )

    assert [r.student_id for r in result.written] == ["a"]
    assert [(s.index, s.reason) for s in result.skipped] == [
        (1, "Entry must be an object"),
        (2, "Missing fields: status"),
        (3, 'Status must be either "present" or "absent"'),
        (4, "date must be in YYYY-MM-DD format"),
        (5, "Student not found"),
    ]
    assert len(attendance_repo.list_all()) == 1
