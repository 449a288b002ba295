from datetime import date

from src.student_attendance.student_attendance.attendance.model import RosterRow
from src.student_attendance.student_attendance.core.enums import AttendanceStatus
from src.student_attendance.student_attendance.views.attendance_sheet import (
    load_roster,
    mark_all,
    stats,
    to_bulk_records,
)

DAY = date(2024, 1, 10)
P = AttendanceStatus.PRESENT
A = AttendanceStatus.ABSENT


def test_load_roster_counts_existing_marks(student_factory):
    rows = [
        RosterRow(student=student_factory("a"), status=P),
        RosterRow(student=student_factory("b"), status=A),
        RosterRow(student=student_factory("c")),
    ]

    s = stats(load_roster(DAY, rows))

    assert s.to_dict() == {"marked": 2, "present": 1, "absent": 1, "total": 3}


def test_mark_all_overrides_every_mark(student_factory):
    rows = [RosterRow(student=student_factory("a"), status=A), RosterRow(student=student_factory("b"))]
    sheet = load_roster(DAY, rows)

    marked = mark_all(sheet, P)

    assert stats(sheet).marked == 1
    assert stats(marked).to_dict() == {"marked": 2, "present": 2, "absent": 0, "total": 2}
    assert to_bulk_records(marked) == [
        {"studentId": "a", "date": "2024-01-10", "status": "present"},
        {"studentId": "b", "date": "2024-01-10", "status": "present"},
    ]
