"""Pure joins of students with attendance marks.

Nothing here touches storage: callers fetch the collections and pass them in.
Ordering always follows the order of the `students` argument.
"""

from __future__ import annotations

from collections import Counter, defaultdict
from datetime import date
from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable, Optional, Sequence

from ..core.constants import ALL
from ..core.enums import AttendanceStatus
from ..students.model import Student
from .model import AttendanceRecord, AttendanceReportRow, ClassRollupRow, RosterRow

_CENTS = Decimal("0.01")


def round2(value: Decimal | float) -> float:
    return float(Decimal(str(value)).quantize(_CENTS, rounding=ROUND_HALF_UP))


def attendance_percentage(present_days: int, total_days: int) -> float:
    """present / total * 100 rounded to 2 decimals; 0 when there are no marked days."""

    if total_days <= 0:
        return 0.0
    return round2(Decimal(present_days) * 100 / Decimal(total_days))


def filter_students(
    students: Iterable[Student],
    *,
    standard: Optional[int] = None,
    school: Optional[str] = None,
) -> list[Student]:
    selected = list(students)
    if standard is not None:
        selected = [s for s in selected if s.standard == standard]
    if school and school != ALL:
        selected = [s for s in selected if s.school == school]
    return selected


def build_daily_roster(
    students: Iterable[Student],
    day_records: Iterable[AttendanceRecord],
    *,
    standard: Optional[int] = None,
) -> list[RosterRow]:
    """One row per selected student with that day's status (None when unmarked)."""

    by_student = {r.student_id: r for r in day_records}
    rows = []
    for student in filter_students(students, standard=standard):
        mark = by_student.get(student.id)
        rows.append(
            RosterRow(
                student=student,
                status=mark.status if mark else None,
                marked_at=mark.marked_at if mark else None,
            )
        )
    return rows


def records_in_range(records: Iterable[AttendanceRecord], start: date, end: date) -> list[AttendanceRecord]:
    """Inclusive on both ends; a reversed range selects nothing."""

    return [r for r in records if start <= r.date <= end]


def build_range_report(
    students: Iterable[Student],
    records: Iterable[AttendanceRecord],
    *,
    start: date,
    end: date,
    standard: Optional[int] = None,
    school: Optional[str] = None,
) -> list[AttendanceReportRow]:
    counts: dict[str, Counter] = defaultdict(Counter)
    for r in records_in_range(records, start, end):
        counts[r.student_id][r.status] += 1

    rows = []
    for s in filter_students(students, standard=standard, school=school):
        c = counts.get(s.id, Counter())
        present = c[AttendanceStatus.PRESENT]
        absent = c[AttendanceStatus.ABSENT]
        total = present + absent
        rows.append(
            AttendanceReportRow(
                student_id=s.id,
                first_name=s.first_name,
                father_name=s.father_name,
                surname=s.surname,
                standard=s.standard,
                mobile_number=s.mobile_number,
                school=s.school,
                present_days=present,
                absent_days=absent,
                total_days=total,
                attendance_percentage=attendance_percentage(present, total),
            )
        )
    return rows


def build_class_rollup(rows: Sequence[AttendanceReportRow]) -> list[ClassRollupRow]:
    """Group report rows by standard; plain mean of percentages, not weighted by days."""

    groups: dict[int, list[float]] = defaultdict(list)
    for row in rows:
        groups[row.standard].append(row.attendance_percentage)

    return [
        ClassRollupRow(
            standard=standard,
            total_students=len(values),
            avg_attendance=round2(sum(Decimal(str(v)) for v in values) / len(values)),
        )
        for standard, values in sorted(groups.items())
    ]


def count_statuses(records: Iterable[AttendanceRecord]) -> tuple[int, int]:
    c = Counter(r.status for r in records)
    return c[AttendanceStatus.PRESENT], c[AttendanceStatus.ABSENT]


def count_by_standard(students: Iterable[Student]) -> dict[int, int]:
    return dict(sorted(Counter(s.standard for s in students).items()))
