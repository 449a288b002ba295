from __future__ import annotations

from datetime import date
from typing import Optional

from ..attendance.aggregation import build_class_rollup, build_range_report
from ..attendance.model import AttendanceReportRow, ClassRollupRow
from ..attendance.repository import AttendanceRepository
from ..core.exceptions import ValidationError
from ..students.repository import StudentRepository


class AttendanceReportService:
    """Use cases: date-range attendance reports per student and per class."""

    def __init__(self, attendance: AttendanceRepository, students: StudentRepository):
        self._attendance = attendance
        self._students = students

    def build_student_report(
        self,
        *,
        start: date,
        end: date,
        standard: Optional[int] = None,
        school: Optional[str] = None,
    ) -> list[AttendanceReportRow]:
        if start > end:
            raise ValidationError("Start date must be before end date")

        return build_range_report(
            self._students.list_all(),
            self._attendance.list_all(),
            start=start,
            end=end,
            standard=standard,
            school=school,
        )

    def build_class_report(
        self,
        *,
        start: date,
        end: date,
        standard: Optional[int] = None,
        school: Optional[str] = None,
    ) -> list[ClassRollupRow]:
        rows = self.build_student_report(start=start, end=end, standard=standard, school=school)
        return build_class_rollup(rows)
