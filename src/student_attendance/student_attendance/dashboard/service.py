from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..attendance.aggregation import count_by_standard, count_statuses
from ..attendance.repository import AttendanceRepository
from ..common.datetime_utils import now_utc
from ..students.repository import StudentRepository


@dataclass(frozen=True)
class DashboardStats:
    total_students: int
    present_today: int
    absent_today: int
    students_by_class: dict[int, int]

    def to_dict(self) -> dict:
        return {
            "totalStudents": self.total_students,
            "presentToday": self.present_today,
            "absentToday": self.absent_today,
            "studentsByClass": {str(k): v for k, v in self.students_by_class.items()},
        }


class DashboardService:
    def __init__(self, students: StudentRepository, attendance: AttendanceRepository):
        self._students = students
        self._attendance = attendance

    def get_stats(self, *, today: Optional[date] = None) -> DashboardStats:
        """Counters for `today`, which defaults to the server's UTC date."""

        today = today or now_utc().date()
        students = self._students.list_all()
        present, absent = count_statuses(self._attendance.list_for_date(today))
        return DashboardStats(
            total_students=len(students),
            present_today=present,
            absent_today=absent,
            students_by_class=count_by_standard(students),
        )
