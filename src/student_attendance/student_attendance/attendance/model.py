from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Optional

from ..common.datetime_utils import to_iso_timestamp
from ..core.enums import AttendanceStatus
from ..students.model import Student


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one mark per (student_id, date); writing again overwrites."""

    student_id: str
    date: date
    status: AttendanceStatus
    marked_at: datetime

    def to_dict(self) -> dict:
        return {
            "studentId": self.student_id,
            "date": self.date.isoformat(),
            "status": self.status.value,
            "markedAt": to_iso_timestamp(self.marked_at),
        }


@dataclass(frozen=True)
class RosterRow:
    """A student joined with their mark for one date (status None when unmarked)."""

    student: Student
    status: Optional[AttendanceStatus] = None
    marked_at: Optional[datetime] = None

    def to_dict(self) -> dict:
        data = self.student.to_dict()
        data["status"] = self.status.value if self.status else None
        data["markedAt"] = to_iso_timestamp(self.marked_at) if self.marked_at else None
        return data


@dataclass(frozen=True)
class AttendanceReportRow:
    """Read-model for range reports; computed, never stored."""

    student_id: str
    first_name: str
    father_name: str
    surname: str
    standard: int
    mobile_number: str
    school: Optional[str]
    present_days: int
    absent_days: int
    total_days: int
    attendance_percentage: float

    def to_dict(self) -> dict:
        return {
            "studentId": self.student_id,
            "firstName": self.first_name,
            "fatherName": self.father_name,
            "surname": self.surname,
            "standard": self.standard,
            "mobileNumber": self.mobile_number,
            "school": self.school,
            "presentDays": self.present_days,
            "absentDays": self.absent_days,
            "totalDays": self.total_days,
            "attendancePercentage": self.attendance_percentage,
        }


@dataclass(frozen=True)
class ClassRollupRow:
    standard: int
    total_students: int
    avg_attendance: float

    def to_dict(self) -> dict:
        return {
            "standard": self.standard,
            "totalStudents": self.total_students,
            "avgAttendance": self.avg_attendance,
        }


@dataclass(frozen=True)
class SkippedEntry:
    index: int
    reason: str

    def to_dict(self) -> dict:
        return {"index": self.index, "reason": self.reason}


@dataclass(frozen=True)
class BulkMarkResult:
    written: list[AttendanceRecord] = field(default_factory=list)
    skipped: list[SkippedEntry] = field(default_factory=list)
