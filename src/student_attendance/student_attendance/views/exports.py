"""Shape domain rows into the flat, human-labelled records used for CSV downloads."""

from __future__ import annotations

import re
from typing import Iterable, Optional

from ..attendance.model import AttendanceReportRow, ClassRollupRow
from ..core.constants import ALL
from ..students.model import Student
from .formatting import format_date, full_name


def student_export_rows(students: Iterable[Student]) -> list[dict]:
    return [
        {
            "Full Name": s.full_name,
            "Date of Birth": format_date(s.date_of_birth),
            "Mobile Number": s.mobile_number,
            "Class": s.standard,
            "School": s.school or "",
            "Address": s.address,
        }
        for s in students
    ]


def student_list_filename(school: Optional[str]) -> str:
    if school and school != ALL:
        slug = re.sub(r"\s+", "-", school.strip())
        return f"students-{slug}.csv"
    return "all-students.csv"


def student_report_export_rows(rows: Iterable[AttendanceReportRow]) -> list[dict]:
    return [
        {
            "Full Name": full_name(r.first_name, r.father_name, r.surname),
            "Class": r.standard,
            "Total Days": r.total_days,
            "Present Days": r.present_days,
            "Absent Days": r.absent_days,
            "Attendance %": f"{r.attendance_percentage:.2f}",
        }
        for r in rows
    ]


def class_report_export_rows(rows: Iterable[ClassRollupRow]) -> list[dict]:
    return [
        {
            "Class": r.standard,
            "Total Students": r.total_students,
            "Average Attendance %": f"{r.avg_attendance:.2f}",
        }
        for r in rows
    ]
