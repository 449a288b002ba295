from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """Role of an administrative account."""

    ADMIN = "admin"


class AttendanceStatus(str, Enum):
    """Attendance mark stored per (student, date)."""

    PRESENT = "present"
    ABSENT = "absent"
