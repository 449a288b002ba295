from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from .model import AttendanceRecord


class AttendanceRepository(Protocol):
    """Attendance marks keyed by (student_id, date)."""

    def list_for_date(self, day: date) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def list_all(self) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def get(self, student_id: str, day: date) -> Optional[AttendanceRecord]:
        raise NotImplementedError

    def upsert(self, record: AttendanceRecord) -> None:
        """Write the mark, replacing any existing mark for the same (student_id, date)."""
        raise NotImplementedError

    def delete_for_student(self, student_id: str) -> int:
        """Remove every mark of the student. Returns the number removed."""
        raise NotImplementedError
