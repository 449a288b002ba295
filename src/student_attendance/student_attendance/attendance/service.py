from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Any, Optional, Sequence

from ..common.datetime_utils import now_utc, parse_iso_date
from ..core.enums import AttendanceStatus
from ..core.exceptions import NotFoundError
from ..students.repository import StudentRepository
from .aggregation import build_daily_roster
from .model import AttendanceRecord, BulkMarkResult, RosterRow, SkippedEntry
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


class AttendanceService:
    """Use cases: daily roster and marking attendance."""

    def __init__(self, attendance: AttendanceRepository, students: StudentRepository):
        self._attendance = attendance
        self._students = students

    def get_daily_roster(self, day: date, *, standard: Optional[int] = None) -> list[RosterRow]:
        day_records = self._attendance.list_for_date(day)
        return build_daily_roster(self._students.list_all(), day_records, standard=standard)

    def mark(
        self,
        *,
        student_id: str,
        day: date,
        status: AttendanceStatus,
        now: datetime | None = None,
    ) -> AttendanceRecord:
        if not self._students.get_by_id(student_id):
            raise NotFoundError("Student not found")

        record = AttendanceRecord(student_id=student_id, date=day, status=status, marked_at=now or now_utc())
        self._attendance.upsert(record)
        return record

    def bulk_mark(self, entries: Sequence[Any], *, now: datetime | None = None) -> BulkMarkResult:
        """Write every well-formed entry; report the rest as skipped.

        Writes are independent: a storage failure part-way leaves earlier marks in place.
        """

        now = now or now_utc()
        known_ids = {s.id for s in self._students.list_all()}
        result = BulkMarkResult()

        for index, entry in enumerate(entries):
            record, reason = self._parse_entry(entry, known_ids, now)
            if record is None:
                result.skipped.append(SkippedEntry(index=index, reason=reason))
                continue
            self._attendance.upsert(record)
            result.written.append(record)

        if result.skipped:
            logger.warning("Bulk mark skipped %d of %d entries", len(result.skipped), len(entries))
        return result

    @staticmethod
    def _parse_entry(entry: Any, known_ids: set[str], now: datetime) -> tuple[Optional[AttendanceRecord], str]:
        if not isinstance(entry, dict):
            return None, "Entry must be an object"

        missing = [f for f in ("studentId", "date", "status") if not entry.get(f)]
        if missing:
            return None, f"Missing fields: {', '.join(missing)}"

        try:
            status = AttendanceStatus(str(entry["status"]).lower())
        except ValueError:
            return None, 'Status must be either "present" or "absent"'

        try:
            day = parse_iso_date(str(entry["date"]))
        except ValueError:
            return None, "date must be in YYYY-MM-DD format"

        student_id = str(entry["studentId"])
        if student_id not in known_ids:
            return None, "Student not found"

        return AttendanceRecord(student_id=student_id, date=day, status=status, marked_at=now), ""
