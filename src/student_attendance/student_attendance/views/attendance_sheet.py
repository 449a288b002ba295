"""Attendance sheet state for one date: the marks on screen and their counters."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from types import MappingProxyType
from typing import Iterable, Mapping

from ..attendance.model import RosterRow
from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class AttendanceSheet:
    day: date
    student_ids: tuple[str, ...] = ()
    marks: Mapping[str, AttendanceStatus] = field(default_factory=lambda: MappingProxyType({}))


@dataclass(frozen=True)
class SheetStats:
    marked: int
    present: int
    absent: int
    total: int

    def to_dict(self) -> dict:
        return {"marked": self.marked, "present": self.present, "absent": self.absent, "total": self.total}


def load_roster(day: date, rows: Iterable[RosterRow]) -> AttendanceSheet:
    rows = list(rows)
    marks = {r.student.id: r.status for r in rows if r.status is not None}
    return AttendanceSheet(
        day=day,
        student_ids=tuple(r.student.id for r in rows),
        marks=MappingProxyType(marks),
    )


def mark_all(sheet: AttendanceSheet, status: AttendanceStatus) -> AttendanceSheet:
    return AttendanceSheet(
        day=sheet.day,
        student_ids=sheet.student_ids,
        marks=MappingProxyType({sid: status for sid in sheet.student_ids}),
    )


def stats(sheet: AttendanceSheet) -> SheetStats:
    values = list(sheet.marks.values())
    return SheetStats(
        marked=len(values),
        present=sum(1 for v in values if v == AttendanceStatus.PRESENT),
        absent=sum(1 for v in values if v == AttendanceStatus.ABSENT),
        total=len(sheet.student_ids),
    )


def to_bulk_records(sheet: AttendanceSheet) -> list[dict]:
    """Payload for POST /attendance/bulk."""

    day = sheet.day.isoformat()
    return [{"studentId": sid, "date": day, "status": status.value} for sid, status in sheet.marks.items()]
