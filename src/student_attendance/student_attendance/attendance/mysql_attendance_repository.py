from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..core.enums import AttendanceStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import AttendanceRecord
from .repository import AttendanceRepository


def _to_record(r: dict) -> AttendanceRecord:
    return AttendanceRecord(
        student_id=r["student_id"],
        date=r["attendance_date"],
        status=AttendanceStatus(r["status"]),
        marked_at=r["marked_at"],
    )


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_for_date(self, day: date) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT student_id, attendance_date, status, marked_at
                FROM attendance_records
                WHERE attendance_date=%s
                ORDER BY seq ASC
                """,
                (day,),
            )
            return [_to_record(r) for r in fetchall(cur)]

    def list_all(self) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT student_id, attendance_date, status, marked_at
                FROM attendance_records
                ORDER BY seq ASC
                """
            )
            return [_to_record(r) for r in fetchall(cur)]

    def get(self, student_id: str, day: date) -> Optional[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT student_id, attendance_date, status, marked_at
                FROM attendance_records
                WHERE student_id=%s AND attendance_date=%s
                """,
                (student_id, day),
            )
            r = fetchone(cur)
            return _to_record(r) if r else None

    def upsert(self, record: AttendanceRecord) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO attendance_records(student_id, attendance_date, status, marked_at)
                VALUES(%s,%s,%s,%s)
                ON DUPLICATE KEY UPDATE status=VALUES(status), marked_at=VALUES(marked_at)
                """,
                (record.student_id, record.date, record.status.value, record.marked_at.replace(tzinfo=None)),
            )

    def delete_for_student(self, student_id: str) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM attendance_records WHERE student_id=%s", (student_id,))
            return int(cur.rowcount)
