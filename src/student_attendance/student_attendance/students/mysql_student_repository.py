from __future__ import annotations

from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Student
from .repository import StudentRepository

_COLUMNS = """
    student_id, first_name, father_name, surname, date_of_birth, mobile_number,
    standard, address, school, student_photo, created_at, updated_at
"""


def _to_student(r: dict) -> Student:
    return Student(
        id=r["student_id"],
        first_name=r["first_name"],
        father_name=r.get("father_name") or "",
        surname=r["surname"],
        date_of_birth=r["date_of_birth"],
        mobile_number=r["mobile_number"],
        standard=int(r["standard"]),
        address=r.get("address") or "",
        school=r.get("school"),
        student_photo=r.get("student_photo"),
        created_at=r["created_at"],
        updated_at=r["updated_at"],
    )


class MySQLStudentRepository(StudentRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[Student]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM students ORDER BY seq ASC")
            return [_to_student(r) for r in fetchall(cur)]

    def get_by_id(self, student_id: str) -> Optional[Student]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM students WHERE student_id=%s", (student_id,))
            r = fetchone(cur)
            return _to_student(r) if r else None

    def save(self, student: Student) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO students(
                    student_id, first_name, father_name, surname, date_of_birth, mobile_number,
                    standard, address, school, student_photo, created_at, updated_at
                )
                VALUES(%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s)
                ON DUPLICATE KEY UPDATE
                    first_name=VALUES(first_name),
                    father_name=VALUES(father_name),
                    surname=VALUES(surname),
                    date_of_birth=VALUES(date_of_birth),
                    mobile_number=VALUES(mobile_number),
                    standard=VALUES(standard),
                    address=VALUES(address),
                    school=VALUES(school),
                    student_photo=VALUES(student_photo),
                    updated_at=VALUES(updated_at)
                """,
                (
                    student.id,
                    student.first_name,
                    student.father_name,
                    student.surname,
                    student.date_of_birth,
                    student.mobile_number,
                    student.standard,
                    student.address,
                    student.school,
                    student.student_photo,
                    student.created_at.replace(tzinfo=None),
                    student.updated_at.replace(tzinfo=None),
                ),
            )

    def delete_by_id(self, student_id: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM students WHERE student_id=%s", (student_id,))
            return cur.rowcount > 0
