from __future__ import annotations

import logging
import uuid
from dataclasses import replace
from datetime import datetime
from typing import Any, Callable, Mapping, Optional, Sequence

from ..attendance.repository import AttendanceRepository
from ..classes.repository import ClassRepository
from ..common.datetime_utils import now_utc
from ..common.validators import (
    optional_text,
    require_indian_mobile,
    require_iso_date,
    require_non_empty,
    require_positive_int,
)
from ..core.exceptions import NotFoundError, ValidationError
from .model import Student
from .repository import StudentRepository

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("firstName", "fatherName", "surname", "dateOfBirth", "mobileNumber", "standard")


def _clean_fields(data: Mapping[str, Any]) -> dict[str, Any]:
    """Validate the API fields present in `data` and map them to Student attributes."""

    out: dict[str, Any] = {}
    if "firstName" in data:
        out["first_name"] = require_non_empty(data["firstName"], "First name")
    if "fatherName" in data:
        out["father_name"] = require_non_empty(data["fatherName"], "Father's name")
    if "surname" in data:
        out["surname"] = require_non_empty(data["surname"], "Surname")
    if "dateOfBirth" in data:
        out["date_of_birth"] = require_iso_date(data["dateOfBirth"], "Date of birth")
    if "mobileNumber" in data:
        out["mobile_number"] = require_indian_mobile(data["mobileNumber"])
    if "standard" in data:
        out["standard"] = require_positive_int(data["standard"], "Standard")
    if "address" in data:
        out["address"] = optional_text(data["address"], "Address") or ""
    if "school" in data:
        out["school"] = optional_text(data["school"], "School")
    if "studentPhoto" in data:
        out["student_photo"] = optional_text(data["studentPhoto"], "Student photo")
    return out


class StudentService:
    """Use cases: manage the student register."""

    def __init__(
        self,
        students: StudentRepository,
        attendance: AttendanceRepository,
        classes: Optional[ClassRepository] = None,
        *,
        id_factory: Callable[[], str] | None = None,
    ):
        self._students = students
        self._attendance = attendance
        self._classes = classes
        self._new_id = id_factory or (lambda: str(uuid.uuid4()))

    def list_students(self) -> Sequence[Student]:
        return list(self._students.list_all())

    def get_student(self, student_id: str) -> Student:
        student = self._students.get_by_id(student_id)
        if not student:
            raise NotFoundError("Student not found")
        return student

    def list_schools(self) -> list[str]:
        return sorted({s.school for s in self._students.list_all() if s.school})

    def create_student(self, data: Mapping[str, Any], *, now: datetime | None = None) -> Student:
        missing = [f for f in REQUIRED_FIELDS if data.get(f) in (None, "")]
        if missing:
            raise ValidationError(f"Missing required fields: {', '.join(missing)}")

        fields = _clean_fields(data)
        now = now or now_utc()
        student = Student(
            id=self._new_id(),
            first_name=fields["first_name"],
            father_name=fields["father_name"],
            surname=fields["surname"],
            date_of_birth=fields["date_of_birth"],
            mobile_number=fields["mobile_number"],
            standard=fields["standard"],
            address=fields.get("address", ""),
            school=fields.get("school"),
            student_photo=fields.get("student_photo"),
            created_at=now,
            updated_at=now,
        )
        self._warn_unknown_standard(student.standard)
        self._students.save(student)
        logger.info("Created student %s (standard %s)", student.id, student.standard)
        return student

    def update_student(self, student_id: str, changes: Mapping[str, Any], *, now: datetime | None = None) -> Student:
        existing = self.get_student(student_id)
        fields = _clean_fields(changes)
        updated = replace(existing, **fields, updated_at=now or now_utc())
        if "standard" in fields:
            self._warn_unknown_standard(updated.standard)
        self._students.save(updated)
        logger.info("Updated student %s (%s)", student_id, ", ".join(sorted(fields)) or "no fields")
        return updated

    def delete_student(self, student_id: str) -> int:
        """Delete the student and all their attendance. Returns removed attendance count."""

        self.get_student(student_id)
        removed = self._attendance.delete_for_student(student_id)
        self._students.delete_by_id(student_id)
        logger.info("Deleted student %s and %d attendance records", student_id, removed)
        return removed

    def _warn_unknown_standard(self, standard: int) -> None:
        # Not enforced: a student may reference a class that is not configured yet.
        if not self._classes:
            return
        stored = self._classes.list_all()
        if stored and standard not in {c.standard for c in stored}:
            logger.warning("Standard %s does not match any configured class", standard)
