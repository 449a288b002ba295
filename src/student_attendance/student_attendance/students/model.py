from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..common.datetime_utils import to_iso_timestamp


def compose_full_name(first_name: str, father_name: str, surname: str) -> str:
    return " ".join(part.strip() for part in (first_name, father_name, surname) if part and part.strip())


@dataclass(frozen=True)
class Student:
    """Domain entity: a student on the register."""

    id: str
    first_name: str
    father_name: str
    surname: str
    date_of_birth: date
    mobile_number: str
    standard: int
    address: str
    created_at: datetime
    updated_at: datetime
    school: Optional[str] = None
    student_photo: Optional[str] = None

    @property
    def full_name(self) -> str:
        return compose_full_name(self.first_name, self.father_name, self.surname)

    def to_dict(self) -> dict:
        """API shape (camelCase keys, ISO dates)."""

        return {
            "id": self.id,
            "firstName": self.first_name,
            "fatherName": self.father_name,
            "surname": self.surname,
            "dateOfBirth": self.date_of_birth.isoformat(),
            "mobileNumber": self.mobile_number,
            "standard": self.standard,
            "address": self.address,
            "school": self.school,
            "studentPhoto": self.student_photo,
            "createdAt": to_iso_timestamp(self.created_at),
            "updatedAt": to_iso_timestamp(self.updated_at),
        }
