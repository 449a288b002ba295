from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Student


class StudentRepository(Protocol):
    """Student storage.

    Services depend on this interface, not on a concrete database.
    """

    def list_all(self) -> Sequence[Student]:
        """All students in insertion order."""
        raise NotImplementedError

    def get_by_id(self, student_id: str) -> Optional[Student]:
        raise NotImplementedError

    def save(self, student: Student) -> None:
        """Insert or replace the student with the same id."""
        raise NotImplementedError

    def delete_by_id(self, student_id: str) -> bool:
        raise NotImplementedError
