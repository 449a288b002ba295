"""Student list filter state.

The state is an immutable value; every change goes through `reduce_filters`
so each list view owns its own copy instead of sharing process-wide globals.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Iterable, Optional

from ..core.constants import ALL
from ..students.model import Student

SET_SEARCH = "set_search"
SET_SCHOOL = "set_school"
SET_STANDARD = "set_standard"
CLEAR = "clear"


@dataclass(frozen=True)
class StudentFilters:
    search_term: str = ""
    school: str = ALL
    standard: str = ALL

    @property
    def is_active(self) -> bool:
        return bool(self.search_term) or self.school != ALL or self.standard != ALL

    @classmethod
    def from_query(cls, search: Optional[str], school: Optional[str], standard: Optional[str]) -> "StudentFilters":
        state = cls()
        state = reduce_filters(state, SET_SEARCH, search)
        state = reduce_filters(state, SET_SCHOOL, school)
        return reduce_filters(state, SET_STANDARD, standard)


def reduce_filters(state: StudentFilters, action: str, value: Any = None) -> StudentFilters:
    if action == SET_SEARCH:
        return replace(state, search_term=(value or "").strip())
    if action == SET_SCHOOL:
        return replace(state, school=(value or "").strip() or ALL)
    if action == SET_STANDARD:
        return replace(state, standard=str(value).strip() if value not in (None, "") else ALL)
    if action == CLEAR:
        return StudentFilters()
    raise ValueError(f"Unknown filter action: {action!r}")


def _matches_search(student: Student, term: str) -> bool:
    term_lower = term.lower()
    texts = (student.first_name, student.father_name, student.surname, student.school or "")
    return any(term_lower in t.lower() for t in texts) or term in student.mobile_number


def filter_students(students: Iterable[Student], filters: StudentFilters) -> list[Student]:
    selected = list(students)
    if filters.search_term:
        selected = [s for s in selected if _matches_search(s, filters.search_term)]
    if filters.school != ALL:
        selected = [s for s in selected if s.school == filters.school]
    if filters.standard != ALL:
        selected = [s for s in selected if str(s.standard) == filters.standard]
    return selected
