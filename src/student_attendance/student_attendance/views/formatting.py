from __future__ import annotations

from datetime import date

from ..core.constants import FAIR_ATTENDANCE_PERCENT, GOOD_ATTENDANCE_PERCENT
from ..students.model import compose_full_name


def full_name(first_name: str, father_name: str, surname: str) -> str:
    return compose_full_name(first_name, father_name, surname)


def percentage_band(percentage: float) -> str:
    """Colour band used when listing report percentages."""

    if percentage >= GOOD_ATTENDANCE_PERCENT:
        return "good"
    if percentage >= FAIR_ATTENDANCE_PERCENT:
        return "fair"
    return "poor"


def format_date(value: date) -> str:
    return value.strftime("%d/%m/%Y")
