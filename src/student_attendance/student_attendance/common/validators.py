from __future__ import annotations

import re
from datetime import date
from typing import Any

from ..core.enums import AttendanceStatus
from ..core.exceptions import ValidationError
from .datetime_utils import parse_iso_date

# Indian numbering plan: 10 digits, first digit 6-9.
INDIAN_MOBILE_RE = re.compile(r"^[6-9]\d{9}$")


def require_non_empty(value: Any, field_name: str) -> str:
    if value is None or not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()


def optional_text(value: Any, field_name: str) -> str | None:
    """Stripped text, or None for null/blank; non-strings are rejected."""

    if value is None:
        return None
    if not isinstance(value, str):
        raise ValidationError(f"{field_name} must be text")
    return value.strip() or None


def require_min_length(value: str, field_name: str, min_len: int) -> str:
    if value is None or len(value) < min_len:
        raise ValidationError(f"{field_name} must be at least {min_len} characters")
    return value


def is_valid_indian_mobile(value: str) -> bool:
    return bool(INDIAN_MOBILE_RE.match(value or ""))


def require_indian_mobile(value: Any, field_name: str = "mobileNumber") -> str:
    mobile = require_non_empty(value, field_name)
    if not is_valid_indian_mobile(mobile):
        raise ValidationError("Invalid Indian mobile number (10 digits starting with 6-9)")
    return mobile


def require_iso_date(value: Any, field_name: str) -> date:
    text = require_non_empty(value, field_name)
    try:
        return parse_iso_date(text)
    except ValueError:
        raise ValidationError(f"{field_name} must be a date in YYYY-MM-DD format")


def require_positive_int(value: Any, field_name: str) -> int:
    """Accept ints and numeric strings (form fields arrive as text)."""

    if isinstance(value, bool):
        raise ValidationError(f"{field_name} must be a positive integer")
    try:
        number = int(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} must be a positive integer")
    if number <= 0:
        raise ValidationError(f"{field_name} must be a positive integer")
    return number


def optional_positive_int(value: Any, field_name: str) -> int | None:
    if value is None or value == "":
        return None
    return require_positive_int(value, field_name)


def require_status(value: Any) -> AttendanceStatus:
    text = require_non_empty(value, "status")
    try:
        return AttendanceStatus(text.lower())
    except ValueError:
        raise ValidationError('Status must be either "present" or "absent"')
