"""Input Rules: presence and format checks shared by all create handlers.

Invariants:
    - require_text() returns the stripped value or raises ValidationError
    - Format checks run on already-stripped text
    - Date rule is shape-only (YYYY-MM-DD, ASCII digits); calendar validity
      is not checked
    - Time rule is 24-hour H:MM or HH:MM

Design Decisions:
    - Raise on first failure: each handler reports one problem per request,
      in the order its fields are checked
"""

import re
from typing import Any

from practice_feedback.core.errors import ValidationError

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
DATE_PATTERN = re.compile(r"^[0-9]{4}-[0-9]{2}-[0-9]{2}$")
TIME_PATTERN = re.compile(r"^([01]?[0-9]|2[0-3]):[0-5][0-9]$")


def is_blank(value: Any) -> bool:
    """True for None, non-strings and whitespace-only strings."""
    return not isinstance(value, str) or not value.strip()


def require_text(value: Any, message: str, field: str | None = None) -> str:
    if is_blank(value):
        raise ValidationError(message, field=field)
    return value.strip()


def require_id(value: Any, resource_type: str) -> str:
    return require_text(value, f"{resource_type} ID is required", field="id")


def check_email(email: str) -> None:
    if not EMAIL_PATTERN.match(email):
        raise ValidationError("Invalid email format", field="email")


def check_date(date: str) -> None:
    if not DATE_PATTERN.match(date):
        raise ValidationError("Date must be in YYYY-MM-DD format", field="date")


def check_time(time: str) -> None:
    if not TIME_PATTERN.match(time):
        raise ValidationError("Time must be in HH:MM format (24-hour)", field="time")
