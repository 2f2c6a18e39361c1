"""Validation rules shared by the API service and the UI client.

Both sides call :func:`validate_person`; the client passes
``check_calendar=True`` and the server only checks the date pattern.
"""
import re
from datetime import date, timedelta
from typing import Any, Mapping, Optional

EMAIL_RE = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")
DATE_OF_BIRTH_RE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")
MOBILE_NUMBER_LENGTH = 10

INVALID_EMAIL = "invalid email address"
INVALID_MOBILE_NUMBER = "mobile number must be 10 digits"
INVALID_DATE_OF_BIRTH = "invalid date of birth format"
NAME_REQUIRED = "name is required"


def is_valid_email(value: Any) -> bool:
    return isinstance(value, str) and EMAIL_RE.fullmatch(value) is not None


def is_valid_mobile_number(value: Any) -> bool:
    # length only, "abcdefghij" passes
    return isinstance(value, str) and len(value) == MOBILE_NUMBER_LENGTH


def is_valid_date_of_birth(value: Any, check_calendar: bool = False) -> bool:
    if not isinstance(value, str) or DATE_OF_BIRTH_RE.fullmatch(value) is None:
        return False
    if not check_calendar:
        return True
    year, month, day = (int(part) for part in value.split("-"))
    try:
        date(year, month, day)
    except ValueError:
        return False
    return True


def is_valid_name(value: Any) -> bool:
    return isinstance(value, str) and value.strip() != ""


def validate_person(
    person: Mapping[str, Any],
    *,
    check_calendar: bool = False,
    partial: bool = False,
) -> Optional[str]:
    """Return the first rejection reason for ``person`` or ``None`` if valid.

    ``person`` uses the JSON field names (``email``, ``mobileNumber``,
    ``dateOfBirth``, ``name``). With ``partial`` only the keys present are
    checked.
    """
    rules = (
        ("email", is_valid_email, INVALID_EMAIL),
        ("mobileNumber", is_valid_mobile_number, INVALID_MOBILE_NUMBER),
        ("dateOfBirth", lambda v: is_valid_date_of_birth(v, check_calendar), INVALID_DATE_OF_BIRTH),
        ("name", is_valid_name, NAME_REQUIRED),
    )
    for field, check, reason in rules:
        if partial and field not in person:
            continue
        if not check(person.get(field)):
            return reason
    return None


def coerce_date_of_birth(value: str) -> date:
    """Build a date from a ``YYYY-MM-DD`` string, rolling out-of-range parts over.

    ``2020-02-30`` becomes ``2020-03-01`` and ``2020-13-01`` becomes
    ``2021-01-01``, so a pattern-valid value always maps to a real date.
    """
    if DATE_OF_BIRTH_RE.fullmatch(value) is None:
        raise ValueError(INVALID_DATE_OF_BIRTH)
    year, month, day = (int(part) for part in value.split("-"))
    year += (month - 1) // 12
    month = (month - 1) % 12 + 1
    return date(year, month, 1) + timedelta(days=day - 1)
