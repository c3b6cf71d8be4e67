"""Input Validation - pure checks and sanitization for a name + date-of-birth pair.

Invariants:
    - validate_input is PURE: no IO, "today" injectable for determinism
    - ALL violations are collected, in rule order (name rules, then date rules)
    - sanitized_name is trimmed + HTML-escaped; sanitized_date is trimmed only
    - Dates are calendar dates - never converted to instants or timezones

Design Decisions:
    - "Required" and "Invalid date format" short-circuit the checks that depend
      on them (length of a missing name, range of an unparseable date)
    - Feb 29 shifted into a non-leap year rolls over to Mar 1 for the age floor
"""

import html
import re
from dataclasses import dataclass, field
from datetime import date


NAME_MIN_LENGTH: int = 2
NAME_MAX_LENGTH: int = 50
DEFAULT_MAX_AGE_YEARS: int = 120

NAME_PATTERN = re.compile(r"[A-Za-z\s'-]+")
DATE_PATTERN = re.compile(r"(\d{4})([-/])(\d{1,2})\2(\d{1,2})", re.ASCII)

MSG_NAME_REQUIRED = "Name is required"
MSG_NAME_TOO_SHORT = f"Name must be at least {NAME_MIN_LENGTH} characters long"
MSG_NAME_TOO_LONG = f"Name must be less than {NAME_MAX_LENGTH} characters"
MSG_NAME_CHARSET = "Name can only contain letters, spaces, hyphens, and apostrophes"
MSG_DATE_REQUIRED = "Date of birth is required"
MSG_DATE_FORMAT = "Invalid date format"
MSG_DATE_FUTURE = "Date of birth cannot be in the future"


def msg_date_too_old(max_age_years: int) -> str:
    return f"Date of birth cannot be more than {max_age_years} years ago"


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of validate_input. errors is empty iff is_valid."""
    is_valid: bool
    errors: list[str] = field(default_factory=list)
    sanitized_name: str = ""
    sanitized_date: str = ""


def parse_calendar_date(value: str) -> date | None:
    """Parse YYYY-MM-DD or YYYY/MM/DD into a date. None if not a real date."""
    match = DATE_PATTERN.fullmatch(value.strip())
    if not match:
        return None
    year, _, month, day = match.groups()
    try:
        return date(int(year), int(month), int(day))
    except ValueError:
        return None


def years_before(anchor: date, years: int) -> date:
    """Same month/day `years` earlier; Feb 29 rolls over to Mar 1."""
    try:
        return anchor.replace(year=anchor.year - years)
    except ValueError:
        return date(anchor.year - years, 3, 1)


def _check_name(name: object) -> list[str]:
    if not isinstance(name, str) or not name:
        return [MSG_NAME_REQUIRED]
    trimmed = name.strip()
    errors = []
    if len(trimmed) < NAME_MIN_LENGTH:
        errors.append(MSG_NAME_TOO_SHORT)
    if len(trimmed) > NAME_MAX_LENGTH:
        errors.append(MSG_NAME_TOO_LONG)
    if not NAME_PATTERN.fullmatch(trimmed):
        errors.append(MSG_NAME_CHARSET)
    return errors


def _check_date(
    date_of_birth: object, today: date, max_age_years: int,
) -> list[str]:
    if not isinstance(date_of_birth, str) or not date_of_birth:
        return [MSG_DATE_REQUIRED]
    birth_date = parse_calendar_date(date_of_birth)
    if birth_date is None:
        return [MSG_DATE_FORMAT]
    errors = []
    if birth_date > today:
        errors.append(MSG_DATE_FUTURE)
    if birth_date < years_before(today, max_age_years):
        errors.append(msg_date_too_old(max_age_years))
    return errors


def validate_input(
    name: object,
    date_of_birth: object,
    today: date | None = None,
    max_age_years: int = DEFAULT_MAX_AGE_YEARS,
) -> ValidationResult:
    """Validate and sanitize a submission. Pure - returns a result, never raises."""
    today = today or date.today()
    errors = _check_name(name) + _check_date(date_of_birth, today, max_age_years)
    return ValidationResult(
        is_valid=not errors,
        errors=errors,
        sanitized_name=html.escape(name.strip()) if isinstance(name, str) else "",
        sanitized_date=(
            date_of_birth.strip() if isinstance(date_of_birth, str) else ""
        ),
    )
