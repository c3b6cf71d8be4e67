"""Input Validation - name rules, date rules, sanitization, error collection.

Tests cover:
    - Valid input passes with trimmed + escaped name, trimmed date
    - Each name rule reports its own message; several can fire at once
    - Date rules: required, format, future, age floor (inclusive boundaries)
    - Errors from name and date are collected together, name first
"""

from datetime import date

import pytest

from zodiac_api.core.validate_input import (
    MSG_DATE_FORMAT,
    MSG_DATE_FUTURE,
    MSG_DATE_REQUIRED,
    MSG_NAME_CHARSET,
    MSG_NAME_REQUIRED,
    MSG_NAME_TOO_LONG,
    MSG_NAME_TOO_SHORT,
    msg_date_too_old,
    parse_calendar_date,
    validate_input,
    years_before,
)

TODAY = date(2025, 6, 15)


def _validate(name, dob, **kwargs):
    return validate_input(name, dob, today=TODAY, **kwargs)


# ─── Happy path ──────────────────────────────────────────────────

def test_valid_input_passes_unchanged():
    result = _validate("Ada Lovelace", "1990-03-21")
    assert result.is_valid
    assert result.errors == []
    assert result.sanitized_name == "Ada Lovelace"
    assert result.sanitized_date == "1990-03-21"


def test_name_and_date_are_trimmed():
    result = _validate("  Ada  ", " 1990-03-21 ")
    assert result.is_valid
    assert result.sanitized_name == "Ada"
    assert result.sanitized_date == "1990-03-21"


def test_apostrophe_is_html_escaped():
    result = _validate("O'Brien", "1990-03-21")
    assert result.is_valid
    assert result.sanitized_name == "O&#x27;Brien"


def test_hyphenated_name_passes():
    assert _validate("Mary-Jane Watson", "1990-03-21").is_valid


# ─── Name rules ──────────────────────────────────────────────────

def test_single_character_name_rejected():
    result = _validate("A", "1990-01-01")
    assert not result.is_valid
    assert result.errors == [MSG_NAME_TOO_SHORT]
    assert MSG_NAME_TOO_SHORT == "Name must be at least 2 characters long"


def test_fifty_character_name_accepted():
    assert _validate("a" * 50, "1990-01-01").is_valid


def test_fifty_one_character_name_rejected():
    result = _validate("a" * 51, "1990-01-01")
    assert result.errors == [MSG_NAME_TOO_LONG]


def test_name_with_digits_rejected():
    result = _validate("R2D2", "1990-01-01")
    assert result.errors == [MSG_NAME_CHARSET]


@pytest.mark.parametrize("name", ["Ada!", "Ada.Lovelace", "Ada_L", "<b>Ada</b>"])
def test_name_with_other_punctuation_rejected(name):
    assert MSG_NAME_CHARSET in _validate(name, "1990-01-01").errors


def test_short_name_with_digit_reports_both_rules():
    result = _validate("1", "1990-01-01")
    assert result.errors == [MSG_NAME_TOO_SHORT, MSG_NAME_CHARSET]


@pytest.mark.parametrize("name", [None, "", 42, ["Ada"]])
def test_missing_or_non_string_name_is_required(name):
    result = _validate(name, "1990-01-01")
    assert result.errors == [MSG_NAME_REQUIRED]
    assert result.sanitized_name == ""


# ─── Date rules ──────────────────────────────────────────────────

@pytest.mark.parametrize("dob", [None, "", 19900321])
def test_missing_or_non_string_date_is_required(dob):
    result = _validate("Ada", dob)
    assert result.errors == [MSG_DATE_REQUIRED]
    assert result.sanitized_date == ""


@pytest.mark.parametrize("dob", [
    "not-a-date", "2023-02-30", "1990-13-01", "1990-03/21", "21-03-1990", "   ",
])
def test_unparseable_date_rejected(dob):
    assert _validate("Ada", dob).errors == [MSG_DATE_FORMAT]


@pytest.mark.parametrize("dob", ["١٩٩٠-٠٣-٢١", "１９９０-０３-２１", "1990-٠٣-21"])
def test_non_ascii_digits_rejected(dob):
    result = _validate("Ada", dob)
    assert result.errors == [MSG_DATE_FORMAT]
    assert parse_calendar_date(dob) is None


def test_slash_separated_date_accepted():
    assert _validate("Ada", "1990/03/21").is_valid


def test_today_is_accepted():
    assert _validate("Ada", "2025-06-15").is_valid


def test_tomorrow_is_future():
    result = _validate("Ada", "2025-06-16")
    assert result.errors == [MSG_DATE_FUTURE]


def test_exactly_max_age_is_accepted():
    assert _validate("Ada", "1905-06-15").is_valid


def test_one_day_past_max_age_rejected():
    result = _validate("Ada", "1905-06-14")
    assert result.errors == [msg_date_too_old(120)]
    assert result.errors[0] == "Date of birth cannot be more than 120 years ago"


def test_max_age_is_configurable():
    result = _validate("Ada", "2000-01-01", max_age_years=10)
    assert result.errors == [msg_date_too_old(10)]


# ─── Collection ──────────────────────────────────────────────────

def test_all_violations_collected_name_first():
    result = _validate("A1", "2999-01-01")
    assert result.errors == [MSG_NAME_CHARSET, MSG_DATE_FUTURE]
    assert not result.is_valid


def test_sanitized_values_returned_even_when_invalid():
    result = _validate(" A ", " 2999-01-01 ")
    assert result.sanitized_name == "A"
    assert result.sanitized_date == "2999-01-01"


def test_today_defaults_to_current_date():
    assert validate_input("Ada", date.today().isoformat()).is_valid


# ─── Helpers ─────────────────────────────────────────────────────

def test_parse_calendar_date_accepts_unpadded_parts():
    assert parse_calendar_date("1990-3-7") == date(1990, 3, 7)


def test_parse_calendar_date_rejects_impossible_dates():
    assert parse_calendar_date("2023-02-29") is None
    assert parse_calendar_date("2024-02-29") == date(2024, 2, 29)


def test_years_before_keeps_month_and_day():
    assert years_before(date(2025, 6, 15), 120) == date(1905, 6, 15)


def test_years_before_rolls_leap_day_to_march_first():
    assert years_before(date(2024, 2, 29), 1) == date(2023, 3, 1)
