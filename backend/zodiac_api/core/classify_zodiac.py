"""Zodiac Classification - pure mapping from a calendar date to a sign label.

Invariants:
    - SIGN_RANGES evaluated in fixed order, first match wins
    - Ranges are mutually exclusive and cover all 366 month/day pairs
    - Boundaries inclusive on both ends
    - No match returns UNKNOWN_SIGN; never raises for any (month, day)

Design Decisions:
    - A wrapping range (start month > end month, Capricorn) matches on the
      start-month and end-month clauses only; no month lies strictly between
      December and January, so the "strictly between" clause is omitted there
    - Operates on calendar dates only - no instants, no timezone conversion
"""

import logging
from dataclasses import dataclass
from datetime import date

from zodiac_api.core.domain_types import ZodiacSign
from zodiac_api.core.errors import UNKNOWN_SIGN
from zodiac_api.core.validate_input import parse_calendar_date

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SignRange:
    """Inclusive (month, day) span of one sign."""
    sign: ZodiacSign
    start: tuple[int, int]
    end: tuple[int, int]

    @property
    def wraps_year(self) -> bool:
        return self.start[0] > self.end[0]

    def contains(self, month: int, day: int) -> bool:
        start_month, start_day = self.start
        end_month, end_day = self.end
        if (month == start_month and day >= start_day) or (
            month == end_month and day <= end_day
        ):
            return True
        if self.wraps_year:
            return False
        return start_month < month < end_month


SIGN_RANGES: tuple[SignRange, ...] = (
    SignRange(ZodiacSign.CAPRICORN, (12, 22), (1, 19)),
    SignRange(ZodiacSign.AQUARIUS, (1, 20), (2, 18)),
    SignRange(ZodiacSign.PISCES, (2, 19), (3, 20)),
    SignRange(ZodiacSign.ARIES, (3, 21), (4, 19)),
    SignRange(ZodiacSign.TAURUS, (4, 20), (5, 20)),
    SignRange(ZodiacSign.GEMINI, (5, 21), (6, 20)),
    SignRange(ZodiacSign.CANCER, (6, 21), (7, 22)),
    SignRange(ZodiacSign.LEO, (7, 23), (8, 22)),
    SignRange(ZodiacSign.VIRGO, (8, 23), (9, 22)),
    SignRange(ZodiacSign.LIBRA, (9, 23), (10, 22)),
    SignRange(ZodiacSign.SCORPIO, (10, 23), (11, 21)),
    SignRange(ZodiacSign.SAGITTARIUS, (11, 22), (12, 21)),
)


def classify_month_day(month: int, day: int) -> str:
    """Return the sign label for a month/day pair, or UNKNOWN_SIGN."""
    for sign_range in SIGN_RANGES:
        if sign_range.contains(month, day):
            return sign_range.sign.value
    logger.warning(
        f"No sign range matched month={month} day={day}",
        extra={"zodiac_sign": UNKNOWN_SIGN},
    )
    return UNKNOWN_SIGN


def classify_date(value: date | str) -> str:
    """Classify a date object or a YYYY-MM-DD / YYYY/MM/DD string."""
    if isinstance(value, str):
        parsed = parse_calendar_date(value)
        if parsed is None:
            logger.warning(f"Unparseable date passed to classifier: {value!r}")
            return UNKNOWN_SIGN
        value = parsed
    return classify_month_day(value.month, value.day)
