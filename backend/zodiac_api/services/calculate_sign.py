"""Calculate Sign - validate → classify → persist, the one write path of the API.

Invariants:
    - Nothing is persisted unless validation passed
    - The result is returned ONLY after the entry is durably appended;
      a PersistenceError propagates and no success result is fabricated
    - Returned name/date are the sanitized values that were stored

Design Decisions:
    - Impureim sandwich: pure validate_input + classify_date, one IO call (store.append)
    - Store passed in by the caller (route dependency): no global file state
"""

import logging
from dataclasses import dataclass
from datetime import date

from zodiac_api.core.classify_zodiac import classify_date
from zodiac_api.core.domain_types import Entry
from zodiac_api.core.errors import InputValidationError, UNKNOWN_SIGN
from zodiac_api.core.repository_protocols import EntryStore
from zodiac_api.core.validate_input import DEFAULT_MAX_AGE_YEARS, validate_input

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SignResult:
    name: str
    date_of_birth: str
    zodiac_sign: str

    def to_dict(self) -> dict[str, str]:
        return {
            "name": self.name,
            "dateOfBirth": self.date_of_birth,
            "zodiacSign": self.zodiac_sign,
        }


async def calculate_and_store(
    store: EntryStore,
    name: object,
    date_of_birth: object,
    today: date | None = None,
    max_age_years: int = DEFAULT_MAX_AGE_YEARS,
) -> SignResult:
    """Raises InputValidationError (all violations) or PersistenceError."""
    validation = validate_input(
        name, date_of_birth, today=today, max_age_years=max_age_years,
    )
    if not validation.is_valid:
        raise InputValidationError(validation.errors)

    zodiac_sign = classify_date(validation.sanitized_date)
    if zodiac_sign == UNKNOWN_SIGN:
        logger.warning(
            "Validated date did not classify",
            extra={"zodiac_sign": zodiac_sign},
        )

    entry = Entry.create(
        name=validation.sanitized_name,
        date_of_birth=validation.sanitized_date,
        zodiac_sign=zodiac_sign,
    )
    await store.append(entry)

    return SignResult(
        name=entry.name,
        date_of_birth=entry.date_of_birth,
        zodiac_sign=entry.zodiac_sign,
    )
