"""Domain Types - rich types that replace bare primitives across the codebase.

Invariants:
    - ZodiacSign has exactly 12 members, declared in classifier evaluation order
    - Element has exactly 4 members; each element governs exactly 3 signs
    - Entry is frozen - entries are never updated after creation
    - Entry.to_dict() / from_dict() use the persisted camelCase field names

Design Decisions:
    - str Enums: serialize to JSON without custom encoders
    - Entry as frozen dataclass (not Pydantic): core stays free of framework imports
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import Any, NewType


# ─── Identity Types ──────────────────────────────────────────────

EntryId = NewType("EntryId", str)   # millisecond Unix timestamp, decimal


# ─── Enums ───────────────────────────────────────────────────────

class ZodiacSign(str, Enum):
    """The twelve tropical signs, in classifier evaluation order."""
    CAPRICORN = "Capricorn"
    AQUARIUS = "Aquarius"
    PISCES = "Pisces"
    ARIES = "Aries"
    TAURUS = "Taurus"
    GEMINI = "Gemini"
    CANCER = "Cancer"
    LEO = "Leo"
    VIRGO = "Virgo"
    LIBRA = "Libra"
    SCORPIO = "Scorpio"
    SAGITTARIUS = "Sagittarius"


class Element(str, Enum):
    """Classical elemental affiliation shown next to a sign."""
    FIRE = "Fire"
    EARTH = "Earth"
    AIR = "Air"
    WATER = "Water"


# ─── Entry ───────────────────────────────────────────────────────

ENTRY_FIELDS: tuple[str, ...] = (
    "id", "name", "dateOfBirth", "zodiacSign", "timestamp",
)


def utc_timestamp(now: datetime | None = None) -> str:
    """ISO 8601 UTC with millisecond precision and Z suffix."""
    now = now or datetime.now(timezone.utc)
    return (
        now.astimezone(timezone.utc)
        .isoformat(timespec="milliseconds")
        .replace("+00:00", "Z")
    )


def millis_id(now: datetime | None = None) -> EntryId:
    """Timestamp-derived entry id. Same-millisecond collisions are accepted."""
    now = now or datetime.now(timezone.utc)
    return EntryId(str(int(now.timestamp() * 1000)))


@dataclass(frozen=True)
class Entry:
    """One persisted submission."""
    id: EntryId
    name: str
    date_of_birth: str
    zodiac_sign: str
    timestamp: str

    @classmethod
    def create(
        cls, name: str, date_of_birth: str, zodiac_sign: str,
        now: datetime | None = None,
    ) -> "Entry":
        now = now or datetime.now(timezone.utc)
        return cls(
            id=millis_id(now),
            name=name,
            date_of_birth=date_of_birth,
            zodiac_sign=zodiac_sign,
            timestamp=utc_timestamp(now),
        )

    def to_dict(self) -> dict[str, str]:
        return {
            "id": self.id,
            "name": self.name,
            "dateOfBirth": self.date_of_birth,
            "zodiacSign": self.zodiac_sign,
            "timestamp": self.timestamp,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Entry":
        """Rebuild from the persisted shape. Raises ValueError on bad records."""
        if not isinstance(data, dict):
            raise ValueError(f"entry must be an object, got {type(data).__name__}")
        missing = [f for f in ENTRY_FIELDS if f not in data]
        if missing:
            raise ValueError(f"entry missing fields: {', '.join(missing)}")
        return cls(
            id=EntryId(str(data["id"])),
            name=str(data["name"]),
            date_of_birth=str(data["dateOfBirth"]),
            zodiac_sign=str(data["zodiacSign"]),
            timestamp=str(data["timestamp"]),
        )
