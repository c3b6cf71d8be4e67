"""Sign Profiles - display data the client shows next to a classified sign.

Invariants:
    - Exactly one profile per ZodiacSign, listed in classifier order
    - Profile date spans are derived from SIGN_RANGES (single source of truth)
    - Every Element governs exactly three signs
"""

from dataclasses import dataclass

from zodiac_api.core.classify_zodiac import SIGN_RANGES
from zodiac_api.core.domain_types import Element, ZodiacSign


@dataclass(frozen=True)
class SignProfile:
    sign: ZodiacSign
    symbol: str
    description: str
    element: Element
    start: tuple[int, int]
    end: tuple[int, int]

    def to_dict(self) -> dict:
        return {
            "sign": self.sign.value,
            "symbol": self.symbol,
            "description": self.description,
            "element": self.element.value,
            "start": {"month": self.start[0], "day": self.start[1]},
            "end": {"month": self.end[0], "day": self.end[1]},
        }


_DISPLAY: dict[ZodiacSign, tuple[str, str, Element]] = {
    ZodiacSign.ARIES: ("♈", "The Ram - Bold and ambitious", Element.FIRE),
    ZodiacSign.TAURUS: ("♉", "The Bull - Reliable and practical", Element.EARTH),
    ZodiacSign.GEMINI: ("♊", "The Twins - Adaptable and curious", Element.AIR),
    ZodiacSign.CANCER: ("♋", "The Crab - Intuitive and emotional", Element.WATER),
    ZodiacSign.LEO: ("♌", "The Lion - Generous and warm-hearted", Element.FIRE),
    ZodiacSign.VIRGO: ("♍", "The Maiden - Analytical and kind", Element.EARTH),
    ZodiacSign.LIBRA: ("♎", "The Scales - Diplomatic and fair-minded", Element.AIR),
    ZodiacSign.SCORPIO: ("♏", "The Scorpion - Brave and passionate", Element.WATER),
    ZodiacSign.SAGITTARIUS: (
        "♐", "The Archer - Adventurous and philosophical", Element.FIRE,
    ),
    ZodiacSign.CAPRICORN: (
        "♑", "The Goat - Responsible and disciplined", Element.EARTH,
    ),
    ZodiacSign.AQUARIUS: (
        "♒", "The Water Bearer - Progressive and original", Element.AIR,
    ),
    ZodiacSign.PISCES: ("♓", "The Fish - Intuitive and gentle", Element.WATER),
}


SIGN_PROFILES: tuple[SignProfile, ...] = tuple(
    SignProfile(
        sign=r.sign,
        symbol=_DISPLAY[r.sign][0],
        description=_DISPLAY[r.sign][1],
        element=_DISPLAY[r.sign][2],
        start=r.start,
        end=r.end,
    )
    for r in SIGN_RANGES
)
