"""
Weather condition vocabularies.

Open-Meteo reports WMO weather codes, which ``describe_code`` turns into a
free-text label. wttr.in reports its own free-text descriptions. The ASCII-art
renderer works on the four-tag ``Condition`` enum; ``condition_from_text`` is
the single bridge from any free-text label onto that enum.
"""
from enum import Enum
from typing import Tuple


# Inclusive upper bounds, checked in order after the exact match on 0.
_CODE_BOUNDS: Tuple[Tuple[int, str], ...] = (
    (3, "Partly cloudy"),
    (49, "Foggy"),
    (59, "Drizzle"),
    (69, "Rain"),
    (79, "Snow"),
    (84, "Rain showers"),
    (86, "Snow showers"),
    (99, "Thunderstorm"),
)


def describe_code(code: int) -> str:
    """Convert a WMO weather code into a human-readable label.

    Negative codes land in "Partly cloudy" because only upper bounds are
    checked; callers relying on "Unknown" for them will be surprised.
    """
    if code == 0:
        return "Clear sky"
    for upper, label in _CODE_BOUNDS:
        if code <= upper:
            return label
    return "Unknown"


class Condition(str, Enum):
    SUNNY = "sunny"
    RAINY = "rainy"
    CLOUDY = "cloudy"
    SNOWY = "snowy"

    @classmethod
    def parse(cls, tag: str) -> "Condition":
        """Look up a tag case-insensitively; anything unrecognised is cloudy."""
        try:
            return cls(tag.strip().lower())
        except ValueError:
            return cls.CLOUDY


# First matching group wins, so snow is checked before "showers".
_KEYWORDS: Tuple[Tuple[Condition, Tuple[str, ...]], ...] = (
    (Condition.SNOWY, ("snow", "sleet", "blizzard", "ice")),
    (Condition.RAINY, ("rain", "drizzle", "shower", "thunder", "storm")),
    (Condition.SUNNY, ("sun", "clear")),
)


def condition_from_text(text: str) -> Condition:
    lowered = text.lower()
    for condition, keywords in _KEYWORDS:
        if any(word in lowered for word in keywords):
            return condition
    return Condition.CLOUDY
