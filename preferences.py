# preferences.py
#
# Temperature preference bands the user can pick from.
# Data only, defined once and never mutated.
#
# Bands share their edges (50 / 65 / 75 / 85) and both ends are inclusive,
# so e.g. 65°F is "in" both cool and ideal. Each band is checked on its own.

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List

from errors import UnknownPreference


@dataclass(frozen=True)
class PreferenceBand:
    key: str
    min: int
    max: int
    label: str
    description: str

    def contains(self, temperature: int) -> bool:
        return self.min <= temperature <= self.max


DEFAULT_PREFERENCE = "ideal"

# Insertion order is the order the UI shows them in.
PREFERENCE_BANDS: Dict[str, PreferenceBand] = {
    "cold": PreferenceBand("cold", 30, 50, "Cold Weather", "30-50°F"),
    "cool": PreferenceBand("cool", 50, 65, "Cool Weather", "50-65°F"),
    "ideal": PreferenceBand("ideal", 65, 75, "Ideal Weather", "65-75°F"),
    "warm": PreferenceBand("warm", 75, 85, "Warm Weather", "75-85°F"),
    "hot": PreferenceBand("hot", 85, 100, "Hot Weather", "85-100°F"),
}


def get_preference(key: str) -> PreferenceBand:
    """Look up a band by key. Unknown keys raise UnknownPreference."""
    try:
        return PREFERENCE_BANDS[key]
    except (KeyError, TypeError):
        raise UnknownPreference(key) from None


def preference_keys() -> List[str]:
    return list(PREFERENCE_BANDS)


def list_preferences() -> List[Dict[str, object]]:
    """Catalog as plain dicts, in display order (for the API / template)."""
    return [
        {
            "key": band.key,
            "min": band.min,
            "max": band.max,
            "label": band.label,
            "description": band.description,
        }
        for band in PREFERENCE_BANDS.values()
    ]
