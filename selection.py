# selection.py
#
# What the user currently has picked: which day, which temperature band.
# Only explicit user actions write to this.

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict

from errors import UnknownPreference
from forecast_store import check_day_index
from preferences import DEFAULT_PREFERENCE, PREFERENCE_BANDS, PreferenceBand

logger = logging.getLogger(__name__)


@dataclass
class SelectionState:
    selected_day: int = 0
    selected_preference: str = DEFAULT_PREFERENCE

    def __post_init__(self) -> None:
        check_day_index(self.selected_day)
        if not isinstance(self.selected_preference, str) or self.selected_preference not in PREFERENCE_BANDS:
            raise UnknownPreference(self.selected_preference)

    @property
    def band(self) -> PreferenceBand:
        return PREFERENCE_BANDS[self.selected_preference]

    def set_day(self, index: Any) -> bool:
        """
        Select a day 0..6. Anything else raises InvalidIndex and leaves the
        current day alone. Returns True if the day actually changed.
        """
        check_day_index(index)
        if index == self.selected_day:
            return False

        logger.debug("Selected day %d -> %d", self.selected_day, index)
        self.selected_day = index
        return True

    def set_preference(self, key: Any) -> bool:
        """
        Select a preference band by key. Unknown keys raise UnknownPreference.
        Returns True if the preference actually changed.
        """
        if not isinstance(key, str) or key not in PREFERENCE_BANDS:
            raise UnknownPreference(key)
        if key == self.selected_preference:
            return False

        logger.debug("Selected preference %s -> %s", self.selected_preference, key)
        self.selected_preference = key
        return True

    def as_dict(self) -> Dict[str, Any]:
        return {
            "day": self.selected_day,
            "preference": self.selected_preference,
            "band": {
                "min": self.band.min,
                "max": self.band.max,
                "label": self.band.label,
                "description": self.band.description,
            },
        }
