"""
forecast_store.py

Holds the 7-day forecast for every region.

Shape:
    { "TX": (ForecastDay, ForecastDay, ... 7 of them), "CA": (...), ... }

Index 0 is today, index 6 is six days out. No dates are stored.

The store is filled in one go by replace(). The new mapping is built and
validated completely before it is swapped in, so readers either see the old
data or the new data, never half of each.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from threading import Lock
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple

from errors import ForecastShapeError, InvalidIndex

logger = logging.getLogger(__name__)

FORECAST_DAYS = 7


@dataclass(frozen=True)
class ForecastDay:
    high_temperature: int
    low_temperature: int
    humidity: int

    def __post_init__(self) -> None:
        # Whole numbers only: no floats, no strings, no bools
        for name in ("high_temperature", "low_temperature", "humidity"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ForecastShapeError(f"{name} must be an integer, got {value!r}")
        if not 0 <= self.humidity <= 100:
            raise ForecastShapeError(f"humidity must be 0-100, got {self.humidity}")

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ForecastDay":
        """Build from the wire shape {highTemperature, lowTemperature, humidity}."""
        try:
            return cls(
                high_temperature=data["highTemperature"],
                low_temperature=data["lowTemperature"],
                humidity=data["humidity"],
            )
        except KeyError as e:
            raise ForecastShapeError(f"bad forecast day {data!r}: missing {e}") from e

    def to_dict(self) -> Dict[str, int]:
        return {
            "highTemperature": self.high_temperature,
            "lowTemperature": self.low_temperature,
            "humidity": self.humidity,
        }


Forecast = Tuple[ForecastDay, ...]


def check_day_index(day_index: Any) -> int:
    """Return day_index if it's a valid 0..6 int, else raise InvalidIndex."""
    # bool is an int subclass; True/False are not day indices
    if isinstance(day_index, bool) or not isinstance(day_index, int):
        raise InvalidIndex(day_index)
    if not 0 <= day_index < FORECAST_DAYS:
        raise InvalidIndex(day_index)
    return day_index


def _coerce_forecast(region_code: str, days: Sequence[Any]) -> Forecast:
    if isinstance(days, (str, bytes)) or not isinstance(days, Sequence):
        raise ForecastShapeError(f"{region_code}: forecast must be a list of days")
    if len(days) != FORECAST_DAYS:
        raise ForecastShapeError(
            f"{region_code}: expected {FORECAST_DAYS} days, got {len(days)}"
        )

    out: List[ForecastDay] = []
    for d in days:
        if isinstance(d, ForecastDay):
            out.append(d)
        elif isinstance(d, Mapping):
            out.append(ForecastDay.from_dict(d))
        else:
            raise ForecastShapeError(f"{region_code}: bad forecast day {d!r}")
    return tuple(out)


class ForecastStore:
    def __init__(self) -> None:
        self._forecasts: Optional[Dict[str, Forecast]] = None
        self._loaded_at: Optional[datetime] = None
        self._lock = Lock()

    # -----------------------------
    # Reads (no locking needed)
    # -----------------------------

    @property
    def is_populated(self) -> bool:
        return self._forecasts is not None

    @property
    def loaded_at(self) -> Optional[datetime]:
        return self._loaded_at

    def region_codes(self) -> List[str]:
        forecasts = self._forecasts
        return list(forecasts) if forecasts else []

    def forecast(self, region_code: str) -> Optional[Forecast]:
        forecasts = self._forecasts
        if forecasts is None:
            return None
        return forecasts.get(region_code)

    def get(self, region_code: str, day_index: int) -> Optional[ForecastDay]:
        """
        One region, one day.

        Returns None when the region is unknown or nothing is loaded yet.
        That's "no data", not an error. A bad day_index is an error though.
        """
        check_day_index(day_index)
        forecast = self.forecast(region_code)
        if forecast is None:
            return None
        return forecast[day_index]

    # -----------------------------
    # Bulk populate
    # -----------------------------

    def replace(self, forecasts: Mapping[str, Sequence[Any]]) -> int:
        """
        Swap in a whole new dataset.

        `forecasts` maps region code -> 7 days, each day either a ForecastDay
        or a wire dict. Everything is validated first; if anything is off we
        raise ForecastShapeError and keep whatever was there before.

        Returns the number of regions loaded.
        """
        if not isinstance(forecasts, Mapping):
            raise ForecastShapeError("forecast payload must be a mapping of region code -> days")
        if not forecasts:
            raise ForecastShapeError("forecast payload has no regions")

        new_forecasts: Dict[str, Forecast] = {}
        for region_code, days in forecasts.items():
            if not isinstance(region_code, str) or not region_code:
                raise ForecastShapeError(f"bad region code {region_code!r}")
            new_forecasts[region_code] = _coerce_forecast(region_code, days)

        with self._lock:
            self._forecasts = new_forecasts
            self._loaded_at = datetime.now(timezone.utc)

        logger.info("Forecast store replaced: %d regions", len(new_forecasts))
        return len(new_forecasts)

    def clear(self) -> None:
        with self._lock:
            self._forecasts = None
            self._loaded_at = None
