"""
forecast_sources.py

Where forecast numbers come from.

There is no real weather feed behind the heat map. A source just has to
produce a 7-day forecast for a region code:

    source.forecast_for("TX") -> [ForecastDay, ...]  # exactly 7

RandomForecastSource is the mock generator the dashboard runs with by
default. FixedForecastSource hands back the same numbers every time, which
is what tests and demos want.
"""

from __future__ import annotations

import random
from typing import Dict, List, Mapping, Optional, Protocol, Sequence

from forecast_store import FORECAST_DAYS, ForecastDay


class ForecastSource(Protocol):
    def forecast_for(self, region_code: str) -> List[ForecastDay]:
        ...


class RandomForecastSource:
    """
    Synthetic forecasts.

      high      40–79°F
      low       30–49°F
      humidity  30–69%

    High and low are drawn independently, so a low above the high can
    happen. Pass a seed to get repeatable numbers.
    """

    def __init__(self, seed: Optional[int] = None):
        self.seed = seed
        self._rng = random.Random(seed)

    def _day(self) -> ForecastDay:
        return ForecastDay(
            high_temperature=self._rng.randint(40, 79),
            low_temperature=self._rng.randint(30, 49),
            humidity=self._rng.randint(30, 69),
        )

    def forecast_for(self, region_code: str) -> List[ForecastDay]:
        return [self._day() for _ in range(FORECAST_DAYS)]


class FixedForecastSource:
    """
    Same forecast every time.

    `by_region` overrides specific regions; everything else gets `default`
    (one day repeated 7 times if a single ForecastDay is given).
    """

    def __init__(
        self,
        default: Optional[ForecastDay | Sequence[ForecastDay]] = None,
        by_region: Optional[Mapping[str, Sequence[ForecastDay]]] = None,
    ):
        if default is None:
            default = ForecastDay(high_temperature=70, low_temperature=50, humidity=50)
        if isinstance(default, ForecastDay):
            default = [default] * FORECAST_DAYS

        self.default: List[ForecastDay] = list(default)
        self.by_region: Dict[str, List[ForecastDay]] = {
            code: list(days) for code, days in (by_region or {}).items()
        }

    def forecast_for(self, region_code: str) -> List[ForecastDay]:
        return list(self.by_region.get(region_code, self.default))


def build_source(settings: Mapping[str, object]) -> ForecastSource:
    """
    Build a source from the 'forecast' block of the dashboard config.

    {"source": "random", "seed": 42}
    {"source": "fixed", "fixed_day": {"highTemperature": 70, ...}}
    """
    kind = settings.get("source", "random")

    if kind == "random":
        seed = settings.get("seed")
        return RandomForecastSource(seed=int(seed) if seed is not None else None)

    if kind == "fixed":
        fixed_day = settings.get("fixed_day")
        default = ForecastDay.from_dict(fixed_day) if isinstance(fixed_day, Mapping) else None
        return FixedForecastSource(default=default)

    raise ValueError(f"Unknown forecast source: {kind!r}")
