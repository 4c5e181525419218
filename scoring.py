# scoring.py
#
# Pure golf suitability scoring.
# No FastAPI / HTTP here – just numbers in, scores out.

from typing import List, Optional

from forecast_store import FORECAST_DAYS, ForecastDay, ForecastStore
from preferences import PreferenceBand, get_preference


# Best golf temperature, regardless of which band is picked.
IDEAL_TEMPERATURE_F = 70


def score_forecast_day(day: Optional[ForecastDay], band: PreferenceBand) -> int:
    """
    Score one day's forecast against a preference band.

    Two steps, in this order:
      1. The band is a hard gate. No data, or a high outside [min, max]
         (both ends inclusive) => 0.
      2. Inside the band, score by distance from 70°F: 100 minus 2 points
         per degree, never below 0.

    Returns an int 0–100.
    """
    if day is None:
        return 0

    high = day.high_temperature
    if not band.contains(high):
        return 0

    raw_score = max(0, 100 - 2 * abs(high - IDEAL_TEMPERATURE_F))
    return int(round(raw_score))


def score_region(
    store: ForecastStore,
    region_code: str,
    day_index: int,
    preference_key: str,
) -> int:
    """
    Store lookup + catalog lookup + scoring in one call.

    Unknown regions score 0. Bad day index / preference key raise.
    """
    band = get_preference(preference_key)
    return score_forecast_day(store.get(region_code, day_index), band)


def score_week(store: ForecastStore, region_code: str, preference_key: str) -> List[int]:
    """All 7 daily scores for a region (zeros if the region has no data)."""
    band = get_preference(preference_key)
    return [
        score_forecast_day(store.get(region_code, i), band)
        for i in range(FORECAST_DAYS)
    ]


def best_day_index(scores: List[int]) -> Optional[int]:
    """
    Pick the best day from a list of daily scores.

    Highest score wins, earliest day on a tie. None if nothing scores above 0.
    """
    if not scores or max(scores) <= 0:
        return None

    best = max(scores)
    return scores.index(best)
