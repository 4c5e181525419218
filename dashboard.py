"""
dashboard.py

The heat map "controller": one forecast store, one selection, one region list.

This is what the web layer talks to. Everything it hands back is plain
values (numbers, tier names, hex colours) – no HTML.

A region summary looks like:
{
    "code": "TX",
    "name": "Texas",
    "day": 0,
    "preference": "ideal",
    "has_data": True,
    "highTemperature": 72,
    "lowTemperature": 48,
    "humidity": 40,
    "score": 96,
    "tier": "Excellent",
    "color": "#27ae60",
    "verdict": "excellent",
    "verdict_message": "Excellent golf weather!",
    "verdict_background": "#d5f4e6",
}
"""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional, Sequence

from classification import classify, popup_verdict
from errors import ForecastShapeError
from forecast_store import FORECAST_DAYS, ForecastDay, ForecastStore
from regions import US_REGIONS, Region, region_names
from scoring import best_day_index, score_region, score_week
from selection import SelectionState


def _summarise(
    code: str,
    name: str,
    day_index: int,
    preference_key: str,
    day: Optional[ForecastDay],
    score: int,
) -> Dict[str, Any]:
    category = classify(score)
    verdict = popup_verdict(score)
    return {
        "code": code,
        "name": name,
        "day": day_index,
        "preference": preference_key,
        "has_data": day is not None,
        "highTemperature": day.high_temperature if day else None,
        "lowTemperature": day.low_temperature if day else None,
        "humidity": day.humidity if day else None,
        "score": score,
        "tier": category.tier,
        "color": category.color,
        "verdict": verdict["verdict"],
        "verdict_message": verdict["message"],
        "verdict_background": verdict["background"],
    }


class DashboardController:
    def __init__(
        self,
        store: Optional[ForecastStore] = None,
        selection: Optional[SelectionState] = None,
        regions: Optional[List[Region]] = None,
    ):
        self.store = store or ForecastStore()
        self.selection = selection or SelectionState()
        self.regions: List[Region] = list(regions or US_REGIONS)
        self.geojson: Optional[Dict[str, Any]] = None

    # -----------------------------
    # Loading
    # -----------------------------

    def load(
        self,
        regions: List[Region],
        forecasts: Mapping[str, Sequence[Any]],
        geojson: Optional[Dict[str, Any]] = None,
    ) -> int:
        """
        Replace everything from one load cycle.

        Every region in `regions` needs a forecast; if any is missing, or the
        forecasts are malformed, this raises ForecastShapeError and the
        regions/store/geojson from the previous load stay as they were.
        """
        missing = [r["code"] for r in regions if r["code"] not in forecasts]
        if missing:
            raise ForecastShapeError(f"missing forecasts for regions: {', '.join(missing)}")

        count = self.store.replace(forecasts)
        self.regions = list(regions)
        self.geojson = geojson
        return count

    @property
    def has_data(self) -> bool:
        return self.store.is_populated

    # -----------------------------
    # Selection passthrough
    # -----------------------------

    def select_day(self, index: Any) -> bool:
        return self.selection.set_day(index)

    def select_preference(self, key: Any) -> bool:
        return self.selection.set_preference(key)

    # -----------------------------
    # Scoring views
    # -----------------------------

    def region_name(self, code: str) -> Optional[str]:
        return region_names(self.regions).get(code)

    def _summary(self, code: str, name: str, day_index: int, preference_key: str) -> Dict[str, Any]:
        score = score_region(self.store, code, day_index, preference_key)
        day = self.store.get(code, day_index)
        return _summarise(code, name, day_index, preference_key, day, score)

    def region_summary(
        self,
        code: str,
        day_index: Optional[int] = None,
        preference_key: Optional[str] = None,
    ) -> Dict[str, Any]:
        """Summary for one region; defaults to the current selection."""
        day_index = self.selection.selected_day if day_index is None else day_index
        preference_key = preference_key or self.selection.selected_preference
        return self._summary(code, self.region_name(code) or code, day_index, preference_key)

    def map_summaries(self) -> List[Dict[str, Any]]:
        """One summary per known region, for the current selection."""
        day_index = self.selection.selected_day
        preference_key = self.selection.selected_preference
        return [
            self._summary(r["code"], r["name"], day_index, preference_key)
            for r in self.regions
        ]

    def best_regions(self, limit: int = 5) -> List[Dict[str, Any]]:
        """
        Top regions for the current selection.

        Zero scores are left out. Ties keep region-list order.
        """
        scored = [s for s in self.map_summaries() if s["score"] > 0]
        scored.sort(key=lambda s: s["score"], reverse=True)
        return scored[: max(0, limit)]

    def region_week(self, code: str, preference_key: Optional[str] = None) -> Dict[str, Any]:
        """
        All 7 days for one region under one preference, plus the best day.

        "best_day" is None when no day scores above 0.
        """
        preference_key = preference_key or self.selection.selected_preference
        scores = score_week(self.store, code, preference_key)
        name = self.region_name(code) or code
        days = [self._summary(code, name, i, preference_key) for i in range(FORECAST_DAYS)]

        return {
            "code": code,
            "name": name,
            "preference": preference_key,
            "days": days,
            "best_day": best_day_index(scores),
        }
