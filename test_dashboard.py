"""Tests for the dashboard controller views."""

import pytest

from conftest import TEST_REGIONS
from dashboard import DashboardController
from errors import ForecastShapeError, InvalidIndex, UnknownPreference


class TestMapSummaries:
    def test_one_per_region_current_selection(self, controller: DashboardController):
        out = {s["code"]: s for s in controller.map_summaries()}
        assert list(out) == ["TX", "CA", "ME"]

        tx = out["TX"]
        assert tx["name"] == "Texas"
        assert tx["score"] == 100
        assert tx["tier"] == "Excellent"
        assert tx["color"] == "#27ae60"
        assert tx["highTemperature"] == 70
        assert tx["lowTemperature"] == 55
        assert tx["humidity"] == 40
        assert tx["verdict"] == "excellent"

        assert out["ME"]["score"] == 0
        assert out["ME"]["tier"] == "Unsuitable"

    def test_follows_selection(self, controller: DashboardController):
        controller.select_day(1)
        controller.select_preference("cold")
        out = {s["code"]: s for s in controller.map_summaries()}
        assert out["CA"]["score"] == 50
        assert out["CA"]["tier"] == "Fair"
        assert out["ME"]["score"] == 40
        assert out["TX"]["score"] == 0

    def test_region_without_forecast(self, store):
        ctl = DashboardController(store=store, regions=TEST_REGIONS + [{"code": "NY", "name": "New York"}])
        ny = [s for s in ctl.map_summaries() if s["code"] == "NY"][0]
        assert ny["has_data"] is False
        assert ny["highTemperature"] is None
        assert ny["score"] == 0
        assert ny["tier"] == "Unsuitable"

    def test_empty_controller_scores_zero(self):
        ctl = DashboardController()
        assert not ctl.has_data
        assert all(s["score"] == 0 for s in ctl.map_summaries())


class TestSelection:
    def test_bad_inputs_propagate(self, controller: DashboardController):
        controller.select_day(3)
        with pytest.raises(InvalidIndex):
            controller.select_day(8)
        with pytest.raises(UnknownPreference):
            controller.select_preference("tepid")
        assert controller.selection.selected_day == 3
        assert controller.selection.selected_preference == "ideal"


class TestBestRegions:
    def test_ranked_without_zeros(self, controller: DashboardController):
        best = controller.best_regions()
        assert [b["code"] for b in best] == ["TX", "CA"]
        assert [b["score"] for b in best] == [100, 90]

    def test_limit(self, controller: DashboardController):
        assert len(controller.best_regions(1)) == 1
        assert controller.best_regions(0) == []


class TestRegionWeek:
    def test_week_and_best_day(self, controller: DashboardController):
        week = controller.region_week("CA", "hot")
        assert week["name"] == "California"
        assert [d["score"] for d in week["days"]] == [0, 0, 0, 60, 0, 0, 40]
        assert week["best_day"] == 3

    def test_no_good_day(self, controller: DashboardController):
        assert controller.region_week("ME", "ideal")["best_day"] is None

    def test_unknown_preference(self, controller: DashboardController):
        with pytest.raises(UnknownPreference):
            controller.region_week("CA", "tepid")


def test_failed_load_keeps_previous_regions(controller: DashboardController):
    with pytest.raises(ForecastShapeError):
        controller.load([{"code": "NY", "name": "New York"}], {"NY": []})
    assert [r["code"] for r in controller.regions] == ["TX", "CA", "ME"]
    assert controller.store.get("TX", 0) is not None


def test_load_missing_region_forecasts_rejected(controller: DashboardController, forecasts):
    partial = {"TX": forecasts["TX"]}
    with pytest.raises(ForecastShapeError) as exc:
        controller.load(TEST_REGIONS, partial)
    assert "CA" in str(exc.value)
    assert "ME" in str(exc.value)
    assert controller.store.get("CA", 0).high_temperature == 65


def test_load_empty_forecasts_rejected(controller: DashboardController):
    with pytest.raises(ForecastShapeError):
        controller.load([], {})
    assert controller.has_data
    assert [r["code"] for r in controller.regions] == ["TX", "CA", "ME"]
