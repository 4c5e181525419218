"""Shared test fixtures."""

from pathlib import Path
from typing import Dict, List

import pytest

import dashboard_config
from dashboard import DashboardController
from forecast_store import ForecastDay, ForecastStore

TEST_REGIONS = [
    {"code": "TX", "name": "Texas"},
    {"code": "CA", "name": "California"},
    {"code": "ME", "name": "Maine"},
]

CA_HIGHS = [65, 45, 60, 90, 75, 80, 100]


def make_week(highs: List[int], low: int = 40, humidity: int = 50) -> List[ForecastDay]:
    return [ForecastDay(high_temperature=h, low_temperature=low, humidity=humidity) for h in highs]


@pytest.fixture(autouse=True)
def tmp_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the dashboard config at a throwaway file for every test."""
    path = tmp_path / "config" / "dashboard.json"
    monkeypatch.setattr(dashboard_config, "_CONFIG_PATH", path)
    return path


@pytest.fixture
def forecasts() -> Dict[str, List[ForecastDay]]:
    return {
        "TX": make_week([70] * 7, low=55, humidity=40),
        "CA": make_week(CA_HIGHS),
        "ME": make_week([40] * 7, low=30, humidity=65),
    }


@pytest.fixture
def store(forecasts) -> ForecastStore:
    s = ForecastStore()
    s.replace(forecasts)
    return s


@pytest.fixture
def controller(forecasts) -> DashboardController:
    ctl = DashboardController()
    ctl.load(TEST_REGIONS, forecasts)
    return ctl


@pytest.fixture
def client(controller, monkeypatch: pytest.MonkeyPatch):
    """TestClient wired to a preloaded controller (lifespan not run)."""
    from fastapi.testclient import TestClient

    import app as app_module

    monkeypatch.setattr(app_module, "controller", controller)
    return TestClient(app_module.app)
