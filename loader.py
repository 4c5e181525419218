"""
loader.py

Load cycle for the heat map:

  1. get the region list (GeoJSON from a path/URL, or the built-in US list)
  2. ask the forecast source for 7 days per region
  3. hand the whole lot to the controller in one go

Failures are logged here and re-raised. Nothing is retried; whoever called
us decides what to do (the app just shows "could not load data").
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

import httpx

from dashboard import DashboardController
from dashboard_config import get_forecast_settings, get_geo_settings
from errors import GeoDataError
from forecast_sources import ForecastSource, build_source
from forecast_store import ForecastDay
from regions import US_REGIONS, Region, regions_from_geojson

logger = logging.getLogger(__name__)


def _is_url(source: str) -> bool:
    return source.startswith("http://") or source.startswith("https://")


async def fetch_geojson(source: str, timeout: float = 10) -> Dict[str, Any]:
    """
    Read a GeoJSON document from a local path or an http(s) URL.
    """
    if _is_url(source):
        try:
            async with httpx.AsyncClient(timeout=timeout) as client:
                resp = await client.get(source)
        except httpx.HTTPError as e:
            raise GeoDataError(f"Geo data request failed for {source}: {e}") from e

        if resp.status_code != 200:
            raise GeoDataError(f"Geo data error for {source} ({resp.status_code})")
        try:
            return resp.json()
        except ValueError as e:
            raise GeoDataError(f"Geo data from {source} is not JSON") from e

    path = Path(source)
    try:
        with path.open("r", encoding="utf-8") as f:
            return json.load(f)
    except (OSError, ValueError) as e:
        raise GeoDataError(f"Could not read geo data from {path}: {e}") from e


async def load_regions(geo_settings: Dict[str, Any]) -> Tuple[List[Region], Optional[Dict[str, Any]]]:
    """
    Returns (regions, geojson). geojson is None when no geo source is set.
    """
    source = str(geo_settings.get("source") or "").strip()
    if not source:
        return list(US_REGIONS), None

    geojson = await fetch_geojson(source, timeout=float(geo_settings.get("timeout_seconds", 10)))
    return regions_from_geojson(geojson), geojson


def build_forecasts(regions: List[Region], source: ForecastSource) -> Dict[str, List[ForecastDay]]:
    return {r["code"]: source.forecast_for(r["code"]) for r in regions}


async def load_dashboard_data(
    controller: DashboardController,
    cfg: Dict[str, Any],
    source: Optional[ForecastSource] = None,
) -> int:
    """
    Run one full load cycle into `controller`.

    `source` overrides the forecast source from config (tests use this).
    Returns the number of regions loaded.
    """
    try:
        regions, geojson = await load_regions(get_geo_settings(cfg))
        if source is None:
            source = build_source(get_forecast_settings(cfg))
        forecasts = build_forecasts(regions, source)
        count = controller.load(regions, forecasts, geojson=geojson)
    except Exception:
        logger.exception("Could not load heat map data")
        raise

    logger.info("Loaded forecasts for %d regions (%s)", count, type(source).__name__)
    return count
