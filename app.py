import os
import logging
import secrets
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Dict, Any, List

from fastapi import FastAPI, HTTPException, Request, Depends, status
from fastapi.responses import HTMLResponse
from fastapi.security import HTTPBasic, HTTPBasicCredentials
from fastapi.templating import Jinja2Templates
from pydantic import BaseModel, Field

from classification import legend
from dashboard import DashboardController
from dashboard_config import (
    configure_logging,
    get_activity_label,
    load_config,
    save_config,
)
from errors import DashboardError, ForecastShapeError, GeoDataError, InvalidIndex, UnknownPreference
from loader import load_dashboard_data
from preferences import list_preferences
from regions import is_valid_region_code
from summary_text import summarise_best, summarise_region

logger = logging.getLogger(__name__)

security = HTTPBasic()


def verify_admin(credentials: HTTPBasicCredentials = Depends(security)):
    # Username doesn’t matter for now — we only check the password.
    # No ADMIN_PASS set means nobody gets in.
    correct_password = os.getenv("ADMIN_PASS", "")

    is_correct_password = bool(correct_password) and secrets.compare_digest(
        credentials.password.encode("utf-8"), correct_password.encode("utf-8")
    )

    if not is_correct_password:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Incorrect password",
            headers={"WWW-Authenticate": "Basic"},
        )

    return "admin"


# One controller per process: one store, one selection.
controller = DashboardController()


@asynccontextmanager
async def lifespan(app: FastAPI):
    cfg = load_config()
    configure_logging(cfg)
    try:
        await load_dashboard_data(controller, cfg)
    except Exception:
        # Loader already logged the traceback. The page shows "could not load data".
        logger.warning("Starting without forecast data; POST /api/reload to retry")
    yield


app = FastAPI(title="Golf Heat Map", lifespan=lifespan)

templates = Jinja2Templates(directory=str(Path(__file__).parent / "templates"))


# ------------- Request models -------------


class DaySelection(BaseModel):
    day: int = Field(..., description="0 = today, 1 = tomorrow, ... 6")


class PreferenceSelection(BaseModel):
    preference: str = Field(..., description="One of: cold, cool, ideal, warm, hot")


class ForecastDayIn(BaseModel):
    highTemperature: int = Field(..., strict=True)
    lowTemperature: int = Field(..., strict=True)
    humidity: int = Field(..., strict=True, ge=0, le=100)


# ------------- Helpers -------------


def _require_data() -> None:
    if not controller.has_data:
        raise HTTPException(
            status_code=503,
            detail="Could not load data – no forecast loaded yet",
        )


def _loaded_at() -> Any:
    loaded_at = controller.store.loaded_at
    return loaded_at.isoformat() if loaded_at else None


# ------------- Web UI ------------------


@app.get("/", response_class=HTMLResponse)
async def home(request: Request):
    cfg = load_config()
    response = templates.TemplateResponse(
        request,
        "index.html",
        {
            "activity": get_activity_label(cfg),
            "preferences": list_preferences(),
            "legend": legend(),
            "selection": controller.selection.as_dict(),
            "has_data": controller.has_data,
            "has_geo": controller.geojson is not None,
        },
    )
    response.headers["Cache-Control"] = "no-store, no-cache, must-revalidate, max-age=0"
    return response


@app.get("/health")
async def health_check():
    return {"status": "ok", "data_loaded": controller.has_data, "loaded_at": _loaded_at()}


# ------------- Catalog / legend -------------


@app.get("/api/preferences")
async def preferences():
    return {"preferences": list_preferences()}


@app.get("/api/legend")
async def legend_endpoint():
    return {"legend": legend()}


# ------------- Selection -------------


@app.get("/api/selection")
async def get_selection():
    return controller.selection.as_dict()


@app.post("/api/selection/day")
async def select_day(payload: DaySelection):
    try:
        changed = controller.select_day(payload.day)
    except InvalidIndex as e:
        raise HTTPException(status_code=400, detail=str(e))
    return {"changed": changed, "selection": controller.selection.as_dict()}


@app.post("/api/selection/preference")
async def select_preference(payload: PreferenceSelection):
    try:
        changed = controller.select_preference(payload.preference)
    except UnknownPreference as e:
        raise HTTPException(status_code=400, detail=str(e))
    return {"changed": changed, "selection": controller.selection.as_dict()}


# ------------- Map data -------------


@app.get("/api/map")
async def map_data():
    """
    Score + category for every region under the current selection.
    This is what the map colours its shapes from.
    """
    _require_data()
    return {
        "selection": controller.selection.as_dict(),
        "loaded_at": _loaded_at(),
        "regions": controller.map_summaries(),
    }


@app.get("/api/regions/{code}")
async def region_detail(code: str, preference: str = ""):
    """
    7-day breakdown for one region, plus a plain-text blurb for the
    currently selected day.
    """
    _require_data()
    if controller.region_name(code) is None:
        raise HTTPException(status_code=404, detail="Unknown region code")

    try:
        week = controller.region_week(code, preference or None)
    except UnknownPreference as e:
        raise HTTPException(status_code=400, detail=str(e))

    current = week["days"][controller.selection.selected_day]
    week["summary_text"] = summarise_region(current)
    return week


@app.get("/api/best")
async def best_regions(limit: int = 5):
    if limit < 1 or limit > 60:
        raise HTTPException(status_code=400, detail="limit must be between 1 and 60")

    _require_data()
    best = controller.best_regions(limit)
    return {
        "selection": controller.selection.as_dict(),
        "regions": best,
        "summary": summarise_best(best),
    }


@app.get("/api/geo")
async def geo_data():
    """Pass-through of the loaded GeoJSON so the page can draw shapes."""
    if controller.geojson is None:
        raise HTTPException(status_code=404, detail="No geo data configured")
    return controller.geojson


# ------------- Loading -------------


@app.post("/api/reload")
async def reload_data():
    """
    Re-run the configured load cycle (geo + forecast source).
    The old data stays in place if this fails.
    """
    try:
        count = await load_dashboard_data(controller, load_config())
    except GeoDataError as e:
        raise HTTPException(status_code=502, detail=str(e))
    except (DashboardError, ValueError) as e:
        raise HTTPException(status_code=500, detail=f"Failed to load data: {e}")

    return {"status": "ok", "regions": count, "loaded_at": _loaded_at()}


@app.post("/api/forecast")
async def push_forecast(
    payload: Dict[str, List[ForecastDayIn]],
    user: str = Depends(verify_admin),
):
    """
    Bulk-load forecasts from an external feed (admin only):
        { "TX": [ {highTemperature, lowTemperature, humidity} x 7 ], ... }

    Every region already on the map needs a forecast; the push replaces the
    whole dataset. Regions not in the current region list are added with
    their code as name. Codes must be 2-3 capital letters.
    """
    bad_codes = [code for code in payload if not is_valid_region_code(code)]
    if bad_codes:
        raise HTTPException(
            status_code=400,
            detail=f"Invalid region codes (expected 2-3 capital letters): {', '.join(repr(c) for c in bad_codes)}",
        )

    forecasts = {
        code: [d.model_dump() for d in days] for code, days in payload.items()
    }

    known = {r["code"] for r in controller.regions}
    regions = list(controller.regions) + [
        {"code": code, "name": code} for code in forecasts if code not in known
    ]

    try:
        count = controller.load(regions, forecasts, geojson=controller.geojson)
    except ForecastShapeError as e:
        raise HTTPException(status_code=400, detail=str(e))

    logger.info("Forecast pushed for %d regions", count)
    return {"status": "ok", "regions": count, "loaded_at": _loaded_at()}


# ------------------- Admin config API (JSON) -------------------


@app.get("/api/admin/config")
async def get_admin_config(user: str = Depends(verify_admin)):
    """
    Return the current dashboard config JSON.
    """
    try:
        cfg = load_config()
    except Exception as e:
        raise HTTPException(
            status_code=500,
            detail=f"Failed to load config: {e}",
        )
    return cfg


@app.post("/api/admin/config")
async def update_admin_config(request: Request, user: str = Depends(verify_admin)):
    """
    Replace dashboard.json with the posted JSON body.
    Takes effect on the next /api/reload.
    """
    try:
        new_cfg = await request.json()
    except Exception:
        raise HTTPException(
            status_code=400,
            detail="Invalid JSON payload — could not parse",
        )

    if not isinstance(new_cfg, dict):
        raise HTTPException(
            status_code=400,
            detail="Config must be a JSON object",
        )

    forecast = new_cfg.get("forecast")
    if not isinstance(forecast, dict):
        raise HTTPException(
            status_code=400,
            detail="Config must contain a 'forecast' object",
        )

    if forecast.get("source", "random") not in ("random", "fixed"):
        raise HTTPException(
            status_code=400,
            detail="forecast.source must be 'random' or 'fixed'",
        )

    try:
        save_config(new_cfg)
    except Exception as e:
        raise HTTPException(
            status_code=500,
            detail=f"Failed to save config: {e}",
        )

    return {"status": "ok", "saved": True}
