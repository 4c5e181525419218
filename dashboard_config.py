# dashboard_config.py
import json
import logging
import os
from pathlib import Path
from typing import Dict, Any
from threading import Lock

_CONFIG_PATH = Path(os.getenv("HEATMAP_CONFIG", "config/dashboard.json"))
_CONFIG_LOCK = Lock()

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

# Reasonable defaults so the map has something to show the first time
_DEFAULT_CONFIG: Dict[str, Any] = {
    "activity": {
        "label": "Golf",
    },
    "geo": {
        # Path or URL to a GeoJSON FeatureCollection with properties.state / .name.
        # Empty = use the built-in US state list (no shapes on the map).
        "source": "",
        "timeout_seconds": 10,
    },
    "forecast": {
        "source": "random",
        "seed": None,
        "fixed_day": {"highTemperature": 70, "lowTemperature": 50, "humidity": 50},
    },
    "logging": {
        "level": "INFO",
    },
}


def _ensure_file_exists() -> None:
    if not _CONFIG_PATH.parent.exists():
        _CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
    if not _CONFIG_PATH.exists():
        with _CONFIG_PATH.open("w", encoding="utf-8") as f:
            json.dump(_DEFAULT_CONFIG, f, indent=2)


def load_config() -> Dict[str, Any]:
    with _CONFIG_LOCK:
        _ensure_file_exists()
        with _CONFIG_PATH.open("r", encoding="utf-8") as f:
            return json.load(f)


def save_config(cfg: Dict[str, Any]) -> None:
    with _CONFIG_LOCK:
        _ensure_file_exists()
        with _CONFIG_PATH.open("w", encoding="utf-8") as f:
            json.dump(cfg, f, indent=2)


def _section(cfg: Dict[str, Any], name: str) -> Dict[str, Any]:
    """Config block merged over its defaults, so missing keys never bite."""
    merged = dict(_DEFAULT_CONFIG.get(name, {}))
    block = cfg.get(name)
    if isinstance(block, dict):
        merged.update(block)
    return merged


def get_geo_settings(cfg: Dict[str, Any]) -> Dict[str, Any]:
    return _section(cfg, "geo")


def get_forecast_settings(cfg: Dict[str, Any]) -> Dict[str, Any]:
    return _section(cfg, "forecast")


def get_activity_label(cfg: Dict[str, Any]) -> str:
    return str(_section(cfg, "activity").get("label") or "Golf")


def configure_logging(cfg: Dict[str, Any]) -> None:
    """Root logging setup, level from the 'logging' block (INFO by default)."""
    level_name = str(_section(cfg, "logging").get("level", "INFO")).upper()
    level = getattr(logging, level_name, logging.INFO)
    logging.basicConfig(level=level, format=LOG_FORMAT)
