"""Tests for the JSON dashboard config."""

import json
import logging
from pathlib import Path

import dashboard_config
from dashboard_config import (
    configure_logging,
    get_activity_label,
    get_forecast_settings,
    get_geo_settings,
    load_config,
    save_config,
)


def test_first_load_writes_defaults(tmp_config: Path):
    assert not tmp_config.exists()
    cfg = load_config()
    assert tmp_config.exists()
    assert cfg["forecast"]["source"] == "random"
    assert json.loads(tmp_config.read_text(encoding="utf-8")) == cfg


def test_save_round_trip(tmp_config: Path):
    cfg = load_config()
    cfg["forecast"]["seed"] = 99
    save_config(cfg)
    assert load_config()["forecast"]["seed"] == 99


def test_sections_fall_back_to_defaults():
    cfg = {"forecast": {"seed": 5}, "geo": "not a dict"}
    forecast = get_forecast_settings(cfg)
    assert forecast["seed"] == 5
    assert forecast["source"] == "random"
    assert get_geo_settings(cfg)["source"] == ""
    assert get_activity_label({}) == "Golf"
    assert get_activity_label({"activity": {"label": "Tennis"}}) == "Tennis"


def test_defaults_not_mutated_by_callers():
    settings = get_forecast_settings({})
    settings["source"] = "fixed"
    assert dashboard_config._DEFAULT_CONFIG["forecast"]["source"] == "random"


def test_configure_logging_level(monkeypatch):
    calls = {}
    monkeypatch.setattr(logging, "basicConfig", lambda **kw: calls.update(kw))
    configure_logging({"logging": {"level": "debug"}})
    assert calls["level"] == logging.DEBUG
    assert calls["format"] == dashboard_config.LOG_FORMAT

    configure_logging({"logging": {"level": "nonsense"}})
    assert calls["level"] == logging.INFO
