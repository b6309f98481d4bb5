"""Shared test fixtures."""

import json
from pathlib import Path

import pytest
import yaml

from weatherrun.config.schema import AppConfig
from weatherrun.ingest.forecast_parser import parse_forecast
from weatherrun.models.forecast import ForecastDocument

FIXTURE_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the test fixtures directory."""
    return FIXTURE_DIR


@pytest.fixture
def boston_raw() -> dict:
    """Raw Visual Crossing timeline: 2024-01-01 through 2024-01-07."""
    with open(FIXTURE_DIR / "visual_crossing_boston.json") as f:
        return json.load(f)


@pytest.fixture
def boston_forecast(boston_raw: dict) -> ForecastDocument:
    return parse_forecast(boston_raw)


@pytest.fixture
def default_config() -> AppConfig:
    return AppConfig()


@pytest.fixture
def config_yaml_path(tmp_path: Path) -> Path:
    """Write a minimal valid config YAML and return its path."""
    data = {
        "provider": {"api_key": "yaml-key"},
        "planner": {"window_days": 5},
        "defaults": {"hour": 6, "minute": 15},
    }
    path = tmp_path / "test_config.yaml"
    with open(path, "w") as f:
        yaml.dump(data, f)
    return path


@pytest.fixture(autouse=True)
def _no_env_api_key(monkeypatch):
    monkeypatch.delenv("WEATHERRUN_API_KEY", raising=False)
