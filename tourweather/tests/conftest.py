"""Shared test fixtures."""

import json
from datetime import datetime
from pathlib import Path

import pytest
import yaml

from tourweather.config.schema import AppConfig
from tourweather.models.forecast import (
    DailySummary,
    DailyTemperature,
    HourlyForecastEntry,
)

FIXTURE_DIR = Path(__file__).parent / "fixtures"


def local_ts(year: int, month: int, day: int, hour: int) -> int:
    """Unix seconds for a wall-clock time in the process's local timezone."""
    return int(datetime(year, month, day, hour).timestamp())


def make_entry(
    ts: int,
    temp: float | None = 25.0,
    temp_min: float | None = None,
    temp_max: float | None = None,
    description: str = "clear sky",
) -> HourlyForecastEntry:
    return HourlyForecastEntry(
        timestamp=ts,
        temperature=temp,
        temperature_min=temp_min,
        temperature_max=temp_max,
        description=description,
    )


def make_day(ts: int = 1772337600, temp: float = 27.0, desc: str = "mây cụm") -> DailySummary:
    return DailySummary(
        representative_timestamp=ts,
        temperature=DailyTemperature(day=temp, min=temp - 2, max=temp + 2),
        description=desc,
    )


def raw_item(ts: int, temp: float, temp_min: float, temp_max: float, desc: str) -> dict:
    return {
        "dt": ts,
        "main": {"temp": temp, "temp_min": temp_min, "temp_max": temp_max},
        "weather": [{"description": desc}],
    }


@pytest.fixture
def default_config() -> AppConfig:
    return AppConfig()


@pytest.fixture
def config_yaml_path(tmp_path: Path) -> Path:
    """Write a minimal valid config YAML and return its path."""
    data = {
        "geocoder": {"user_agent": "test-agent/1.0"},
        "forecast": {"api_key": "test-key", "max_days": 5},
        "pipeline": {"default_language": "en"},
    }
    path = tmp_path / "test_config.yaml"
    with open(path, "w") as f:
        yaml.dump(data, f)
    return path


@pytest.fixture
def nominatim_da_nang() -> list[dict]:
    with open(FIXTURE_DIR / "nominatim_da_nang.json") as f:
        return json.load(f)


@pytest.fixture
def openweather_da_nang() -> dict:
    with open(FIXTURE_DIR / "openweather_forecast_da_nang.json") as f:
        return json.load(f)
