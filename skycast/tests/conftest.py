"""Shared test fixtures."""

import json
from datetime import date, timedelta
from pathlib import Path

import pytest
import yaml

from skycast.config.defaults import API_KEY_ENV_VAR
from skycast.models.forecast import ForecastDay

FIXTURE_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture(autouse=True)
def _no_env_api_key(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a developer's exported API key out of the tests."""
    monkeypatch.delenv(API_KEY_ENV_VAR, raising=False)


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the test fixtures directory."""
    return FIXTURE_DIR


@pytest.fixture
def london_timeline() -> dict:
    with open(FIXTURE_DIR / "timeline_london.json") as f:
        return json.load(f)


@pytest.fixture
def config_yaml_path(tmp_path: Path) -> Path:
    """Write a minimal valid config YAML and return its path."""
    data = {
        "provider": {
            "base_url": "https://test-vc.example.com/timeline",
            "api_key": "test-key",
        },
        "forecast": {"max_days": 8},
    }
    path = tmp_path / "test_config.yaml"
    with open(path, "w") as f:
        yaml.dump(data, f)
    return path


@pytest.fixture
def make_days():
    """Factory for consecutive synthetic days starting 2024-03-15 (a Friday)."""

    def _make(n: int, start: date = date(2024, 3, 15)) -> tuple[ForecastDay, ...]:
        return tuple(
            ForecastDay(
                date=start + timedelta(days=i),
                condition_code="clear-day",
                temp_max=10.0 + i,
                temp_min=2.0 + i,
                feels_like=9.0 + i,
                humidity=60.0,
                wind_speed=12.0,
                description=f"Day {i}",
            )
            for i in range(n)
        )

    return _make
