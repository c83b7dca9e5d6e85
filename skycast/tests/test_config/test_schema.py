"""Tests for config schema validation."""

import pytest
from pydantic import ValidationError

from skycast.config.schema import AppConfig, ForecastConfig, ProviderConfig


class TestAppConfig:
    def test_defaults(self):
        config = AppConfig()
        assert config.provider.unit_group == "metric"
        assert config.provider.content_type == "json"
        assert config.forecast.max_days == 8

    def test_extra_fields_rejected(self):
        with pytest.raises(ValidationError, match="Extra inputs are not permitted"):
            AppConfig(unknown_field="bad")

    def test_nested_extra_fields_rejected(self):
        with pytest.raises(ValidationError, match="Extra inputs are not permitted"):
            ProviderConfig(api_key="k", bogus=True)

    def test_invalid_log_level(self):
        with pytest.raises(ValidationError):
            AppConfig(logging={"level": "LOUD"})


class TestProviderConfig:
    def test_api_key_masked_in_dump(self):
        config = ProviderConfig(api_key="super-secret")
        assert "super-secret" not in config.model_dump_json()
        assert config.api_key.get_secret_value() == "super-secret"

    def test_timeout_must_be_positive(self):
        with pytest.raises(ValidationError):
            ProviderConfig(timeout_seconds=0)


class TestForecastConfig:
    def test_max_days_bounds(self):
        with pytest.raises(ValidationError):
            ForecastConfig(max_days=0)
        with pytest.raises(ValidationError):
            ForecastConfig(max_days=16)
        assert ForecastConfig(max_days=15).max_days == 15
