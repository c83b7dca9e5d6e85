"""Pydantic v2 configuration schema with strict validation."""

from enum import StrEnum

from pydantic import BaseModel, Field, SecretStr

from skycast.config.defaults import (
    DEFAULT_CONTENT_TYPE,
    DEFAULT_MAX_DAYS,
    DEFAULT_TIMEOUT_SECONDS,
    DEFAULT_UNIT_GROUP,
    TIMELINE_BASE_URL,
)


class LogLevel(StrEnum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


class ProviderConfig(BaseModel):
    model_config = {"extra": "forbid"}

    base_url: str = TIMELINE_BASE_URL
    api_key: SecretStr = SecretStr("")
    unit_group: str = DEFAULT_UNIT_GROUP
    content_type: str = DEFAULT_CONTENT_TYPE
    timeout_seconds: float = Field(default=DEFAULT_TIMEOUT_SECONDS, gt=0.0)


class ForecastConfig(BaseModel):
    model_config = {"extra": "forbid"}

    max_days: int = Field(default=DEFAULT_MAX_DAYS, ge=1, le=15)


class LoggingConfig(BaseModel):
    model_config = {"extra": "forbid"}

    level: LogLevel = LogLevel.WARNING


class AppConfig(BaseModel):
    model_config = {"extra": "forbid"}

    provider: ProviderConfig = ProviderConfig()
    forecast: ForecastConfig = ForecastConfig()
    logging: LoggingConfig = LoggingConfig()
