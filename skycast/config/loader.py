"""YAML config loader with environment override and dotted-key lookup."""

import os
from pathlib import Path
from typing import Any

import yaml

from skycast.config.defaults import API_KEY_ENV_VAR
from skycast.config.schema import AppConfig


def load_config(path: str | Path | None = None) -> AppConfig:
    """Load and validate config from a YAML file.

    A missing or empty file yields the defaults. When SKYCAST_API_KEY is
    set it replaces provider.api_key from the file.
    """
    raw: dict[str, Any] = {}
    if path is not None:
        path = Path(path)
        if path.exists():
            with open(path) as f:
                raw = yaml.safe_load(f) or {}

    env_key = os.environ.get(API_KEY_ENV_VAR)
    if env_key:
        provider = dict(raw.get("provider") or {})
        provider["api_key"] = env_key
        raw["provider"] = provider

    return AppConfig(**raw)


def get_config_value(config: AppConfig, dotted_key: str) -> Any:
    """Get a config value by dotted key path. E.g. 'forecast.max_days'."""
    obj: Any = config
    for part in dotted_key.split("."):
        if hasattr(obj, part):
            obj = getattr(obj, part)
        elif isinstance(obj, dict):
            obj = obj[part]
        else:
            raise KeyError(f"Config key not found: {dotted_key}")
    return obj
