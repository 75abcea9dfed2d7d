"""
Configuration Loading Utilities.
"""

from __future__ import annotations

import copy
import os
from pathlib import Path
from typing import Any

import yaml

# Environment variable → (section, key)
ENV_OVERRIDES: dict[str, tuple[str, str]] = {
    "DAYBOARD_BACKEND_MODE": ("backend", "mode"),
    "DAYBOARD_BACKEND_URL": ("backend", "url"),
    "DAYBOARD_BACKEND_KEY": ("backend", "anon_key"),
    "DAYBOARD_WEATHER_KEY": ("weather", "api_key"),
    "DAYBOARD_PLACES_KEY": ("places", "api_key"),
    "DAYBOARD_STORAGE_PATH": ("storage", "path"),
    "DAYBOARD_TIMEZONE": ("calendar", "timezone"),
}


def _convert_numeric_strings(obj: Any) -> Any:
    """
    Recursively convert numeric strings to floats/ints.

    Coordinates and ports written as quoted strings in YAML come back as
    numbers. Strings that merely contain digits (keys, URLs) are left alone.
    """
    if isinstance(obj, dict):
        return {k: _convert_numeric_strings(v) for k, v in obj.items()}
    elif isinstance(obj, list):
        return [_convert_numeric_strings(item) for item in obj]
    elif isinstance(obj, str):
        # Try to convert to number if it looks numeric
        try:
            if "." in obj or "e" in obj.lower():
                return float(obj)
            return int(obj)
        except ValueError:
            return obj
    return obj


def get_default_config() -> dict[str, Any]:
    """
    Get default configuration dictionary.

    Returns:
        Default configuration
    """
    return {
        "backend": {
            "mode": "memory",
            "url": "",
            "anon_key": "",
            "timeout": 30,
        },
        "calendar": {
            "timezone": "Asia/Seoul",
        },
        "auth": {
            "email_domain": "todoapp.com",
        },
        "weather": {
            "api_key": "",
            "base_url": "https://api.openweathermap.org/data/2.5/weather",
            "units": "metric",
            "lang": "kr",
            "timeout": 10,
            "default_location": {"name": "전주", "latitude": 35.8242, "longitude": 127.1480},
        },
        "places": {
            "api_key": "",
            "base_url": "https://dapi.kakao.com/v2/local/search/keyword.json",
            "timeout": 10,
        },
        "storage": {
            "path": "data/local_storage.json",
        },
        "server": {
            "host": "127.0.0.1",
            "port": 8000,
            "cors_origins": ["http://localhost:5173", "http://localhost:3000"],
        },
        "logging": {
            "level": "INFO",
            "file": None,
        },
    }


def _merge(defaults: dict[str, Any], loaded: dict[str, Any]) -> dict[str, Any]:
    merged = copy.deepcopy(defaults)
    for key, value in loaded.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def apply_env_overrides(config: dict[str, Any], environ: dict[str, str] | None = None) -> dict[str, Any]:
    """Overlay secrets and deployment settings supplied through the environment."""
    env = os.environ if environ is None else environ
    for var, (section, key) in ENV_OVERRIDES.items():
        if env.get(var):
            config.setdefault(section, {})[key] = env[var]
    if env.get("CORS_ORIGINS"):
        config.setdefault("server", {})["cors_origins"] = env["CORS_ORIGINS"].split(",")
    return config


def load_config(config_path: str | Path, environ: dict[str, str] | None = None) -> dict[str, Any]:
    """
    Load configuration from YAML file.

    Args:
        config_path: Path to configuration file
        environ: Environment to read overrides from (defaults to ``os.environ``)

    Returns:
        Configuration dictionary; sections missing from the file are filled
        from :func:`get_default_config`

    Raises:
        FileNotFoundError: If config file doesn't exist
        yaml.YAMLError: If config file is invalid
    """
    config_path = Path(config_path)

    if not config_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    with open(config_path, encoding="utf-8") as f:
        loaded = yaml.safe_load(f) or {}

    # Only numeric settings are converted; keys and URLs must stay strings.
    if isinstance(loaded.get("server"), dict):
        loaded["server"] = _convert_numeric_strings(loaded["server"])
    weather = loaded.get("weather")
    if isinstance(weather, dict) and isinstance(weather.get("default_location"), dict):
        location = _convert_numeric_strings(weather["default_location"])
        location["name"] = str(weather["default_location"].get("name", ""))
        weather["default_location"] = location

    config = _merge(get_default_config(), loaded)
    return apply_env_overrides(config, environ)
