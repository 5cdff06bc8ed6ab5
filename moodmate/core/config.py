#!/usr/bin/env python3
"""
config.py
--------------------
Runtime configuration for the MoodMate journal.

Configuration is resolved in three layers, later layers winning:
    1. Defaults (paths.py and the dataclass defaults below)
    2. Optional YAML file (config.yaml at the project root, or --config)
    3. Environment variables (OPENWEATHER_API_KEY, MOODMATE_DATA_DIR)

Example config.yaml:
    data_dir: ~/moodmate
    export_dir: ~/Downloads
    note_max_length: 200
    weather:
      api_key: 0123456789abcdef
      units: metric
      timeout: 5
    location:
      latitude: 45.5017
      longitude: -73.5673

Usage:
    from moodmate.core.config import load_config

    config = load_config()
    store = JournalStore(LocalStorage(config.storage_dir))
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

# --- Third party imports ---
import yaml

# --- Local imports ---
from .exceptions import ConfigError
from .paths import CONFIG_PATH, DATA_DIR, EXPORT_DIR_NAME, STORAGE_DIR_NAME

API_KEY_ENV = "OPENWEATHER_API_KEY"
DATA_DIR_ENV = "MOODMATE_DATA_DIR"

DEFAULT_WEATHER_URL = "https://api.openweathermap.org/data/2.5/weather"


@dataclass
class WeatherSettings:
    """Weather API settings."""

    api_key: Optional[str] = None
    base_url: str = DEFAULT_WEATHER_URL
    units: str = "metric"
    timeout: float = 5.0


@dataclass
class LocationSettings:
    """
    Location lookup settings.

    When latitude and longitude are both set they are used as the device
    position; otherwise the location resolver falls back to its default.
    """

    latitude: Optional[float] = None
    longitude: Optional[float] = None
    timeout: float = 5.0
    max_age: float = 60.0

    @property
    def has_fixed_position(self) -> bool:
        return self.latitude is not None and self.longitude is not None


@dataclass
class MoodMateConfig:
    """
    Resolved configuration.

    Attributes:
        data_dir: Root of user data
        export_dir: Directory receiving exported journals; None means
            <data_dir>/exports
        note_max_length: Maximum note length in characters
        weather: Weather API settings
        location: Location lookup settings
    """

    data_dir: Path = DATA_DIR
    export_dir: Optional[Path] = None
    note_max_length: int = 200
    weather: WeatherSettings = field(default_factory=WeatherSettings)
    location: LocationSettings = field(default_factory=LocationSettings)

    @property
    def storage_dir(self) -> Path:
        """Directory holding the local storage documents."""
        return self.data_dir / STORAGE_DIR_NAME

    @property
    def exports_dir(self) -> Path:
        """Directory exports are written to."""
        if self.export_dir is not None:
            return self.export_dir
        return self.data_dir / EXPORT_DIR_NAME


def load_config(
    path: Optional[Path] = None, env: Optional[Mapping[str, str]] = None
) -> MoodMateConfig:
    """
    Load configuration from YAML and environment.

    Args:
        path: Config file path (default: CONFIG_PATH). A missing default
            file is fine; a missing explicit file is an error.
        env: Environment mapping (default: os.environ)

    Returns:
        Resolved MoodMateConfig

    Raises:
        ConfigError: If the file is unreadable, not valid YAML, or holds
            values of the wrong type
    """
    env = os.environ if env is None else env
    config_path = Path(path) if path is not None else CONFIG_PATH

    data: Dict[str, Any] = {}
    if config_path.exists():
        data = _read_yaml(config_path)
    elif path is not None:
        raise ConfigError(f"Config file not found: {config_path}")

    config = _from_dict(data)

    if env.get(API_KEY_ENV):
        config.weather.api_key = env[API_KEY_ENV]
    if env.get(DATA_DIR_ENV):
        config.data_dir = Path(env[DATA_DIR_ENV]).expanduser()

    return config


def _read_yaml(path: Path) -> Dict[str, Any]:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Cannot read config file {path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Config file {path} must contain a mapping")
    return data


def _from_dict(data: Dict[str, Any]) -> MoodMateConfig:
    config = MoodMateConfig()

    if data.get("data_dir") is not None:
        config.data_dir = Path(str(data["data_dir"])).expanduser()
    if data.get("export_dir") is not None:
        config.export_dir = Path(str(data["export_dir"])).expanduser()
    if "note_max_length" in data:
        config.note_max_length = _positive_int(data["note_max_length"], "note_max_length")

    weather = _section(data, "weather")
    if weather.get("api_key") is not None:
        config.weather.api_key = str(weather["api_key"])
    if weather.get("base_url") is not None:
        config.weather.base_url = str(weather["base_url"])
    if weather.get("units") is not None:
        config.weather.units = str(weather["units"])
    if "timeout" in weather:
        config.weather.timeout = _positive_number(weather["timeout"], "weather.timeout")

    location = _section(data, "location")
    if location.get("latitude") is not None:
        config.location.latitude = _number(location["latitude"], "location.latitude")
    if location.get("longitude") is not None:
        config.location.longitude = _number(location["longitude"], "location.longitude")
    if "timeout" in location:
        config.location.timeout = _positive_number(location["timeout"], "location.timeout")
    if "max_age" in location:
        config.location.max_age = _number(location["max_age"], "location.max_age")

    return config


def _section(data: Dict[str, Any], name: str) -> Dict[str, Any]:
    section = data.get(name) or {}
    if not isinstance(section, dict):
        raise ConfigError(f"'{name}' must be a mapping")
    return section


def _number(value: Any, name: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ConfigError(f"{name} must be a number, got {value!r}")
    return float(value)


def _positive_number(value: Any, name: str) -> float:
    number = _number(value, name)
    if number <= 0:
        raise ConfigError(f"{name} must be positive, got {value!r}")
    return number


def _positive_int(value: Any, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise ConfigError(f"{name} must be a positive integer, got {value!r}")
    return value
