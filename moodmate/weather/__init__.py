"""
Weather lookups for journal entries.
"""
from .client import FALLBACK_WEATHER, WeatherClient, condition_symbol
from .location import DEFAULT_COORDINATES, Coordinates, LocationResolver

__all__ = [
    "FALLBACK_WEATHER",
    "WeatherClient",
    "condition_symbol",
    "DEFAULT_COORDINATES",
    "Coordinates",
    "LocationResolver",
]
