#!/usr/bin/env python3
"""
client.py
-----------------
Current-weather lookups against the OpenWeatherMap API.

Two lookups with different failure contracts:

    current(): weather at the resolved device position. Never raises; any
        failure (no API key, network error, timeout, HTTP error, malformed
        payload) returns FALLBACK_WEATHER.
    by_city(name): weather for a named city. Raises WeatherUnavailable on
        any failure so the caller can tell the user the lookup failed.

Provider responses are normalized to Weather:
    temp      <- round(main.temp)
    condition <- weather[0].main
    icon      <- weather[0].icon
    location  <- name

Usage:
    from moodmate.weather.client import WeatherClient

    client = WeatherClient.from_config(config, logger=logger)
    weather = client.current()
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from typing import Any, Dict, Mapping, Optional

# --- Third party imports ---
import requests

# --- Local imports ---
from moodmate.core.config import DEFAULT_WEATHER_URL, MoodMateConfig
from moodmate.core.exceptions import WeatherUnavailable
from moodmate.core.logging_manager import MoodMateLogger, safe_logger
from moodmate.core.validators import DataValidator
from moodmate.models import Weather
from moodmate.utils.numbers import round_half_up

from .location import LocationResolver, fixed_position

FALLBACK_WEATHER = Weather(temp=22, condition="Clear", icon="01d", location="New York")


def get_fallback_weather() -> Weather:
    """Weather used when the current-location lookup fails."""
    return FALLBACK_WEATHER


def normalize_weather(payload: Mapping[str, Any]) -> Weather:
    """
    Map a provider response to Weather.

    Raises:
        ValueError: If the payload lacks the expected fields
    """
    try:
        condition = payload["weather"][0]
        return Weather(
            temp=round_half_up(float(payload["main"]["temp"])),
            condition=str(condition["main"]),
            icon=str(condition["icon"]),
            location=payload.get("name") or None,
        )
    except (KeyError, IndexError, TypeError, ValueError) as e:
        raise ValueError(f"Unexpected weather payload: {e!r}") from e


def condition_symbol(condition: str) -> str:
    """Terminal glyph for a weather condition."""
    lowered = condition.lower()
    if "clear" in lowered:
        return "☀"
    if "cloud" in lowered:
        return "☁"
    if "rain" in lowered:
        return "🌧"
    if "drizzle" in lowered:
        return "🌦"
    if "snow" in lowered:
        return "❄"
    if "thunder" in lowered:
        return "⛈"
    if "fog" in lowered or "mist" in lowered:
        return "🌫"
    return "☁"


class WeatherClient:
    """
    OpenWeatherMap client.

    Attributes:
        api_key: Provider API key (None disables live lookups)
        base_url: Current-weather endpoint
        units: Provider unit system ("metric" for °C)
        timeout: Request timeout in seconds
        resolver: LocationResolver for current()
        session: requests session used for HTTP calls
        logger: Optional logger
    """

    def __init__(
        self,
        api_key: Optional[str],
        base_url: str = DEFAULT_WEATHER_URL,
        units: str = "metric",
        timeout: float = 5.0,
        resolver: Optional[LocationResolver] = None,
        session: Optional[requests.Session] = None,
        logger: Optional[MoodMateLogger] = None,
    ) -> None:
        self.api_key = api_key
        self.base_url = base_url
        self.units = units
        self.timeout = timeout
        self.resolver = resolver or LocationResolver(logger=logger)
        self.session = session or requests.Session()
        self.logger = logger

    @classmethod
    def from_config(
        cls, config: MoodMateConfig, logger: Optional[MoodMateLogger] = None
    ) -> WeatherClient:
        """Build a client from resolved configuration."""
        location = config.location
        locate = (
            fixed_position(location.latitude, location.longitude)
            if location.has_fixed_position
            else None
        )
        resolver = LocationResolver(
            locate=locate,
            timeout=location.timeout,
            max_age=location.max_age,
            logger=logger,
        )
        return cls(
            api_key=config.weather.api_key,
            base_url=config.weather.base_url,
            units=config.weather.units,
            timeout=config.weather.timeout,
            resolver=resolver,
            logger=logger,
        )

    def _fetch(self, params: Dict[str, Any]) -> Weather:
        """
        Query the provider.

        Raises:
            requests.RequestException: On network errors, timeouts and
                non-success HTTP statuses
            ValueError: If no API key is configured or the payload is malformed
        """
        if not self.api_key:
            raise ValueError("No weather API key configured")

        query = dict(params, units=self.units, appid=self.api_key)
        response = self.session.get(self.base_url, params=query, timeout=self.timeout)
        response.raise_for_status()
        return normalize_weather(response.json())

    def current(self) -> Weather:
        """
        Weather at the current position.

        Returns:
            Live weather, or FALLBACK_WEATHER if anything goes wrong
        """
        log = safe_logger(self.logger)
        coords = self.resolver.resolve()

        try:
            weather = self._fetch({"lat": coords.latitude, "lon": coords.longitude})
        except requests.Timeout:
            log.log_warning("Weather API request timed out", {"timeout": self.timeout})
            return get_fallback_weather()
        except (requests.RequestException, ValueError) as e:
            log.log_warning("Weather API error, using fallback", {"error": str(e)})
            return get_fallback_weather()

        log.log_operation(
            "fetch_weather",
            {"lat": coords.latitude, "lon": coords.longitude, "condition": weather.condition},
        )
        return weather

    def by_city(self, city: str) -> Weather:
        """
        Weather for a named city.

        Args:
            city: City name as typed by the user

        Returns:
            Live weather for the city

        Raises:
            ValidationError: If the city name is blank
            WeatherUnavailable: If the lookup fails or the city is unknown
        """
        name = DataValidator.normalize_city(city)

        try:
            weather = self._fetch({"q": name})
        except requests.HTTPError as e:
            status = e.response.status_code if e.response is not None else None
            error = (
                WeatherUnavailable(f"City not found: '{name}'")
                if status == 404
                else WeatherUnavailable(f"Weather API error: {status}")
            )
            safe_logger(self.logger).log_error(error, {"city": name})
            raise error from e
        except (requests.RequestException, ValueError) as e:
            error = WeatherUnavailable(f"Could not fetch weather for '{name}': {e}")
            safe_logger(self.logger).log_error(error, {"city": name})
            raise error from e

        safe_logger(self.logger).log_operation(
            "fetch_city_weather", {"city": name, "condition": weather.condition}
        )
        return weather
