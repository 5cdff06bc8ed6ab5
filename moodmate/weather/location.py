#!/usr/bin/env python3
"""
location.py
-----------------
Device position lookup with timeout, caching and a default fallback.

LocationResolver wraps a position callable the way a browser wraps its
geolocation API: lookups are bounded by a timeout, a recent position is
reused for max_age seconds, and any failure (denied, timed out,
unsupported) yields the default coordinates instead of an error.

Usage:
    from moodmate.weather.location import LocationResolver, fixed_position

    resolver = LocationResolver(locate=fixed_position(45.50, -73.57))
    coords = resolver.resolve()
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import time
import threading
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional

# --- Local imports ---
from moodmate.core.logging_manager import MoodMateLogger, safe_logger


@dataclass(frozen=True)
class Coordinates:
    """Latitude/longitude pair in decimal degrees."""

    latitude: float
    longitude: float


# New York City
DEFAULT_COORDINATES = Coordinates(latitude=40.7128, longitude=-74.006)

Locator = Callable[[float], Coordinates]


def fixed_position(latitude: float, longitude: float) -> Locator:
    """Locator that always reports the given position."""
    position = Coordinates(latitude=latitude, longitude=longitude)

    def locate(timeout: float) -> Coordinates:
        return position

    return locate


class LocationResolver:
    """
    Resolves the current position, never failing outwardly.

    Attributes:
        locate: Position callable taking a timeout in seconds; None when
            no position source is available
        timeout: Seconds to wait for a position
        max_age: Seconds a resolved position is reused
        default: Coordinates used when no position can be obtained
    """

    def __init__(
        self,
        locate: Optional[Locator] = None,
        timeout: float = 5.0,
        max_age: float = 60.0,
        default: Coordinates = DEFAULT_COORDINATES,
        clock: Callable[[], float] = time.monotonic,
        logger: Optional[MoodMateLogger] = None,
    ) -> None:
        self.locate = locate
        self.timeout = timeout
        self.max_age = max_age
        self.default = default
        self.clock = clock
        self.logger = logger
        self._cached: Optional[Coordinates] = None
        self._cached_at: float = 0.0

    def resolve(self) -> Coordinates:
        """
        Get the current position.

        Returns:
            A cached position younger than max_age, a fresh position, or
            the default coordinates if the lookup is unsupported or fails
        """
        log = safe_logger(self.logger)

        if self.locate is None:
            log.log_info("Geolocation is not supported, using default location")
            return self.default

        now = self.clock()
        if self._cached is not None and now - self._cached_at <= self.max_age:
            return self._cached

        outcome: Dict[str, Any] = {}

        def run() -> None:
            try:
                outcome["position"] = self.locate(self.timeout)
            except Exception as e:  # denial or device error from the locator
                outcome["error"] = e

        # Daemon thread: a locator that ignores its timeout cannot hold up exit
        worker = threading.Thread(target=run, name="moodmate-locate", daemon=True)
        worker.start()
        worker.join(self.timeout)

        if worker.is_alive():
            log.log_warning("Geolocation timed out", {"timeout": self.timeout})
            return self.default
        if "error" in outcome:
            log.log_warning("Geolocation error", {"error": repr(outcome["error"])})
            return self.default

        position = outcome["position"]
        self._cached = position
        self._cached_at = now
        return position
