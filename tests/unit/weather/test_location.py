"""
test_location.py
----------------
Unit tests for LocationResolver.
"""
import threading
import pytest

from moodmate.weather.location import (
    DEFAULT_COORDINATES,
    Coordinates,
    LocationResolver,
    fixed_position,
)

MONTREAL = Coordinates(45.5, -73.6)


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self):
        self.now = 100.0

    def __call__(self):
        return self.now


@pytest.fixture
def clock():
    return FakeClock()


def test_no_locator_uses_default():
    assert LocationResolver().resolve() == DEFAULT_COORDINATES


def test_fixed_position():
    assert LocationResolver(locate=fixed_position(45.5, -73.6)).resolve() == MONTREAL


def test_locator_error_uses_default():
    def denied(timeout):
        raise PermissionError("User denied geolocation")

    assert LocationResolver(locate=denied).resolve() == DEFAULT_COORDINATES


def test_slow_locator_times_out():
    release = threading.Event()

    def slow(timeout):
        release.wait(5)
        return MONTREAL

    try:
        resolver = LocationResolver(locate=slow, timeout=0.05)
        assert resolver.resolve() == DEFAULT_COORDINATES
    finally:
        release.set()


def test_timed_out_lookup_does_not_block_exit():
    release = threading.Event()

    def stuck(timeout):
        release.wait(5)
        return MONTREAL

    try:
        LocationResolver(locate=stuck, timeout=0.05).resolve()
        lookups = [t for t in threading.enumerate() if t.name == "moodmate-locate"]
        assert lookups
        assert all(t.daemon for t in lookups)
    finally:
        release.set()


def test_position_is_cached_within_max_age(clock):
    calls = []

    def locate(timeout):
        calls.append(timeout)
        return MONTREAL

    resolver = LocationResolver(locate=locate, max_age=60, clock=clock)
    resolver.resolve()
    clock.now += 30
    resolver.resolve()
    assert len(calls) == 1

    clock.now += 31
    resolver.resolve()
    assert len(calls) == 2


def test_failure_is_not_cached(clock):
    results = [RuntimeError("unavailable"), MONTREAL]

    def flaky(timeout):
        result = results.pop(0)
        if isinstance(result, Exception):
            raise result
        return result

    resolver = LocationResolver(locate=flaky, clock=clock)
    assert resolver.resolve() == DEFAULT_COORDINATES
    assert resolver.resolve() == MONTREAL
