"""
conftest.py
-----------
Shared pytest fixtures for MoodMate tests.

Provides fixtures for:
- Temporary storage directories
- Journal store instances
- Sample weather and entry factories
- Detaching MoodMate log handlers between tests
"""
import logging
import pytest
from pathlib import Path
from datetime import datetime, timedelta
from tempfile import TemporaryDirectory

from moodmate.core.logging_manager import ROOT_LOGGER
from moodmate.journal.store import JournalStore
from moodmate.models import JournalEntry, Mood, Weather, format_date_label, to_timestamp_ms
from moodmate.storage.local_storage import LocalStorage


# ----- Logging Fixtures -----

@pytest.fixture(autouse=True)
def detach_log_handlers():
    """Close the handlers a test (or CLI run) attached to the moodmate logger."""
    yield
    root = logging.getLogger(ROOT_LOGGER)
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()


# ----- Path Fixtures -----

@pytest.fixture
def tmp_dir():
    """Create a temporary directory for test file operations."""
    with TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def storage_dir(tmp_dir):
    """Directory backing LocalStorage."""
    return tmp_dir / "storage"


# ----- Storage Fixtures -----

@pytest.fixture
def storage(storage_dir):
    """Empty LocalStorage instance."""
    return LocalStorage(storage_dir)


@pytest.fixture
def store(storage):
    """JournalStore over an empty storage."""
    return JournalStore(storage)


# ----- Sample Data Fixtures -----

@pytest.fixture
def clear_weather():
    """Weather snapshot for a clear day."""
    return Weather(temp=22, condition="Clear", icon="01d", location="New York")


@pytest.fixture
def rain_weather():
    """Weather snapshot for a rainy day without a location."""
    return Weather(temp=14, condition="Rain", icon="10d")


@pytest.fixture
def now():
    """Fixed reference time for range filtering."""
    return datetime(2025, 4, 20, 12, 0, 0)


def create_entry(
    mood=Mood.HAPPY,
    condition="Clear",
    temp=20,
    when=None,
    note=None,
    location="Testville",
    entry_id=None,
):
    """Factory for JournalEntry objects with sensible defaults."""
    when = when or datetime(2025, 4, 20, 9, 0, 0)
    mood = Mood(mood)
    return JournalEntry(
        id=entry_id or f"{mood.value}-{condition}-{to_timestamp_ms(when)}",
        date=format_date_label(when),
        mood=mood,
        note=note if note is not None else f"Feeling {mood.value} today",
        weather=Weather(temp=temp, condition=condition, icon="01d", location=location),
        timestamp=to_timestamp_ms(when),
    )


@pytest.fixture
def make_entry():
    """Expose create_entry as a fixture."""
    return create_entry


@pytest.fixture
def days_ago(now):
    """Return a helper producing datetimes relative to `now`."""
    def _days_ago(days, **extra):
        return now - timedelta(days=days, **extra)
    return _days_ago
