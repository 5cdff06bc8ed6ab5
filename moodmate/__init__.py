"""
MoodMate Journal Package
========================

A personal mood journal that records a daily mood, a short note and the
weather, then summarizes how mood and weather relate over time.

Main Components:
    - journal: Entry store, time-range filters, analytics and export
    - weather: OpenWeatherMap client and location resolution
    - storage: Directory-backed key/value document storage
    - models: Mood enums and entry dataclasses
    - settings: Theme preference
    - core: Logging, validation, configuration, paths, exceptions
    - cli: The `moodmate` command-line interface

Example Usage:
    >>> from moodmate.core.config import load_config
    >>> from moodmate.journal import JournalStore, mood_distribution
    >>> from moodmate.storage import LocalStorage
    >>> store = JournalStore(LocalStorage(load_config().storage_dir))
    >>> stats = mood_distribution(store.list())
"""

__version__ = "1.0.0"
