"""
Journal data and analytics layer.

Components:
    - JournalStore: Create, list and clear persisted entries
    - filters: Time-range, mood and search filtering
    - analytics: Mood distribution and weather correlation
    - JournalExporter: CSV/JSON export
"""
from .analytics import (
    CorrelationStatus,
    MoodStat,
    WeatherCorrelation,
    correlation_status,
    mood_distribution,
    weather_correlation,
)
from .exporter import JournalExporter, render_csv, render_json
from .filters import (
    describe_time_range,
    entries_by_day,
    filter_entries,
    filter_entries_by_time_range,
)
from .store import JournalStore

__all__ = [
    "CorrelationStatus",
    "MoodStat",
    "WeatherCorrelation",
    "correlation_status",
    "mood_distribution",
    "weather_correlation",
    "JournalExporter",
    "render_csv",
    "render_json",
    "describe_time_range",
    "entries_by_day",
    "filter_entries",
    "filter_entries_by_time_range",
    "JournalStore",
]
