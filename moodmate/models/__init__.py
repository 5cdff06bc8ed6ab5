"""
Data model for the MoodMate journal.

Exports the enums (Mood, TimeRange, ExportFormat, Theme) and the entry
dataclasses (Weather, JournalEntry) with their date helpers.
"""
from .enums import ExportFormat, Mood, Theme, TimeRange
from .journal import (
    MS_PER_DAY,
    JournalEntry,
    Weather,
    format_date_label,
    parse_date_label,
    to_timestamp_ms,
)

__all__ = [
    "ExportFormat",
    "Mood",
    "Theme",
    "TimeRange",
    "MS_PER_DAY",
    "JournalEntry",
    "Weather",
    "format_date_label",
    "parse_date_label",
    "to_timestamp_ms",
]
