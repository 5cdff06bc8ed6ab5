"""
Enumeration Types
------------------

Enum classes for the MoodMate data model.

Enums:
    - Mood: The closed set of moods an entry can record
    - TimeRange: Named windows used to filter entries
    - ExportFormat: Supported export file formats
    - Theme: Display theme preference

Mood order is significant: it is the tie-break order for distribution
and correlation results.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from enum import Enum
from typing import List


class Mood(str, Enum):
    """
    Enumeration of moods, in canonical order.
    - HAPPY
    - NEUTRAL
    - SAD
    - ANGRY
    - SICK
    """

    HAPPY = "happy"
    NEUTRAL = "neutral"
    SAD = "sad"
    ANGRY = "angry"
    SICK = "sick"

    @classmethod
    def choices(cls) -> List[str]:
        """Get all available mood choices."""
        return [mood.value for mood in cls]

    @property
    def display_name(self) -> str:
        """Get human-readable display name."""
        return self.value.title()

    @property
    def emoji(self) -> str:
        """Get the emoji shown next to this mood."""
        emoji_map = {
            Mood.HAPPY: "😊",
            Mood.NEUTRAL: "😐",
            Mood.SAD: "😔",
            Mood.ANGRY: "😠",
            Mood.SICK: "🤢",
        }
        return emoji_map[self]


class TimeRange(str, Enum):
    """
    Enumeration of time windows.
    - WEEK: Last 7 days
    - MONTH: Last 30 days
    - ALL: No filtering
    """

    WEEK = "week"
    MONTH = "month"
    ALL = "all"

    @classmethod
    def choices(cls) -> List[str]:
        """Get all available time range choices."""
        return [time_range.value for time_range in cls]

    @property
    def days(self) -> int | None:
        """Window length in days, or None for ALL."""
        return {TimeRange.WEEK: 7, TimeRange.MONTH: 30}.get(self)

    @property
    def description(self) -> str:
        """Phrase describing the window ("the past week", ...)."""
        description_map = {
            TimeRange.WEEK: "the past week",
            TimeRange.MONTH: "the past month",
            TimeRange.ALL: "all time",
        }
        return description_map[self]


class ExportFormat(str, Enum):
    """Enumeration of export formats."""

    CSV = "csv"
    JSON = "json"

    @classmethod
    def choices(cls) -> List[str]:
        return [fmt.value for fmt in cls]


class Theme(str, Enum):
    """Enumeration of display themes."""

    LIGHT = "light"
    DARK = "dark"

    @classmethod
    def choices(cls) -> List[str]:
        return [theme.value for theme in cls]

    @property
    def opposite(self) -> Theme:
        return Theme.DARK if self is Theme.LIGHT else Theme.LIGHT
