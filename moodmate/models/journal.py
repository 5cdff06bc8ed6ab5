#!/usr/bin/env python3
"""
journal.py
-------------------
Dataclasses for journal entries and their weather snapshots.

Both classes are frozen: an entry is immutable once created, and the
weather it carries is the snapshot captured at save time.

The dictionary form produced by to_dict() is the persisted format and the
JSON export format:

    {
        "id": "3f2b...",
        "date": "April 3, 2025",
        "mood": "happy",
        "note": "Feeling happy today",
        "weather": {"temp": 22, "condition": "Clear", "icon": "01d",
                    "location": "New York"},
        "timestamp": 1743638400000
    }
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from collections import abc
from dataclasses import dataclass
from datetime import date, datetime, time
from typing import Any, Dict, Mapping, Optional, Union

# --- Local imports ---
from .enums import Mood

MS_PER_DAY = 86_400_000
DATE_LABEL_FORMAT = "%B %d, %Y"


@dataclass(frozen=True)
class Weather:
    """
    Point-in-time weather snapshot.

    Attributes:
        temp: Temperature in whole degrees Celsius
        condition: Provider condition name ("Clear", "Rain", ...)
        icon: Provider icon code ("01d", ...)
        location: Place name, if known
    """

    temp: int
    condition: str
    icon: str
    location: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Weather:
        """
        Build a Weather from its dictionary form.

        Raises:
            KeyError: If a required field is missing
            TypeError: If data is not a mapping
            ValueError, TypeError: If temp is not numeric
        """
        _require_mapping(data, "weather")
        location = data.get("location")
        return cls(
            temp=int(data["temp"]),
            condition=str(data["condition"]),
            icon=str(data["icon"]),
            location=str(location) if location else None,
        )

    def to_dict(self) -> Dict[str, Any]:
        result: Dict[str, Any] = {
            "temp": self.temp,
            "condition": self.condition,
            "icon": self.icon,
        }
        if self.location:
            result["location"] = self.location
        return result

    def describe(self) -> str:
        """One-line summary: '22°C, Clear in New York'."""
        summary = f"{self.temp}°C, {self.condition}"
        return f"{summary} in {self.location}" if self.location else summary


@dataclass(frozen=True)
class JournalEntry:
    """
    One persisted mood record.

    Attributes:
        id: Unique identifier assigned at creation
        date: Display label of the nominal day ("April 3, 2025")
        mood: Recorded mood
        note: Free-text note
        weather: Weather snapshot captured at save time
        timestamp: Epoch milliseconds of the nominal day
    """

    id: str
    date: str
    mood: Mood
    note: str
    weather: Weather
    timestamp: int

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> JournalEntry:
        """
        Build an entry from its persisted dictionary form.

        Raises:
            KeyError: If a required field is missing
            ValueError, TypeError: If a field has the wrong shape
        """
        _require_mapping(data, "entry")
        return cls(
            id=str(data["id"]),
            date=str(data["date"]),
            mood=Mood(data["mood"]),
            note=str(data["note"]),
            weather=Weather.from_dict(data["weather"]),
            timestamp=int(data["timestamp"]),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "date": self.date,
            "mood": self.mood.value,
            "note": self.note,
            "weather": self.weather.to_dict(),
            "timestamp": self.timestamp,
        }

    @property
    def moment(self) -> datetime:
        """Local datetime of the entry timestamp."""
        return datetime.fromtimestamp(self.timestamp / 1000)


def _require_mapping(data: Any, what: str) -> None:
    if not isinstance(data, abc.Mapping):
        raise TypeError(f"{what} must be an object, got {type(data).__name__}")


def format_date_label(value: Union[date, datetime]) -> str:
    """
    Format a date as a display label, e.g. 'April 3, 2025'.

    Args:
        value: date or datetime

    Returns:
        Label with the full month name and an unpadded day
    """
    return f"{value:%B} {value.day}, {value.year}"


def parse_date_label(label: str) -> date:
    """
    Parse a display label back to a date.

    Raises:
        ValueError: If the label is not in 'Month d, yyyy' form
    """
    return datetime.strptime(label.strip(), DATE_LABEL_FORMAT).date()


def to_timestamp_ms(value: Union[date, datetime]) -> int:
    """
    Epoch milliseconds for a date or datetime.

    Bare dates map to local midnight; datetimes keep their exact instant
    (naive datetimes are taken as local time).
    """
    if not isinstance(value, datetime):
        value = datetime.combine(value, time())
    return int(round(value.timestamp() * 1000))
