#!/usr/bin/env python3
"""
validators.py
--------------------
Input validation and normalization utilities for MoodMate operations.

Provides type-safe conversion of user input (CLI arguments, stored
strings) into the model enums and values, raising ValidationError with a
user-facing message when input is unusable.
"""
from __future__ import annotations

from datetime import date, datetime
from typing import Any, Optional, Union

from moodmate.models import ExportFormat, Mood, TimeRange, Weather

from .exceptions import ValidationError

DEFAULT_NOTE_TEMPLATE = "Feeling {mood} today"


class DataValidator:
    """Centralized validation for journal input."""

    @staticmethod
    def validate_entry_draft(mood: Any, weather: Optional[Weather]) -> None:
        """
        Check that an entry is ready to be saved.

        Args:
            mood: Selected mood (None when nothing was selected)
            weather: Loaded weather (None while still loading)

        Raises:
            ValidationError: If no mood was selected or weather is missing
        """
        if mood is None or mood == "":
            raise ValidationError("Please select a mood")
        if weather is None:
            raise ValidationError("Weather data not available yet")

    @staticmethod
    def normalize_mood(value: Union[Mood, str, None]) -> Mood:
        """
        Convert a mood name to a Mood.

        Raises:
            ValidationError: If the value is empty or not a known mood
        """
        if isinstance(value, Mood):
            return value
        if not value:
            raise ValidationError("Please select a mood")
        try:
            return Mood(str(value).strip().lower())
        except ValueError as e:
            raise ValidationError(
                f"Unknown mood '{value}', expected one of: {', '.join(Mood.choices())}"
            ) from e

    @staticmethod
    def normalize_time_range(value: Union[TimeRange, str]) -> TimeRange:
        """
        Convert a range name to a TimeRange.

        Raises:
            ValidationError: If the value is not a known range
        """
        if isinstance(value, TimeRange):
            return value
        try:
            return TimeRange(str(value).strip().lower())
        except ValueError as e:
            raise ValidationError(
                f"Unknown time range '{value}', expected one of: "
                f"{', '.join(TimeRange.choices())}"
            ) from e

    @staticmethod
    def normalize_export_format(value: Union[ExportFormat, str]) -> ExportFormat:
        """
        Convert a format name to an ExportFormat.

        Raises:
            ValidationError: If the value is not a supported format
        """
        if isinstance(value, ExportFormat):
            return value
        try:
            return ExportFormat(str(value).strip().lower())
        except ValueError as e:
            raise ValidationError(
                f"Unsupported export format '{value}', expected one of: "
                f"{', '.join(ExportFormat.choices())}"
            ) from e

    @staticmethod
    def normalize_date(date_value: Any) -> Union[date, datetime]:
        """
        Normalize date input.

        Args:
            date_value: ISO date string (YYYY-MM-DD), date, or datetime

        Returns:
            date or datetime (datetimes are kept so their time survives)

        Raises:
            ValidationError: If the value cannot be interpreted as a date
        """
        if isinstance(date_value, (date, datetime)):
            return date_value
        if isinstance(date_value, str):
            try:
                return date.fromisoformat(date_value.strip())
            except ValueError as e:
                raise ValidationError(
                    f"Invalid date '{date_value}': expected YYYY-MM-DD"
                ) from e
        raise ValidationError(f"Invalid date value: {date_value!r}")

    @staticmethod
    def normalize_note(note: Optional[str], mood: Mood, max_length: int) -> str:
        """
        Trim a note, substitute the default for blank notes, and cap length.

        Args:
            note: Raw note text
            mood: Mood used in the default note
            max_length: Maximum number of characters kept

        Returns:
            Normalized note
        """
        text = (note or "").strip()
        if not text:
            return DEFAULT_NOTE_TEMPLATE.format(mood=mood.value)
        return text[:max_length].rstrip()

    @staticmethod
    def normalize_city(value: Optional[str]) -> str:
        """
        Trim a city name.

        Raises:
            ValidationError: If the name is blank
        """
        city = (value or "").strip()
        if not city:
            raise ValidationError("Please enter a city name")
        return city
