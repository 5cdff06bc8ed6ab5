"""
test_journal_models.py
----------------------
Unit tests for the Weather / JournalEntry dataclasses, date helpers and
model enums.
"""
import dataclasses
import pytest
from datetime import date, datetime

from moodmate.models import (
    JournalEntry,
    Mood,
    Theme,
    TimeRange,
    Weather,
    format_date_label,
    parse_date_label,
    to_timestamp_ms,
)


class TestWeather:
    """Tests for the Weather snapshot."""

    def test_to_dict_includes_location(self, clear_weather):
        assert clear_weather.to_dict() == {
            "temp": 22,
            "condition": "Clear",
            "icon": "01d",
            "location": "New York",
        }

    def test_to_dict_omits_missing_location(self, rain_weather):
        assert "location" not in rain_weather.to_dict()

    def test_from_dict_coerces_temp(self):
        weather = Weather.from_dict({"temp": "18", "condition": "Rain", "icon": "10d"})
        assert weather.temp == 18
        assert weather.location is None

    def test_from_dict_missing_field_raises(self):
        with pytest.raises(KeyError):
            Weather.from_dict({"temp": 18, "icon": "10d"})

    def test_describe(self, clear_weather, rain_weather):
        assert clear_weather.describe() == "22°C, Clear in New York"
        assert rain_weather.describe() == "14°C, Rain"

    def test_is_frozen(self, clear_weather):
        with pytest.raises(dataclasses.FrozenInstanceError):
            clear_weather.temp = 30


class TestJournalEntry:
    """Tests for JournalEntry serialization."""

    def test_dict_round_trip(self, make_entry):
        entry = make_entry(mood=Mood.SAD, condition="Rain", temp=14)
        assert JournalEntry.from_dict(entry.to_dict()) == entry

    def test_to_dict_uses_mood_value(self, make_entry):
        data = make_entry(mood=Mood.ANGRY).to_dict()
        assert data["mood"] == "angry"
        assert set(data) == {"id", "date", "mood", "note", "weather", "timestamp"}

    def test_from_dict_rejects_unknown_mood(self, make_entry):
        data = make_entry().to_dict()
        data["mood"] = "ecstatic"
        with pytest.raises(ValueError):
            JournalEntry.from_dict(data)

    @pytest.mark.parametrize("weather", [None, "x", []])
    def test_from_dict_rejects_non_object_weather(self, make_entry, weather):
        data = dict(make_entry().to_dict(), weather=weather)
        with pytest.raises(TypeError):
            JournalEntry.from_dict(data)

    @pytest.mark.parametrize("data", [None, 42, ["id"]])
    def test_from_dict_rejects_non_object_entry(self, data):
        with pytest.raises(TypeError):
            JournalEntry.from_dict(data)

    def test_moment_matches_timestamp(self, make_entry):
        when = datetime(2025, 4, 3, 15, 30)
        assert make_entry(when=when).moment == when


class TestDateHelpers:
    """Tests for date label and timestamp helpers."""

    def test_label_has_unpadded_day(self):
        assert format_date_label(date(2025, 4, 3)) == "April 3, 2025"

    def test_label_from_datetime(self):
        assert format_date_label(datetime(2024, 12, 25, 23, 59)) == "December 25, 2024"

    def test_parse_label(self):
        assert parse_date_label("April 3, 2025") == date(2025, 4, 3)

    def test_parse_invalid_label_raises(self):
        with pytest.raises(ValueError):
            parse_date_label("2025-04-03")

    def test_date_timestamp_is_local_midnight(self):
        expected = int(datetime(2025, 4, 3).timestamp() * 1000)
        assert to_timestamp_ms(date(2025, 4, 3)) == expected

    def test_datetime_keeps_instant(self):
        value = datetime(2025, 4, 3, 8, 15, 30)
        assert to_timestamp_ms(value) == int(value.timestamp() * 1000)


class TestEnums:
    """Tests for model enums."""

    def test_mood_canonical_order(self):
        assert Mood.choices() == ["happy", "neutral", "sad", "angry", "sick"]

    def test_mood_display(self):
        assert Mood.NEUTRAL.display_name == "Neutral"
        assert Mood.HAPPY.emoji == "😊"

    def test_time_range_days(self):
        assert TimeRange.WEEK.days == 7
        assert TimeRange.MONTH.days == 30
        assert TimeRange.ALL.days is None

    def test_time_range_description(self):
        assert TimeRange.MONTH.description == "the past month"

    def test_theme_opposite(self):
        assert Theme.LIGHT.opposite is Theme.DARK
        assert Theme.DARK.opposite is Theme.LIGHT
