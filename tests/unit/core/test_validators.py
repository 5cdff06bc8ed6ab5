"""
test_validators.py
------------------
Unit tests for moodmate.core.validators module.

Tests the DataValidator class which converts user input into model
values and rejects unusable input with ValidationError.
"""
import pytest
from datetime import date, datetime

from moodmate.core.exceptions import ValidationError
from moodmate.core.validators import DataValidator
from moodmate.models import ExportFormat, Mood, TimeRange, Weather


class TestValidateEntryDraft:
    """Test validate_entry_draft method."""

    def test_valid_draft_passes(self, clear_weather):
        """Mood and weather present: no error."""
        DataValidator.validate_entry_draft("happy", clear_weather)

    def test_missing_mood_raises(self, clear_weather):
        """No mood selected is rejected."""
        with pytest.raises(ValidationError, match="select a mood"):
            DataValidator.validate_entry_draft(None, clear_weather)

    def test_missing_weather_raises(self):
        """Weather not loaded yet is rejected."""
        with pytest.raises(ValidationError, match="Weather"):
            DataValidator.validate_entry_draft(Mood.SAD, None)


class TestNormalizeMood:
    """Test normalize_mood method."""

    def test_enum_passes_through(self):
        assert DataValidator.normalize_mood(Mood.ANGRY) is Mood.ANGRY

    def test_string_is_case_insensitive(self):
        assert DataValidator.normalize_mood(" Happy ") is Mood.HAPPY

    def test_unknown_mood_raises(self):
        with pytest.raises(ValidationError) as exc_info:
            DataValidator.normalize_mood("ecstatic")
        assert "ecstatic" in str(exc_info.value)


class TestNormalizeEnums:
    """Test time range and export format normalization."""

    def test_time_range_from_string(self):
        assert DataValidator.normalize_time_range("MONTH") is TimeRange.MONTH

    def test_unknown_time_range_raises(self):
        with pytest.raises(ValidationError):
            DataValidator.normalize_time_range("year")

    def test_export_format_from_string(self):
        assert DataValidator.normalize_export_format("json") is ExportFormat.JSON

    def test_unknown_export_format_raises(self):
        with pytest.raises(ValidationError):
            DataValidator.normalize_export_format("xml")


class TestNormalizeDate:
    """Test normalize_date method."""

    def test_iso_string(self):
        assert DataValidator.normalize_date("2025-04-03") == date(2025, 4, 3)

    def test_datetime_kept(self):
        value = datetime(2025, 4, 3, 15, 30)
        assert DataValidator.normalize_date(value) is value

    def test_invalid_string_raises(self):
        with pytest.raises(ValidationError, match="YYYY-MM-DD"):
            DataValidator.normalize_date("03/04/2025")

    def test_non_date_raises(self):
        with pytest.raises(ValidationError):
            DataValidator.normalize_date(20250403)


class TestNormalizeNote:
    """Test normalize_note method."""

    def test_blank_note_uses_template(self):
        assert DataValidator.normalize_note("   ", Mood.HAPPY, 200) == "Feeling happy today"

    def test_none_note_uses_template(self):
        assert DataValidator.normalize_note(None, Mood.SICK, 200) == "Feeling sick today"

    def test_note_is_trimmed(self):
        assert DataValidator.normalize_note("  Long day  ", Mood.SAD, 200) == "Long day"

    def test_note_is_capped(self):
        result = DataValidator.normalize_note("x" * 250, Mood.SAD, 200)
        assert len(result) == 200


class TestNormalizeCity:
    """Test normalize_city method."""

    def test_city_is_trimmed(self):
        assert DataValidator.normalize_city("  Lisbon ") == "Lisbon"

    @pytest.mark.parametrize("value", ["", "   ", None])
    def test_blank_city_raises(self, value):
        with pytest.raises(ValidationError):
            DataValidator.normalize_city(value)
