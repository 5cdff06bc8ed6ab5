#!/usr/bin/env python3
"""
exceptions.py
--------------------
Custom exception classes for the MoodMate journal.

This module defines the exceptions used throughout the project to report
specific error conditions in the storage, weather, export and configuration
subsystems.

Exception Hierarchy:
    Exception (built-in)
    ├── PersistenceError - Local storage write/delete failures
    ├── WeatherUnavailable - City weather lookup failures
    ├── ExportError - Export file could not be produced
    │   └── EmptyExportError - Export requested with no entries
    ├── ValidationError - Invalid user input (mood, weather, dates, ranges)
    └── ConfigError - Malformed configuration file or values

Usage:
    from moodmate.core.exceptions import PersistenceError, ValidationError

    try:
        store.save(date=today, mood=mood, note=note, weather=weather)
    except ValidationError as e:
        logger.log_warning(f"Invalid entry: {e}")
    except PersistenceError as e:
        logger.log_error(e, {"operation": "save_entry"})
"""


class PersistenceError(Exception):
    """
    Exception for local storage failures.

    Raised when the underlying storage cannot be written or deleted:
    - Disk full / quota exceeded
    - Permission issues
    - Storage directory missing and not creatable

    Read corruption is NOT reported with this exception by the journal
    store; corrupt or missing data is treated as an empty journal.

    Examples:
        >>> raise PersistenceError("Cannot write 'moodJournalEntries': disk full")
        >>> raise PersistenceError("Cannot remove 'moodJournalEntries': permission denied")
    """

    pass


class WeatherUnavailable(Exception):
    """
    Exception for weather lookups that cannot be satisfied.

    Only raised by city lookups. The current-location lookup never raises;
    it substitutes the fallback weather record instead.

    Examples:
        >>> raise WeatherUnavailable("City not found: 'Atlantis'")
        >>> raise WeatherUnavailable("Weather API error: 503")
    """

    pass


class ExportError(Exception):
    """
    Exception for journal export failures.

    Raised when an export file cannot be produced:
    - Unsupported format
    - File writing errors

    Examples:
        >>> raise ExportError("Cannot write export file: permission denied")
    """

    pass


class EmptyExportError(ExportError):
    """
    Exception for exports requested with no entries.

    Callers are expected to check for data before exporting; reaching
    this is a precondition violation, not a silent no-op.

    Examples:
        >>> raise EmptyExportError("No entries to export")
    """

    pass


class ValidationError(Exception):
    """
    Exception for input validation failures.

    Raised when user input fails validation checks:
    - No mood selected, or unknown mood
    - Weather data not loaded yet
    - Invalid date format
    - Unknown time range or export format

    Examples:
        >>> raise ValidationError("Please select a mood")
        >>> raise ValidationError("Invalid date format: expected YYYY-MM-DD")
    """

    pass


class ConfigError(Exception):
    """
    Exception for configuration failures.

    Raised when the configuration file cannot be parsed or holds values
    of the wrong type.

    Examples:
        >>> raise ConfigError("Invalid YAML in config.yaml")
        >>> raise ConfigError("note_max_length must be a positive integer")
    """

    pass
