#!/usr/bin/env python3
"""
filters.py
--------------------
Pure selection functions over journal entry lists.

Functions:
    filter_entries_by_time_range: Keep entries within a week/month window
    filter_entries: Keep entries matching a mood and/or a search query
    entries_by_day: Map calendar days to the mood recorded on them
    describe_time_range: Human phrase for a time range

None of these mutate their input; all preserve input order.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from datetime import datetime
from typing import Dict, List, Optional, Sequence, Union

# --- Local imports ---
from moodmate.core.logging_manager import MoodMateLogger, safe_logger
from moodmate.core.validators import DataValidator
from moodmate.models import MS_PER_DAY, JournalEntry, Mood, TimeRange, parse_date_label


def filter_entries_by_time_range(
    entries: Sequence[JournalEntry],
    time_range: Union[TimeRange, str],
    now: Optional[datetime] = None,
    logger: Optional[MoodMateLogger] = None,
) -> List[JournalEntry]:
    """
    Filter entries to a time window ending now.

    The cutoff is inclusive: an entry exactly at the cutoff millisecond is
    kept.

    Args:
        entries: Entries to filter
        time_range: week (last 7 days), month (last 30 days) or all
        now: Reference time (default: current time)
        logger: Optional logger for the computed cutoff

    Returns:
        Matching entries in input order

    Raises:
        ValidationError: If time_range is not a known range
    """
    time_range = DataValidator.normalize_time_range(time_range)
    if time_range.days is None:
        return list(entries)

    now_ms = int((now or datetime.now()).timestamp() * 1000)
    cutoff = now_ms - time_range.days * MS_PER_DAY

    filtered = [entry for entry in entries if entry.timestamp >= cutoff]
    safe_logger(logger).log_debug(
        f"Filtering for {time_range.value}",
        {
            "cutoff": datetime.fromtimestamp(cutoff / 1000).isoformat(),
            "total": len(entries),
            "kept": len(filtered),
        },
    )
    return filtered


def filter_entries(
    entries: Sequence[JournalEntry],
    mood: Union[Mood, str, None] = None,
    query: Optional[str] = None,
) -> List[JournalEntry]:
    """
    Filter entries by mood and free-text search.

    Args:
        entries: Entries to filter
        mood: Mood to keep; None or "all" keeps every mood
        query: Case-insensitive text matched against note and date label

    Returns:
        Matching entries in input order
    """
    result = list(entries)

    if mood is not None and mood != "all":
        wanted = DataValidator.normalize_mood(mood)
        result = [entry for entry in result if entry.mood is wanted]

    if query and query.strip():
        needle = query.strip().lower()
        result = [
            entry
            for entry in result
            if needle in entry.note.lower() or needle in entry.date.lower()
        ]

    return result


def entries_by_day(entries: Sequence[JournalEntry]) -> Dict[str, Mood]:
    """
    Map each recorded day (YYYY-MM-DD) to its mood.

    Days come from the date label; labels that do not parse fall back to
    the entry timestamp. When a day has several entries, the one listed
    last wins.

    Args:
        entries: Entries to map

    Returns:
        Dictionary of ISO day to Mood
    """
    days: Dict[str, Mood] = {}
    for entry in entries:
        try:
            day = parse_date_label(entry.date)
        except ValueError:
            day = entry.moment.date()
        days[day.isoformat()] = entry.mood
    return days


def describe_time_range(time_range: Union[TimeRange, str]) -> str:
    """Phrase for a range: 'the past week', 'the past month' or 'all time'."""
    return DataValidator.normalize_time_range(time_range).description
