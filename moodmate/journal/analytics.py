#!/usr/bin/env python3
"""
analytics.py
--------------------
Mood statistics over a list of journal entries.

Two independent computations, both pure and recomputed from scratch on
every call:

    mood_distribution: count and percentage for each of the five moods
    weather_correlation: dominant mood and average temperature for each
        weather condition

Ordering rules:
    - Distribution rows are sorted by percentage descending; ties keep the
      canonical mood order (happy, neutral, sad, angry, sick).
    - The dominant mood of a condition is the most frequent one; ties go to
      the mood earlier in canonical order.
    - Correlation groups are sorted by entry count descending; ties keep
      the order in which conditions were first seen.

Usage:
    from moodmate.journal.analytics import mood_distribution, weather_correlation

    entries = filter_entries_by_time_range(store.list(), "month")
    for stat in mood_distribution(entries):
        print(stat.mood.display_name, stat.count, round(stat.percentage))
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from collections import Counter
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Sequence

# --- Local imports ---
from moodmate.models import JournalEntry, Mood
from moodmate.utils.numbers import round_half_up


@dataclass(frozen=True)
class MoodStat:
    """
    Share of one mood within an entry list.

    Attributes:
        mood: The mood
        count: Number of entries with this mood
        percentage: 100 * count / total (0.0 for an empty list)
    """

    mood: Mood
    count: int
    percentage: float


@dataclass(frozen=True)
class WeatherCorrelation:
    """
    Mood summary for one weather condition.

    Attributes:
        condition: Exact weather condition string
        total_entries: Entries recorded under this condition
        dominant_mood: Most frequent mood under this condition
        dominant_percentage: Rounded share of the dominant mood
        average_temp: Rounded mean temperature
    """

    condition: str
    total_entries: int
    dominant_mood: Mood
    dominant_percentage: int
    average_temp: int


class CorrelationStatus(str, Enum):
    """Whether a correlation result has something to show."""

    NO_ENTRIES = "no_entries"
    NO_CORRELATIONS = "no_correlations"
    OK = "ok"

    @property
    def message(self) -> str:
        message_map = {
            CorrelationStatus.NO_ENTRIES: "No entries yet to analyze weather correlation.",
            CorrelationStatus.NO_CORRELATIONS: "Not enough weather data to show correlations.",
            CorrelationStatus.OK: "",
        }
        return message_map[self]


def mood_distribution(entries: Sequence[JournalEntry]) -> List[MoodStat]:
    """
    Count and percentage of every mood.

    Args:
        entries: Entries to summarize (typically already range-filtered)

    Returns:
        Exactly five MoodStat rows, one per mood, zero-count moods included
    """
    counts = Counter(entry.mood for entry in entries)
    total = len(entries)

    stats = [
        MoodStat(
            mood=mood,
            count=counts.get(mood, 0),
            percentage=(counts.get(mood, 0) / total) * 100 if total > 0 else 0.0,
        )
        for mood in Mood
    ]
    # sorted() is stable, so equal percentages keep canonical mood order
    return sorted(stats, key=lambda stat: stat.percentage, reverse=True)


def weather_correlation(entries: Sequence[JournalEntry]) -> List[WeatherCorrelation]:
    """
    Dominant mood and average temperature per weather condition.

    Conditions are grouped by exact string (case-sensitive).

    Args:
        entries: Entries to summarize

    Returns:
        One WeatherCorrelation per condition, largest group first; empty
        for an empty input
    """
    groups: Dict[str, List[JournalEntry]] = {}
    for entry in entries:
        groups.setdefault(entry.weather.condition, []).append(entry)

    correlations = []
    for condition, group in groups.items():
        mood_counts = Counter(entry.mood for entry in group)

        dominant_mood = Mood.NEUTRAL
        highest_count = 0
        for mood in Mood:
            if mood_counts.get(mood, 0) > highest_count:
                highest_count = mood_counts[mood]
                dominant_mood = mood

        total = len(group)
        correlations.append(
            WeatherCorrelation(
                condition=condition,
                total_entries=total,
                dominant_mood=dominant_mood,
                dominant_percentage=round_half_up(highest_count / total * 100),
                average_temp=round_half_up(
                    sum(entry.weather.temp for entry in group) / total
                ),
            )
        )

    return sorted(correlations, key=lambda item: item.total_entries, reverse=True)


def correlation_status(
    entries: Sequence[JournalEntry], correlations: Sequence[WeatherCorrelation]
) -> CorrelationStatus:
    """
    Classify a correlation result for display.

    An empty journal and a journal with no usable correlations are
    reported differently.
    """
    if not entries:
        return CorrelationStatus.NO_ENTRIES
    if not correlations:
        return CorrelationStatus.NO_CORRELATIONS
    return CorrelationStatus.OK
