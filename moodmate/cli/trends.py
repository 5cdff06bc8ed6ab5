#!/usr/bin/env python3
"""
trends.py
---------
Mood trend and weather correlation report.

Usage:
    moodmate trends                 # past week
    moodmate trends --range all
"""
# --- Annotations ---
from __future__ import annotations

# --- Third-party imports ---
import click

# --- Local imports ---
from moodmate.core.logging_manager import handle_cli_error
from moodmate.journal.analytics import (
    CorrelationStatus,
    correlation_status,
    mood_distribution,
    weather_correlation,
)
from moodmate.journal.filters import describe_time_range, filter_entries_by_time_range
from moodmate.models import TimeRange
from moodmate.utils.charts import percentage_bar_chart
from moodmate.weather.client import condition_symbol

from .context import get_store


@click.command()
@click.option(
    "-r",
    "--range",
    "time_range",
    type=click.Choice(TimeRange.choices()),
    default=TimeRange.WEEK.value,
    show_default=True,
    help="Time window to analyze",
)
@click.pass_context
def trends(ctx: click.Context, time_range: str) -> None:
    """Show mood distribution and weather correlation."""
    try:
        entries = filter_entries_by_time_range(
            get_store(ctx).list(), time_range, logger=ctx.obj.get("logger")
        )
        noun = "entry" if len(entries) == 1 else "entries"
        click.echo(f"Showing {len(entries)} {noun} from {describe_time_range(time_range)}")

        if not entries:
            click.echo("Add more mood entries to see trends and insights.")
            return

        click.echo("\nMood Distribution")
        rows = [
            (f"{stat.mood.emoji} {stat.mood.display_name}", stat.count, stat.percentage)
            for stat in mood_distribution(entries)
        ]
        for line in percentage_bar_chart(rows):
            click.echo(line)

        click.echo("\nWeather & Mood")
        correlations = weather_correlation(entries)
        status = correlation_status(entries, correlations)
        if status is not CorrelationStatus.OK:
            click.echo(status.message)
            return

        for item in correlations:
            noun = "entry" if item.total_entries == 1 else "entries"
            click.echo(
                f"{condition_symbol(item.condition)} {item.condition:10s} "
                f"{item.total_entries} {noun}, avg {item.average_temp}°C  "
                f"mostly {item.dominant_mood.emoji} {item.dominant_mood.display_name} "
                f"({item.dominant_percentage}%)"
            )

    except Exception as e:
        handle_cli_error(ctx, e, "trends", {"range": time_range})
