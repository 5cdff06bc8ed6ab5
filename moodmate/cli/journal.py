#!/usr/bin/env python3
"""
journal.py
----------
Journal entry commands.

Commands:
    - add: Record a mood for a day
    - list: Show entries, newest first
    - calendar: Month grid of recorded moods
    - clear: Delete every entry
    - samples: Add sample entries for trying out trends

Usage:
    moodmate add happy --note "Great run"
    moodmate add neutral --temp 12 --condition Clouds --location Lisbon
    moodmate list --range week --mood sad
    moodmate calendar --month 2025-04
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from datetime import date, datetime
from typing import Optional

# --- Third-party imports ---
import click

# --- Local imports ---
from moodmate.core.exceptions import ValidationError
from moodmate.core.logging_manager import handle_cli_error
from moodmate.core.validators import DataValidator
from moodmate.journal.filters import (
    entries_by_day,
    filter_entries,
    filter_entries_by_time_range,
)
from moodmate.models import Mood, TimeRange, Weather
from moodmate.utils.charts import month_calendar

from .context import format_entry, get_store, get_weather_client


def _resolve_weather(
    ctx: click.Context,
    city: Optional[str],
    temp: Optional[int],
    condition: Optional[str],
    icon: Optional[str],
    location: Optional[str],
) -> Weather:
    """Manual weather when given, else a city lookup, else current weather."""
    if temp is not None or condition:
        if temp is None or not condition:
            raise ValidationError("Manual weather needs both --temp and --condition")
        return Weather(temp=temp, condition=condition, icon=icon or "01d", location=location)
    if city:
        return get_weather_client(ctx).by_city(city)
    return get_weather_client(ctx).current()


@click.command()
@click.argument(
    "mood",
    required=False,
    type=click.Choice(Mood.choices(), case_sensitive=False),
)
@click.option("-n", "--note", default="", help="Note about how you're feeling")
@click.option(
    "-d", "--date", "entry_date", default=None, help="Day of the mood (YYYY-MM-DD, default: today)"
)
@click.option("--city", default=None, help="Look up weather for this city")
@click.option("--temp", type=int, default=None, help="Manual temperature in °C")
@click.option("--condition", default=None, help="Manual weather condition (e.g. Rain)")
@click.option("--icon", default=None, help="Manual weather icon code")
@click.option("--location", default=None, help="Manual weather location")
@click.pass_context
def add(
    ctx: click.Context,
    mood: Optional[str],
    note: str,
    entry_date: Optional[str],
    city: Optional[str],
    temp: Optional[int],
    condition: Optional[str],
    icon: Optional[str],
    location: Optional[str],
) -> None:
    """Record how you feel today (or on --date)."""
    try:
        if not mood:
            raise ValidationError("Please select a mood")
        day = DataValidator.normalize_date(entry_date) if entry_date else datetime.now()

        weather = _resolve_weather(ctx, city, temp, condition, icon, location)
        DataValidator.validate_entry_draft(mood, weather)

        store = get_store(ctx)
        max_length = store.note_max_length
        if len(note.strip()) > max_length:
            click.echo(f"Note truncated to {max_length} characters", err=True)

        entry = store.save(date=day, mood=mood, note=note, weather=weather)
        click.echo(f"✅ Entry saved! Your mood has been recorded.\n{format_entry(entry)}")

    except Exception as e:
        handle_cli_error(ctx, e, "save_entry", {"mood": mood, "date": entry_date})


@click.command("list")
@click.option(
    "-r",
    "--range",
    "time_range",
    type=click.Choice(TimeRange.choices()),
    default=TimeRange.ALL.value,
    show_default=True,
    help="Time window to show",
)
@click.option(
    "-m",
    "--mood",
    type=click.Choice(["all"] + Mood.choices(), case_sensitive=False),
    default="all",
    help="Only show entries with this mood",
)
@click.option("-s", "--search", default=None, help="Search notes and dates")
@click.pass_context
def list_entries(
    ctx: click.Context, time_range: str, mood: str, search: Optional[str]
) -> None:
    """Show journal entries, newest first."""
    try:
        entries = get_store(ctx).list()
        entries = filter_entries_by_time_range(entries, time_range, logger=ctx.obj.get("logger"))
        entries = filter_entries(entries, mood=mood, query=search)

        if not entries:
            click.echo("No entries found.")
            return

        for entry in entries:
            click.echo(format_entry(entry))

    except Exception as e:
        handle_cli_error(ctx, e, "list_entries", {"range": time_range})


@click.command("calendar")
@click.option("--month", default=None, help="Month to show (YYYY-MM, default: current)")
@click.pass_context
def calendar_view(ctx: click.Context, month: Optional[str]) -> None:
    """Show a month calendar with the mood recorded on each day."""
    try:
        if month:
            try:
                first = datetime.strptime(month, "%Y-%m").date()
            except ValueError as e:
                raise ValidationError(f"Invalid month '{month}': expected YYYY-MM") from e
        else:
            first = date.today().replace(day=1)

        marks = {
            day: mood.emoji for day, mood in entries_by_day(get_store(ctx).list()).items()
        }
        for line in month_calendar(first.year, first.month, marks):
            click.echo(line)

    except Exception as e:
        handle_cli_error(ctx, e, "calendar", {"month": month})


@click.command()
@click.confirmation_option(prompt="Delete all journal entries? This cannot be undone.")
@click.pass_context
def clear(ctx: click.Context) -> None:
    """Delete every journal entry."""
    try:
        get_store(ctx).clear()
        click.echo("🗑  Data cleared. All your journal entries have been deleted.")
    except Exception as e:
        handle_cli_error(ctx, e, "clear_entries")


@click.command()
@click.pass_context
def samples(ctx: click.Context) -> None:
    """Add sample entries spread over the last 40 days."""
    try:
        added = get_store(ctx).add_sample_entries()
        click.echo(f"✅ Added {len(added)} sample entries.")
    except Exception as e:
        handle_cli_error(ctx, e, "add_sample_entries")
