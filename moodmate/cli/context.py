"""
Accessors for the objects a CLI command works with.

Each accessor builds its object from the configuration on first use and
caches it on the click context, so tests can inject replacements through
`cli(obj={...})`.
"""
from __future__ import annotations

from typing import Optional

import click

from moodmate.core.logging_manager import MoodMateLogger
from moodmate.journal.exporter import JournalExporter
from moodmate.journal.store import JournalStore
from moodmate.models import JournalEntry
from moodmate.settings.theme import ThemePreference
from moodmate.weather.client import WeatherClient, condition_symbol


def component_logger(ctx: click.Context, component: str) -> Optional[MoodMateLogger]:
    """Logger for one journal component, or None when logging is not set up."""
    logger = ctx.obj.get("logger")
    return logger.child(component) if logger is not None else None


def get_store(ctx: click.Context) -> JournalStore:
    if "store" not in ctx.obj:
        ctx.obj["store"] = JournalStore(
            ctx.obj["storage"],
            logger=component_logger(ctx, "store"),
            note_max_length=ctx.obj["config"].note_max_length,
        )
    return ctx.obj["store"]


def get_weather_client(ctx: click.Context) -> WeatherClient:
    if "weather_client" not in ctx.obj:
        ctx.obj["weather_client"] = WeatherClient.from_config(
            ctx.obj["config"], logger=component_logger(ctx, "weather")
        )
    return ctx.obj["weather_client"]


def get_exporter(ctx: click.Context) -> JournalExporter:
    if "exporter" not in ctx.obj:
        ctx.obj["exporter"] = JournalExporter(
            ctx.obj["config"].exports_dir, logger=component_logger(ctx, "export")
        )
    return ctx.obj["exporter"]


def get_theme(ctx: click.Context) -> ThemePreference:
    if "theme" not in ctx.obj:
        ctx.obj["theme"] = ThemePreference(
            ctx.obj["storage"], logger=component_logger(ctx, "theme")
        )
    return ctx.obj["theme"]


def format_entry(entry: JournalEntry) -> str:
    """Two-line terminal rendering of an entry."""
    weather = entry.weather
    return (
        f"{entry.mood.emoji} {entry.date}  {entry.mood.display_name}  "
        f"{condition_symbol(weather.condition)} {weather.describe()}\n"
        f"   {entry.note}"
    )
