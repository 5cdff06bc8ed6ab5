#!/usr/bin/env python3
"""
weather.py
----------
Weather lookup command.

Usage:
    moodmate weather                 # current position
    moodmate weather --city Lisbon
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from typing import Optional

# --- Third-party imports ---
import click

# --- Local imports ---
from moodmate.core.logging_manager import handle_cli_error
from moodmate.weather.client import condition_symbol

from .context import get_weather_client


@click.command()
@click.option("--city", default=None, help="City to look up instead of the current position")
@click.pass_context
def weather(ctx: click.Context, city: Optional[str]) -> None:
    """Show the current weather."""
    try:
        client = get_weather_client(ctx)
        result = client.by_city(city) if city is not None else client.current()
        click.echo(f"{condition_symbol(result.condition)} {result.describe()}")
    except Exception as e:
        handle_cli_error(ctx, e, "fetch_weather", {"city": city})
