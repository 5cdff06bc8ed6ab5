#!/usr/bin/env python3
"""
settings.py
-----------
Display settings command.

Usage:
    moodmate theme             # show current theme
    moodmate theme --toggle    # switch light/dark
"""
# --- Annotations ---
from __future__ import annotations

# --- Third-party imports ---
import click

# --- Local imports ---
from moodmate.core.logging_manager import handle_cli_error

from .context import get_store, get_theme


@click.command()
@click.option("--toggle", is_flag=True, help="Switch between light and dark")
@click.pass_context
def theme(ctx: click.Context, toggle: bool) -> None:
    """Show or toggle the display theme."""
    try:
        preference = get_theme(ctx)
        current = preference.toggle() if toggle else preference.theme
        symbol = "🌙" if current.value == "dark" else "☀"
        click.echo(f"{symbol} Theme: {current.value}")
        click.echo(f"Entries stored: {get_store(ctx).count()}")
    except Exception as e:
        handle_cli_error(ctx, e, "theme", {"toggle": toggle})
