#!/usr/bin/env python3
"""
MoodMate CLI
------------

Command-line interface for the mood journal.

Commands:
    - Journal: add, list, calendar, clear, samples
    - Insights: trends
    - Data: export
    - Weather: weather
    - Settings: theme

Usage:
    # Record today's mood with live weather
    moodmate add happy --note "Sunny walk"

    # Record a past day with weather for a city
    moodmate add sad --date 2025-04-01 --city Montreal

    # Trends for the past month
    moodmate trends --range month

    # Export everything as JSON
    moodmate export --format json
"""
from __future__ import annotations

from pathlib import Path
from typing import Optional

import click

from moodmate.core.config import load_config
from moodmate.core.logging_manager import handle_cli_error, setup_logger
from moodmate.core.paths import LOG_DIR
from moodmate.storage.local_storage import LocalStorage


@click.group()
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="Path to a YAML configuration file",
)
@click.option(
    "--data-dir",
    type=click.Path(file_okay=False),
    default=None,
    help="Directory for journal data and, unless export_dir is configured, exports",
)
@click.option(
    "--log-dir",
    type=click.Path(),
    default=str(LOG_DIR),
    help="Directory for log files",
)
@click.option("-v", "--verbose", is_flag=True, help="Enable verbose logging")
@click.pass_context
def cli(
    ctx: click.Context,
    config_path: Optional[str],
    data_dir: Optional[str],
    log_dir: str,
    verbose: bool,
) -> None:
    """MoodMate - daily mood journal with weather"""
    ctx.ensure_object(dict)
    ctx.obj["log_dir"] = Path(log_dir)
    ctx.obj["verbose"] = verbose
    ctx.obj["logger"] = setup_logger(Path(log_dir), verbose=verbose)

    try:
        config = load_config(Path(config_path) if config_path else None)
    except Exception as e:
        handle_cli_error(ctx, e, "load_config", {"config": config_path})

    if data_dir:
        config.data_dir = Path(data_dir)

    ctx.obj["config"] = config
    ctx.obj.setdefault(
        "storage",
        LocalStorage(config.storage_dir, logger=ctx.obj["logger"].child("storage")),
    )


# Import and register commands from submodules
from .journal import add, calendar_view, clear, list_entries, samples
from .trends import trends
from .export import export
from .weather import weather
from .settings import theme

cli.add_command(add)
cli.add_command(list_entries)
cli.add_command(calendar_view)
cli.add_command(clear)
cli.add_command(samples)
cli.add_command(trends)
cli.add_command(export)
cli.add_command(weather)
cli.add_command(theme)


def main() -> None:
    cli(obj={})


if __name__ == "__main__":
    main()
