#!/usr/bin/env python3
"""
export.py
---------
Journal export command.

Usage:
    moodmate export                        # CSV of every entry
    moodmate export --format json --range month
    moodmate export --output-dir ~/Downloads
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from pathlib import Path
from typing import Optional

# --- Third-party imports ---
import click

# --- Local imports ---
from moodmate.core.logging_manager import handle_cli_error
from moodmate.journal.exporter import JournalExporter
from moodmate.journal.filters import filter_entries_by_time_range
from moodmate.models import ExportFormat, TimeRange

from .context import component_logger, get_exporter, get_store


@click.command()
@click.option(
    "-f",
    "--format",
    "fmt",
    type=click.Choice(ExportFormat.choices()),
    default=ExportFormat.CSV.value,
    show_default=True,
    help="Export file format",
)
@click.option(
    "-r",
    "--range",
    "time_range",
    type=click.Choice(TimeRange.choices()),
    default=TimeRange.ALL.value,
    show_default=True,
    help="Only export entries from this window",
)
@click.option(
    "-o",
    "--output-dir",
    type=click.Path(file_okay=False),
    default=None,
    help="Directory to write the export to (overrides configuration)",
)
@click.pass_context
def export(
    ctx: click.Context, fmt: str, time_range: str, output_dir: Optional[str]
) -> None:
    """Export journal entries to CSV or JSON."""
    try:
        entries = filter_entries_by_time_range(
            get_store(ctx).list(), time_range, logger=ctx.obj.get("logger")
        )
        if not entries:
            click.echo("No entries to export. Add some mood entries first.", err=True)
            ctx.exit(1)

        if output_dir:
            exporter = JournalExporter(Path(output_dir), logger=component_logger(ctx, "export"))
        else:
            exporter = get_exporter(ctx)

        filename = exporter.export(entries, fmt)
        click.echo(f"✅ Export successful: {exporter.export_dir / filename}")

    except click.exceptions.Exit:
        raise
    except Exception as e:
        handle_cli_error(ctx, e, "export_entries", {"format": fmt, "range": time_range})
