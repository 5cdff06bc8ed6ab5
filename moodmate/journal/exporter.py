#!/usr/bin/env python3
"""
exporter.py
-----------------
Journal export to CSV and JSON files.

Export Formats:
    1. **CSV**: One header row then one row per entry
       - Header: Date,Mood,Note,Temperature,Weather Condition,Location
       - Every field double-quoted, embedded quotes doubled
       - Temperature rendered as "<int>°C", missing location as "Unknown"
    2. **JSON**: Pretty-printed array of entries, field-for-field as stored

Files are named moodmate-journal-<YYYY-MM-DD>.<ext> after the export date
(not any entry date) and written into the export directory, which plays
the role of the browser download folder.

Usage:
    from moodmate.journal.exporter import JournalExporter

    exporter = JournalExporter(config.export_dir, logger=logger)
    filename = exporter.export(store.list(), "csv")
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import csv
import io
import json
from datetime import date
from pathlib import Path
from typing import Optional, Sequence, Union

# --- Local imports ---
from moodmate.core.exceptions import EmptyExportError, ExportError
from moodmate.core.logging_manager import MoodMateLogger, safe_logger
from moodmate.core.validators import DataValidator
from moodmate.models import ExportFormat, JournalEntry

CSV_HEADER = "Date,Mood,Note,Temperature,Weather Condition,Location"
FILENAME_PREFIX = "moodmate-journal"


def export_filename(fmt: ExportFormat, today: Optional[date] = None) -> str:
    """Filename for an export made on `today` (default: the current date)."""
    today = today or date.today()
    return f"{FILENAME_PREFIX}-{today.isoformat()}.{fmt.value}"


def render_csv(entries: Sequence[JournalEntry]) -> str:
    """
    Render entries as CSV text.

    Args:
        entries: Entries to render, in output order

    Returns:
        Header line plus one line per entry, without a trailing newline
    """
    buffer = io.StringIO()
    writer = csv.writer(buffer, quoting=csv.QUOTE_ALL, lineterminator="\n")
    for entry in entries:
        writer.writerow(
            [
                entry.date,
                entry.mood.value,
                entry.note,
                f"{entry.weather.temp}°C",
                entry.weather.condition,
                entry.weather.location or "Unknown",
            ]
        )
    rows = buffer.getvalue().rstrip("\n")
    return f"{CSV_HEADER}\n{rows}" if rows else CSV_HEADER


def render_json(entries: Sequence[JournalEntry]) -> str:
    """Render entries as an indented JSON array of their stored form."""
    return json.dumps([entry.to_dict() for entry in entries], indent=2, ensure_ascii=False)


class JournalExporter:
    """
    Writes journal exports into an export directory.

    Attributes:
        export_dir: Destination directory (created on first export)
        logger: Optional logger for export operations
    """

    def __init__(self, export_dir: Path, logger: Optional[MoodMateLogger] = None) -> None:
        self.export_dir = Path(export_dir)
        self.logger = logger

    def export(
        self,
        entries: Sequence[JournalEntry],
        fmt: Union[ExportFormat, str],
        today: Optional[date] = None,
    ) -> str:
        """
        Export entries to a file.

        Args:
            entries: Entries to export (full or filtered list)
            fmt: "csv" or "json"
            today: Export date used in the filename (default: today)

        Returns:
            Name of the written file

        Raises:
            EmptyExportError: If entries is empty
            ValidationError: If fmt is not a supported format
            ExportError: If the file cannot be written
        """
        if not entries:
            raise EmptyExportError("No entries to export")

        fmt = DataValidator.normalize_export_format(fmt)
        content = render_csv(entries) if fmt is ExportFormat.CSV else render_json(entries)
        filename = export_filename(fmt, today)
        output_path = self.export_dir / filename

        try:
            self.export_dir.mkdir(parents=True, exist_ok=True)
            output_path.write_text(content, encoding="utf-8")
        except OSError as e:
            error = ExportError(f"Cannot write export file {output_path}: {e}")
            safe_logger(self.logger).log_error(error, {"format": fmt.value})
            raise error from e

        safe_logger(self.logger).log_operation(
            "export_entries",
            {"format": fmt.value, "entries": len(entries), "path": str(output_path)},
        )
        return filename
