#!/usr/bin/env python3
"""
store.py
--------------------
Journal entry persistence.

JournalStore is the sole writer of the journal. The whole collection lives
as one JSON array under a single storage key; every save reads the array,
prepends the new entry and writes the array back.

Read tolerance:
    list() treats a missing, unreadable or unparseable document (or one that
    is not an array) as an empty journal. Inside a valid array, malformed
    records are skipped one by one and the rest are kept. Both cases are
    reported through the injected logger.

Write strictness:
    save() and clear() raise PersistenceError when the storage layer fails.

Usage:
    from moodmate.journal.store import JournalStore
    from moodmate.storage.local_storage import LocalStorage

    store = JournalStore(LocalStorage(config.storage_dir), logger=logger)
    entry = store.save(date=date.today(), mood="happy", note="", weather=weather)
    entries = store.list()   # newest first
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import json
import uuid
from datetime import date, datetime, timedelta
from typing import Any, Dict, List, Optional, Tuple, Union

# --- Local imports ---
from moodmate.core.exceptions import PersistenceError
from moodmate.core.logging_manager import MoodMateLogger, safe_logger
from moodmate.core.validators import DataValidator
from moodmate.models import (
    JournalEntry,
    Mood,
    Weather,
    format_date_label,
    to_timestamp_ms,
)
from moodmate.storage.local_storage import LocalStorage

STORAGE_KEY = "moodJournalEntries"
DEFAULT_NOTE_MAX_LENGTH = 200


class JournalStore:
    """
    Owns the canonical list of journal entries.

    Attributes:
        storage: Backing LocalStorage
        logger: Optional diagnostics logger
        note_max_length: Maximum note length kept on save
        storage_key: Key holding the entry array
    """

    def __init__(
        self,
        storage: LocalStorage,
        logger: Optional[MoodMateLogger] = None,
        note_max_length: int = DEFAULT_NOTE_MAX_LENGTH,
        storage_key: str = STORAGE_KEY,
    ) -> None:
        self.storage = storage
        self.logger = logger
        self.note_max_length = note_max_length
        self.storage_key = storage_key

    # ----- Reading -----

    def _load_records(self) -> List[Dict[str, Any]]:
        """Read the raw entry array; corrupt or missing data reads as empty."""
        log = safe_logger(self.logger)
        try:
            raw = self.storage.get_item(self.storage_key)
        except PersistenceError as e:
            log.log_warning("Journal unreadable, treating as empty", {"error": str(e)})
            return []

        if not raw:
            return []

        try:
            records = json.loads(raw)
        except json.JSONDecodeError as e:
            log.log_warning(
                "Journal data is not valid JSON, treating as empty",
                {"key": self.storage_key, "error": str(e)},
            )
            return []

        if not isinstance(records, list):
            log.log_warning(
                "Journal data is not an array, treating as empty",
                {"key": self.storage_key, "type": type(records).__name__},
            )
            return []

        return records

    def _parse_records(self) -> List[Tuple[Dict[str, Any], JournalEntry]]:
        """Stored records paired with their entries, in stored order."""
        parsed = []
        for index, record in enumerate(self._load_records()):
            try:
                parsed.append((record, JournalEntry.from_dict(record)))
            except (KeyError, TypeError, ValueError) as e:
                safe_logger(self.logger).log_warning(
                    "Skipping malformed journal record",
                    {"key": self.storage_key, "index": index, "error": repr(e)},
                )
        return parsed

    def list(self) -> List[JournalEntry]:
        """
        Get all journal entries, newest first.

        Returns:
            Entries sorted by timestamp descending; empty if no data exists
            or the persisted document cannot be parsed. Malformed records
            are left out.
        """
        entries = [entry for _, entry in self._parse_records()]
        return sorted(entries, key=lambda entry: entry.timestamp, reverse=True)

    def count(self) -> int:
        """Number of entries currently stored."""
        return len(self.list())

    # ----- Writing -----

    def save(
        self,
        date: Union[date, datetime, str],
        mood: Union[Mood, str],
        note: Optional[str],
        weather: Weather,
    ) -> JournalEntry:
        """
        Create and persist a new entry.

        Args:
            date: Nominal day of the mood (date, datetime or YYYY-MM-DD)
            mood: Mood or mood name
            note: Note text; blank notes become "Feeling {mood} today"
            weather: Weather snapshot to embed

        Returns:
            The newly created entry

        Raises:
            ValidationError: If mood, date or weather is invalid
            PersistenceError: If the journal cannot be written
        """
        DataValidator.validate_entry_draft(mood, weather)
        entry_mood = DataValidator.normalize_mood(mood)
        entry_date = DataValidator.normalize_date(date)

        entry = JournalEntry(
            id=uuid.uuid4().hex,
            date=format_date_label(entry_date),
            mood=entry_mood,
            note=DataValidator.normalize_note(note, entry_mood, self.note_max_length),
            weather=weather,
            timestamp=to_timestamp_ms(entry_date),
        )

        records = [entry.to_dict()] + self._valid_records()
        self._write(records)

        safe_logger(self.logger).log_operation(
            "save_entry",
            {"id": entry.id, "date": entry.date, "mood": entry.mood.value},
        )
        return entry

    def clear(self) -> None:
        """
        Delete every entry.

        Raises:
            PersistenceError: If the journal cannot be deleted
        """
        self.storage.remove_item(self.storage_key)
        safe_logger(self.logger).log_operation("clear_entries", {"key": self.storage_key})

    def add_sample_entries(self, now: Optional[datetime] = None) -> List[JournalEntry]:
        """
        Add a spread of sample entries for trying out trends.

        Entries are dated today and 2, 5, 10, 20 and 40 days ago so that
        every time range shows a different subset.

        Args:
            now: Reference time (default: current time)

        Returns:
            The saved entries, in save order
        """
        now = now or datetime.now()
        samples = [
            (0, Mood.HAPPY, "Feeling great today!", 25, "Clear", "01d"),
            (2, Mood.NEUTRAL, "Just an ordinary day", 22, "Clouds", "02d"),
            (5, Mood.SAD, "Not feeling my best", 18, "Rain", "10d"),
            (10, Mood.ANGRY, "Frustrated with work", 27, "Clear", "01d"),
            (20, Mood.HAPPY, "Had a great weekend!", 24, "Clouds", "02d"),
            (40, Mood.SICK, "Caught a cold", 15, "Rain", "10d"),
        ]

        saved = []
        for days_ago, mood, note, temp, condition, icon in samples:
            weather = Weather(temp=temp, condition=condition, icon=icon, location="Sample City")
            saved.append(
                self.save(
                    date=now - timedelta(days=days_ago),
                    mood=mood,
                    note=note,
                    weather=weather,
                )
            )
        return saved

    # ----- Helpers -----

    def _valid_records(self) -> List[Dict[str, Any]]:
        """Stored records that parse, as stored and in stored order."""
        return [record for record, _ in self._parse_records()]

    def _write(self, records: List[Dict[str, Any]]) -> None:
        try:
            self.storage.set_item(
                self.storage_key, json.dumps(records, ensure_ascii=False)
            )
        except PersistenceError as e:
            safe_logger(self.logger).log_error(
                e, {"operation": "write_entries", "count": len(records)}
            )
            raise
