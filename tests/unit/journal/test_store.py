"""
test_store.py
-------------
Unit tests for JournalStore persistence.

Covers:
- Listing order and tolerance of corrupt data
- Saving: ids, defaults, note truncation, validation
- Clearing and sample entries
"""
import json
import pytest
from datetime import date, datetime
from unittest.mock import MagicMock, patch

from moodmate.core.exceptions import PersistenceError, ValidationError
from moodmate.core.logging_manager import MoodMateLogger
from moodmate.journal.store import STORAGE_KEY, JournalStore
from moodmate.models import Mood, to_timestamp_ms


class TestList:
    """Tests for JournalStore.list()."""

    def test_empty_storage_lists_nothing(self, store):
        assert store.list() == []
        assert store.count() == 0

    def test_sorted_newest_first(self, store, clear_weather):
        store.save(date(2025, 4, 1), "happy", "", clear_weather)
        store.save(date(2025, 4, 10), "sad", "", clear_weather)
        store.save(date(2025, 4, 5), "neutral", "", clear_weather)

        labels = [entry.date for entry in store.list()]
        assert labels == ["April 10, 2025", "April 5, 2025", "April 1, 2025"]

    def test_reads_existing_records(self, storage, store, make_entry):
        entries = [make_entry(mood=Mood.SAD), make_entry(when=datetime(2025, 4, 21))]
        storage.set_item(STORAGE_KEY, json.dumps([e.to_dict() for e in entries]))

        assert [entry.mood for entry in store.list()] == [Mood.HAPPY, Mood.SAD]

    @pytest.mark.parametrize(
        "raw",
        [
            "not json",
            '{"id": 1}',
            '[{"id": "x"}]',
            "[42]",
            '[{"id": "1", "date": "April 3, 2025", "mood": "happy", "note": "n",'
            ' "weather": null, "timestamp": 1}]',
            '[{"id": "1", "date": "April 3, 2025", "mood": "happy", "note": "n",'
            ' "weather": "x", "timestamp": 1}]',
            '[{"id": "1", "date": "April 3, 2025", "mood": "happy", "note": "n",'
            ' "weather": [], "timestamp": 1}]',
        ],
    )
    def test_corrupt_data_reads_as_empty(self, storage, raw):
        logger = MagicMock(spec=MoodMateLogger)
        store = JournalStore(storage, logger=logger)
        storage.set_item(STORAGE_KEY, raw)

        assert store.list() == []
        logger.log_warning.assert_called_once()

    def test_malformed_record_is_skipped(self, storage, make_entry):
        logger = MagicMock(spec=MoodMateLogger)
        store = JournalStore(storage, logger=logger)
        good = make_entry(entry_id="good")
        bad = dict(make_entry(entry_id="bad").to_dict(), mood="excited")
        storage.set_item(STORAGE_KEY, json.dumps([bad, good.to_dict()]))

        assert store.list() == [good]
        logger.log_warning.assert_called_once()

    def test_unreadable_storage_reads_as_empty(self, storage):
        store = JournalStore(storage)
        with patch.object(storage, "get_item", side_effect=PersistenceError("denied")):
            assert store.list() == []


class TestSave:
    """Tests for JournalStore.save()."""

    def test_save_returns_entry(self, store, clear_weather):
        entry = store.save(date(2025, 4, 3), Mood.HAPPY, "Sunny walk", clear_weather)

        assert entry.date == "April 3, 2025"
        assert entry.mood is Mood.HAPPY
        assert entry.note == "Sunny walk"
        assert entry.weather == clear_weather
        assert entry.timestamp == to_timestamp_ms(date(2025, 4, 3))
        assert store.list() == [entry]

    def test_save_accepts_iso_string(self, store, clear_weather):
        entry = store.save("2025-04-03", "sad", "", clear_weather)
        assert entry.date == "April 3, 2025"

    def test_blank_note_uses_default(self, store, clear_weather):
        entry = store.save(date(2025, 4, 3), "neutral", "   ", clear_weather)
        assert entry.note == "Feeling neutral today"

    def test_note_capped_to_max_length(self, storage, clear_weather):
        store = JournalStore(storage, note_max_length=10)
        entry = store.save(date(2025, 4, 3), "happy", "abcdefghijklmnop", clear_weather)
        assert entry.note == "abcdefghij"

    def test_ids_are_unique(self, store, clear_weather):
        first = store.save(date(2025, 4, 3), "happy", "", clear_weather)
        second = store.save(date(2025, 4, 3), "happy", "", clear_weather)
        assert first.id != second.id
        assert store.count() == 2

    def test_persisted_as_json_array(self, storage, store, rain_weather):
        store.save(date(2025, 4, 3), "sad", "Grey", rain_weather)

        records = json.loads(storage.get_item(STORAGE_KEY))
        assert len(records) == 1
        assert records[0]["mood"] == "sad"
        assert records[0]["weather"] == {"temp": 14, "condition": "Rain", "icon": "10d"}

    def test_missing_mood_rejected(self, store, clear_weather):
        with pytest.raises(ValidationError, match="select a mood"):
            store.save(date(2025, 4, 3), None, "", clear_weather)
        assert store.count() == 0

    def test_missing_weather_rejected(self, store):
        with pytest.raises(ValidationError, match="Weather data"):
            store.save(date(2025, 4, 3), "happy", "", None)

    def test_save_over_corrupt_journal_replaces_it(self, storage, store, clear_weather):
        storage.set_item(STORAGE_KEY, "not json")
        store.save(date(2025, 4, 3), "happy", "", clear_weather)
        assert store.count() == 1

    def test_save_keeps_good_records_next_to_a_bad_one(self, storage, store, clear_weather):
        kept = store.save(date(2025, 4, 1), "happy", "keep me", clear_weather)
        records = json.loads(storage.get_item(STORAGE_KEY))
        records.append(dict(records[0], id="bad", mood="excited"))
        storage.set_item(STORAGE_KEY, json.dumps(records))

        added = store.save(date(2025, 4, 2), "sad", "", clear_weather)

        assert [entry.id for entry in store.list()] == [added.id, kept.id]

    def test_save_prepends_to_stored_order(self, storage, store, clear_weather):
        newer = store.save(date(2025, 4, 10), "happy", "", clear_weather)
        older = store.save(date(2025, 4, 1), "sad", "", clear_weather)
        latest = store.save(date(2025, 4, 5), "neutral", "", clear_weather)

        stored_ids = [record["id"] for record in json.loads(storage.get_item(STORAGE_KEY))]
        assert stored_ids == [latest.id, older.id, newer.id]

    def test_write_failure_propagates(self, storage, clear_weather):
        logger = MagicMock(spec=MoodMateLogger)
        store = JournalStore(storage, logger=logger)

        with patch.object(storage, "set_item", side_effect=PersistenceError("disk full")):
            with pytest.raises(PersistenceError):
                store.save(date(2025, 4, 3), "happy", "", clear_weather)

        logger.log_error.assert_called_once()
        assert store.count() == 0

    def test_save_logs_operation(self, storage, clear_weather):
        logger = MagicMock(spec=MoodMateLogger)
        store = JournalStore(storage, logger=logger)
        entry = store.save(date(2025, 4, 3), "happy", "", clear_weather)

        logger.log_operation.assert_called_once_with(
            "save_entry", {"id": entry.id, "date": "April 3, 2025", "mood": "happy"}
        )


class TestClearAndSamples:
    """Tests for clear() and add_sample_entries()."""

    def test_clear_removes_everything(self, storage, store, clear_weather):
        store.save(date(2025, 4, 3), "happy", "", clear_weather)
        store.clear()

        assert store.list() == []
        assert storage.get_item(STORAGE_KEY) is None

    def test_clear_on_empty_journal(self, store):
        store.clear()
        assert store.count() == 0

    def test_sample_entries(self, store, now):
        saved = store.add_sample_entries(now=now)

        assert len(saved) == 6
        assert store.count() == 6
        assert [entry.mood for entry in store.list()] == [
            Mood.HAPPY,
            Mood.NEUTRAL,
            Mood.SAD,
            Mood.ANGRY,
            Mood.HAPPY,
            Mood.SICK,
        ]
        assert {entry.weather.location for entry in saved} == {"Sample City"}
