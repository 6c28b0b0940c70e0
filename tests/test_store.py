"""Tests for the record store query façade."""

from __future__ import annotations

from datetime import date

import pytest

from logreader.errors import FileWriteFailed, InvalidDateFilter, SourceUnavailable, StoreUnavailable
from logreader.ingestion.file_reader import LocalFileSystem, LogDirectory
from logreader.ingestion.identity import record_identity
from logreader.ingestion.models import Level
from logreader.reader.excision import Excisor
from logreader.reader.options import OrderDirection, QueryBuilder, QueryOptions
from logreader.reader.store import RecordStore
from logreader.storage.read_tracker import ReadTracker


class CountingStore:
    """In-memory MarkStore that fails after a number of inserts."""

    def __init__(self, fail_after: int | None = None) -> None:
        self.values: dict[str, dict] = {}
        self.fail_after = fail_after

    def has(self, key):
        return key in self.values

    def get_or_insert_forever(self, key, value):
        if self.fail_after is not None and len(self.values) >= self.fail_after:
            raise StoreUnavailable("store went away")
        return self.values.setdefault(key, value)


class TestQuery:
    """Test query filtering and ordering."""

    def test_single_file(self, single_store):
        records = single_store.query()
        assert [r.level for r in records] == [Level.ERROR, Level.INFO]
        assert records[0].identity == record_identity("[2024-01-01 00:00:00] local.ERROR: boom")
        assert records[0].source_path.endswith("laravel.log")

    def test_daily_files_in_file_order(self, daily_store):
        records = daily_store.query()
        assert [r.level for r in records] == [
            Level.WARNING, Level.ERROR, Level.CRITICAL, Level.DEBUG,
        ]

    def test_level_filter(self, daily_store):
        records = daily_store.query(QueryOptions(level=Level.ERROR))
        assert len(records) == 1
        assert ".error" in records[0].header.lower()

    def test_date_filter(self, single_store):
        records = single_store.query(QueryOptions(date=date(2024, 1, 2)))
        assert [r.level for r in records] == [Level.CRITICAL, Level.DEBUG]

    def test_desc_is_reverse_of_asc(self, daily_store):
        asc = daily_store.query(QueryOptions(order=OrderDirection.ASC))
        desc = daily_store.query(QueryOptions(order=OrderDirection.DESC))
        assert desc == list(reversed(asc))
        assert desc != asc

    def test_options_given_as_strings(self, daily_store):
        asc = daily_store.query(QueryOptions(order="asc"))
        desc = daily_store.query(QueryOptions(order="desc"))
        assert desc == list(reversed(asc))
        assert [r.level for r in desc] == [
            Level.DEBUG, Level.CRITICAL, Level.ERROR, Level.WARNING,
        ]

        errors = daily_store.query(QueryOptions(level="error"))
        assert len(errors) == 1
        assert errors[0].level is Level.ERROR

    def test_date_given_as_string(self, single_store):
        records = single_store.query(QueryOptions(date="2024-01-02"))
        assert [r.level for r in records] == [Level.CRITICAL, Level.DEBUG]

    def test_read_records_hidden(self, single_store):
        first = single_store.query()[0]
        single_store.mark_read(first.identity)

        records = single_store.query()
        assert [r.level for r in records] == [Level.INFO]

    def test_include_read(self, single_store):
        single_store.mark_all_read()
        assert single_store.query() == []
        assert len(single_store.query(QueryBuilder().include_read().build())) == 2

    def test_no_marker_headers_never_returned(self, log_dir, single_store):
        (log_dir / "laravel.log").write_text(
            "[2024-01-01 00:00:00] plain line without level\n"
            "[2024-01-01 00:00:01] local.ERROR: real\n"
        )
        for level in [None, *Level]:
            records = single_store.query(QueryOptions(level=level, include_read=True))
            assert all("plain line" not in r.header for r in records)

    def test_missing_directory(self, tmp_path, tracker):
        store = RecordStore(LogDirectory(str(tmp_path / "missing")), tracker)
        with pytest.raises(SourceUnavailable):
            store.query()

    def test_invalid_date_rejected_before_query(self):
        with pytest.raises(InvalidDateFilter):
            QueryOptions.create(date="next tuesday")

    def test_store_failure_during_query(self, log_dir):
        class DownStore(CountingStore):
            def has(self, key):
                raise StoreUnavailable("down")

        store = RecordStore(LogDirectory(str(log_dir)), ReadTracker(DownStore()))
        with pytest.raises(StoreUnavailable):
            store.query()
        assert len(store.query(QueryOptions(include_read=True))) == 2


class TestFind:
    """Test lookup by identity."""

    def test_find_existing(self, daily_store):
        identity = record_identity("[2024-01-02 10:00:00] production.CRITICAL: database down")
        record = daily_store.find(identity)
        assert record is not None
        assert record.level is Level.CRITICAL

    def test_find_includes_read_records(self, single_store):
        record = single_store.query()[0]
        single_store.mark_read(record.identity)
        assert single_store.find(record.identity) == record

    def test_find_missing(self, single_store):
        assert single_store.find("0" * 32) is None

    def test_mark_and_delete_missing(self, single_store):
        assert single_store.mark_read("0" * 32) is None
        assert single_store.delete("0" * 32) is False


class TestBatches:
    """Test mark_all_read and delete_all."""

    def test_mark_all_read_counts(self, daily_store):
        assert daily_store.mark_all_read(QueryOptions(level=Level.WARNING)) == 1
        assert daily_store.mark_all_read() == 3
        assert daily_store.mark_all_read() == 0

    def test_mark_all_read_aborts_on_store_failure(self, log_dir):
        store = RecordStore(
            LogDirectory(str(log_dir), naming="daily"),
            ReadTracker(CountingStore(fail_after=2)),
        )
        with pytest.raises(StoreUnavailable):
            store.mark_all_read()

    def test_delete_all(self, log_dir, daily_store):
        assert daily_store.delete_all(QueryOptions(level=Level.ERROR)) == 1
        remaining = daily_store.query()
        assert [r.level for r in remaining] == [Level.WARNING, Level.CRITICAL, Level.DEBUG]
        assert "disk full" not in (log_dir / "laravel-2024-01-01.log").read_text()

    def test_delete_all_everything(self, log_dir, daily_store):
        assert daily_store.delete_all() == 4
        assert daily_store.query() == []
        assert (log_dir / "laravel-2024-01-02.log").read_text() == ""

    def test_delete_all_aborts_on_write_failure(self, log_dir, tracker):
        class ReadOnlyFS(LocalFileSystem):
            def write_all(self, path, text):
                raise PermissionError(path)

        store = RecordStore(
            LogDirectory(str(log_dir), naming="daily"),
            tracker,
            excisor=Excisor(ReadOnlyFS()),
        )
        with pytest.raises(FileWriteFailed):
            store.delete_all()
        assert len(store.query()) == 4

    def test_delete_leaves_read_mark(self, log_dir, single_store, tracker):
        record = single_store.query()[0]
        single_store.mark_read(record.identity)
        assert single_store.delete(record.identity)
        assert tracker.is_read(record.identity)

        # The same header reappearing is already acknowledged
        with open(log_dir / "laravel.log", "a") as f:
            f.write(record.text)
        assert record.identity not in {r.identity for r in single_store.query()}
