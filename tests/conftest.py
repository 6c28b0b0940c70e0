"""Shared test fixtures and sample log data."""

from __future__ import annotations

import pytest

from logreader.ingestion.file_reader import LogDirectory
from logreader.reader.store import RecordStore
from logreader.storage.database import Database
from logreader.storage.read_tracker import DuckDBMarkStore, ReadTracker


# Two records: an error with a stack trace and a bodyless info line
SAMPLE_LOG = (
    "[2024-01-01 00:00:00] local.ERROR: boom\n"
    "Stack trace:\n"
    "#0 ...\n"
    "[2024-01-01 00:00:05] local.INFO: ok\n"
)

DAILY_LOGS = {
    "laravel-2024-01-01.log": (
        "[2024-01-01 09:00:00] production.WARNING: disk almost full\n"
        "[2024-01-01 09:05:00] production.ERROR: disk full\n"
        "#0 /var/www/app.php(12): write()\n"
    ),
    "laravel-2024-01-02.log": (
        "[2024-01-02 10:00:00] production.CRITICAL: database down\n"
        "[2024-01-02 10:00:01] production.DEBUG: retrying connection\n"
    ),
}


@pytest.fixture
def tmp_db(tmp_path):
    """Create a temporary DuckDB database for testing."""
    db_path = str(tmp_path / "test.duckdb")
    with Database(db_path) as db:
        yield db


@pytest.fixture
def tracker(tmp_db):
    return ReadTracker(DuckDBMarkStore(tmp_db))


@pytest.fixture
def log_dir(tmp_path):
    """Log directory with a single-file log and two daily logs."""
    directory = tmp_path / "logs"
    directory.mkdir()
    (directory / "laravel.log").write_text(SAMPLE_LOG, encoding="utf-8")
    for name, content in DAILY_LOGS.items():
        (directory / name).write_text(content, encoding="utf-8")
    return directory


@pytest.fixture
def single_store(log_dir, tracker):
    """RecordStore reading laravel.log."""
    return RecordStore(LogDirectory(str(log_dir), naming="single"), tracker)


@pytest.fixture
def daily_store(log_dir, tracker):
    """RecordStore reading every laravel-*.log."""
    return RecordStore(LogDirectory(str(log_dir), naming="daily"), tracker)
