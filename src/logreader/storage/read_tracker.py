"""Persistent read marks for parsed log records."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Protocol

import duckdb

from logreader.errors import StoreUnavailable
from logreader.ingestion.models import LogRecord
from logreader.storage.database import Database

logger = logging.getLogger(__name__)


class MarkStore(Protocol):
    """Key-value store with insert-once semantics."""

    def has(self, key: str) -> bool: ...

    def get_or_insert_forever(self, key: str, value: dict) -> dict: ...


class DuckDBMarkStore:
    """MarkStore backed by the read_marks table."""

    def __init__(self, db: Database) -> None:
        self._db = db

    def has(self, key: str) -> bool:
        try:
            row = self._db.conn.execute(
                "SELECT 1 FROM read_marks WHERE identity = ?", [key]
            ).fetchone()
        except (duckdb.Error, OSError) as e:
            raise StoreUnavailable(f"Read-mark store unavailable: {e}") from e
        return row is not None

    def get_or_insert_forever(self, key: str, value: dict) -> dict:
        """Store value under key unless present; return whatever is stored."""
        try:
            self._db.conn.execute(
                "INSERT INTO read_marks (identity, payload) VALUES (?, ?) ON CONFLICT DO NOTHING",
                [key, json.dumps(value)],
            )
            row = self._db.conn.execute(
                "SELECT payload FROM read_marks WHERE identity = ?", [key]
            ).fetchone()
        except (duckdb.Error, OSError) as e:
            raise StoreUnavailable(f"Read-mark store unavailable: {e}") from e
        return json.loads(row[0])


@dataclass(frozen=True)
class ReadMark:
    """Acknowledgement of an identity, with the record stored when first marked."""

    identity: str
    record: dict
    marked_at: Optional[datetime] = None

    @classmethod
    def from_payload(cls, identity: str, payload: dict) -> ReadMark:
        stamp = payload.get("marked_at")
        return cls(
            identity=identity,
            record={k: v for k, v in payload.items() if k != "marked_at"},
            marked_at=datetime.fromisoformat(stamp) if stamp else None,
        )


class ReadTracker:
    """Marks record identities as read and answers whether they are."""

    def __init__(self, store: MarkStore) -> None:
        self._store = store

    def mark_read(self, record: LogRecord) -> ReadMark:
        """Mark a record read. The first stored record and time for an identity win."""
        payload = {**record.to_dict(), "marked_at": datetime.now().isoformat()}
        stored = self._store.get_or_insert_forever(record.identity, payload)
        logger.debug("Marked %s read (%s)", record.identity, record.header)
        return ReadMark.from_payload(record.identity, stored)

    def is_read(self, identity: str) -> bool:
        return self._store.has(identity)
