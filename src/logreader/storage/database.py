"""DuckDB connection for the read-mark store."""

from __future__ import annotations

import os
from pathlib import Path

import duckdb

from logreader.errors import StoreUnavailable
from logreader.storage.schema import SCHEMA_DDL

DEFAULT_DB_PATH = "./data/logreader.duckdb"
MEMORY_DB = ":memory:"


def resolve_db_path(db_path: str | None = None) -> str:
    """Resolve database path from argument, env var, or default.

    Priority: explicit arg > LOGREADER_DB env var > default local file.
    """
    if db_path:
        return db_path
    return os.environ.get("LOGREADER_DB", DEFAULT_DB_PATH)


class Database:
    """Lazily opened DuckDB connection holding the read_marks table.

    Failures to create, open or initialize the database file surface as
    StoreUnavailable.
    """

    def __init__(self, db_path: str = DEFAULT_DB_PATH) -> None:
        self.db_path = db_path
        self._conn: duckdb.DuckDBPyConnection | None = None

    @property
    def conn(self) -> duckdb.DuckDBPyConnection:
        if self._conn is None:
            self._conn = self._open()
        return self._conn

    def _open(self) -> duckdb.DuckDBPyConnection:
        try:
            if self.db_path != MEMORY_DB:
                Path(self.db_path).parent.mkdir(parents=True, exist_ok=True)
            return duckdb.connect(self.db_path)
        except (duckdb.Error, OSError) as e:
            raise StoreUnavailable(f"Cannot open read-mark store {self.db_path}: {e}") from e

    def initialize(self) -> None:
        """Create the read_marks table if it doesn't exist."""
        try:
            self.conn.execute(SCHEMA_DDL)
        except duckdb.Error as e:
            self.close()
            raise StoreUnavailable(f"Cannot initialize read-mark store {self.db_path}: {e}") from e

    def close(self) -> None:
        if self._conn is not None:
            self._conn.close()
            self._conn = None

    def __enter__(self) -> Database:
        self.initialize()
        return self

    def __exit__(self, *args: object) -> None:
        self.close()
