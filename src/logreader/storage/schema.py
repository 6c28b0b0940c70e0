"""DuckDB table definitions."""

SCHEMA_DDL = """
-- Acknowledged records, keyed by header identity. Rows are never updated or removed.
CREATE TABLE IF NOT EXISTS read_marks (
    identity      TEXT PRIMARY KEY,
    payload       TEXT NOT NULL,
    marked_at     TIMESTAMP DEFAULT CURRENT_TIMESTAMP
);
"""
