"""Record counts per file and level."""

from __future__ import annotations

from typing import Iterable

import polars as pl

from logreader.ingestion.models import LogRecord

SUMMARY_SCHEMA = {"source_path": pl.Utf8, "level": pl.Utf8, "count": pl.UInt32}


def level_breakdown(records: Iterable[LogRecord]) -> pl.DataFrame:
    """Count records grouped by (source_path, level), sorted by path then level."""
    records = list(records)
    if not records:
        return pl.DataFrame(schema=SUMMARY_SCHEMA)

    df = pl.DataFrame({
        "source_path": [r.source_path for r in records],
        "level": [r.level.value for r in records],
    })
    return (
        df.group_by(["source_path", "level"])
        .agg(pl.len().cast(pl.UInt32).alias("count"))
        .sort(["source_path", "level"])
    )
