"""Wiring shared by the CLI commands."""

from __future__ import annotations

import logging
import sys
from contextlib import contextmanager
from dataclasses import replace
from typing import Iterator

from logreader.config import ReaderConfig
from logreader.errors import ConfigError
from logreader.ingestion.file_reader import LogDirectory
from logreader.reader.store import RecordStore
from logreader.storage.database import Database
from logreader.storage.read_tracker import DuckDBMarkStore, ReadTracker

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stderr)],
    )


def load_config(log_dir: str = "", db_path: str = "", naming: str = "", prefix: str = "") -> ReaderConfig:
    """Environment configuration with non-empty CLI values taking priority.

    Raises ConfigError listing every problem found by ReaderConfig.validate().
    """
    config = ReaderConfig.from_env()
    overrides = {
        "log_dir": log_dir,
        "db_path": db_path,
        "naming": naming.lower(),
        "file_prefix": prefix,
    }
    config = replace(config, **{k: v for k, v in overrides.items() if v})
    errors = config.validate()
    if errors:
        for err in errors:
            logger.debug("Config error: %s", err)
        raise ConfigError(errors)
    return config


@contextmanager
def open_store(config: ReaderConfig) -> Iterator[RecordStore]:
    """RecordStore over the configured log directory and read-mark database."""
    with Database(config.db_path) as db:
        discovery = LogDirectory(config.log_dir, prefix=config.file_prefix, naming=config.naming)
        yield RecordStore(discovery, ReadTracker(DuckDBMarkStore(db)))
