"""Reader configuration from environment variables."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from logreader.errors import ConfigError
from logreader.ingestion.file_reader import NAMING_MODES
from logreader.reader.pagination import DEFAULT_PER_PAGE
from logreader.storage.database import resolve_db_path


@dataclass
class ReaderConfig:
    """Where logs live, how they are named and where read marks are kept."""

    # Directory holding the application's log files
    log_dir: str = "./storage/logs"
    # File name stem: laravel.log / laravel-YYYY-MM-DD.log
    file_prefix: str = "laravel"
    # "single" reads <prefix>.log, "daily" reads every <prefix>-*.log
    naming: str = "single"
    # DuckDB file for read marks
    db_path: str = ""
    per_page: int = DEFAULT_PER_PAGE

    @classmethod
    def from_env(cls) -> ReaderConfig:
        """Load configuration from environment variables."""
        raw_per_page = os.environ.get("LOGREADER_PER_PAGE", str(DEFAULT_PER_PAGE))
        try:
            per_page = int(raw_per_page)
        except ValueError:
            raise ConfigError([f"LOGREADER_PER_PAGE must be an integer, got '{raw_per_page}'"]) from None

        return cls(
            log_dir=os.environ.get("LOGREADER_LOG_DIR", "./storage/logs"),
            file_prefix=os.environ.get("LOGREADER_FILE_PREFIX", "laravel"),
            naming=os.environ.get("LOGREADER_NAMING", "single").lower(),
            db_path=resolve_db_path(),
            per_page=per_page,
        )

    def validate(self) -> list[str]:
        """Return list of validation errors, empty if config is valid."""
        errors = []
        if not self.log_dir:
            errors.append("LOGREADER_LOG_DIR is required")
        elif not Path(self.log_dir).is_dir():
            errors.append(f"LOGREADER_LOG_DIR does not exist: {self.log_dir}")
        if self.naming not in NAMING_MODES:
            errors.append(f"LOGREADER_NAMING must be one of {', '.join(NAMING_MODES)}")
        if not self.file_prefix:
            errors.append("LOGREADER_FILE_PREFIX must not be empty")
        if self.per_page < 1:
            errors.append("LOGREADER_PER_PAGE must be positive")
        return errors
