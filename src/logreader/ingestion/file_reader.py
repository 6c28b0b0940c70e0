"""Log file access: whole-file reads/writes and log file discovery."""

from __future__ import annotations

import logging
from datetime import date
from pathlib import Path
from typing import Optional, Protocol

from logreader.errors import SourceUnavailable
from logreader.ingestion.models import LogSource

logger = logging.getLogger(__name__)

NAMING_MODES = ("single", "daily")


class FileSystem(Protocol):
    def read_all(self, path: str) -> str: ...

    def write_all(self, path: str, text: str) -> None: ...


class LocalFileSystem:
    """Whole-file text I/O that round-trips bytes and line endings unchanged."""

    encoding = "utf-8"
    errors = "surrogateescape"

    def read_all(self, path: str) -> str:
        with open(path, "r", encoding=self.encoding, errors=self.errors, newline="") as f:
            return f.read()

    def write_all(self, path: str, text: str) -> None:
        with open(path, "w", encoding=self.encoding, errors=self.errors, newline="") as f:
            f.write(text)


def log_file_pattern(prefix: str, naming: str, day: Optional[date] = None) -> str:
    """Glob pattern for the log files to read.

    laravel-2024-01-01.log  -> a specific day
    laravel.log             -> single-file logging
    laravel-*.log           -> daily logging, every day
    """
    if day is not None:
        return f"{prefix}-{day.isoformat()}.log"
    if naming == "daily":
        return f"{prefix}-*.log"
    return f"{prefix}.log"


class LogDirectory:
    """Finds and loads the log files of one log directory."""

    def __init__(
        self,
        log_dir: str,
        prefix: str = "laravel",
        naming: str = "single",
        fs: Optional[FileSystem] = None,
    ) -> None:
        if naming not in NAMING_MODES:
            raise ValueError(f"Unknown naming mode '{naming}'. Expected one of {NAMING_MODES}")
        self.log_dir = log_dir
        self.prefix = prefix
        self.naming = naming
        self._fs = fs or LocalFileSystem()

    def list_files(self, day: Optional[date] = None) -> list[str]:
        """Absolute paths of matching log files, sorted by name."""
        directory = Path(self.log_dir)
        if not directory.is_dir():
            raise SourceUnavailable(
                f"Unable to retrieve files from path: {self.log_dir}", path=self.log_dir
            )
        pattern = log_file_pattern(self.prefix, self.naming, day)
        return [str(p.resolve()) for p in sorted(directory.glob(pattern)) if p.is_file()]

    def collect(self, day: Optional[date] = None) -> list[LogSource]:
        """Read every matching file. Fails as a whole if any file is unreadable."""
        sources = []
        for path in self.list_files(day):
            try:
                content = self._fs.read_all(path)
            except OSError as e:
                raise SourceUnavailable(f"Unable to read log file {path}: {e}", path=path) from e
            sources.append(LogSource(path=path, content=content))
        logger.debug("Collected %d log files from %s", len(sources), self.log_dir)
        return sources
