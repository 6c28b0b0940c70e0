"""Removal of a record's text from its log file."""

from __future__ import annotations

import logging
from typing import Optional

from logreader.errors import FileWriteFailed, SourceUnavailable
from logreader.ingestion.file_reader import FileSystem, LocalFileSystem
from logreader.ingestion.models import LogRecord

logger = logging.getLogger(__name__)


class Excisor:
    """Rewrites a log file without a given record.

    Plain read-modify-write: no lock and no temp-file swap, so concurrent
    writers to the same file can lose updates. Read marks are left alone.
    """

    def __init__(self, fs: Optional[FileSystem] = None) -> None:
        self._fs = fs or LocalFileSystem()

    def excise(self, record: LogRecord) -> bool:
        """Remove every occurrence of the record's text and rewrite the file."""
        path = record.source_path
        try:
            content = self._fs.read_all(path)
        except OSError as e:
            raise SourceUnavailable(f"Unable to read log file {path}: {e}", path=path) from e

        occurrences = content.count(record.text)
        remaining = content.replace(record.text, "")

        try:
            self._fs.write_all(path, remaining)
        except OSError as e:
            raise FileWriteFailed(f"Unable to rewrite log file {path}: {e}", path=path) from e

        logger.info("Excised %d occurrence(s) of %s from %s", occurrences, record.identity, path)
        return True
