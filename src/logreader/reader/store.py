"""Record store: discovery -> parse -> identity -> read filter -> order."""

from __future__ import annotations

import logging
from typing import Optional, Protocol

from logreader.ingestion.models import LogRecord, LogSource
from logreader.ingestion.parser import RecordParser
from logreader.reader.excision import Excisor
from logreader.reader.options import OrderDirection, QueryOptions
from logreader.storage.read_tracker import ReadMark, ReadTracker

logger = logging.getLogger(__name__)

# find() looks at everything currently in the files, read or not
FIND_OPTIONS = QueryOptions(include_read=True)


class LogDiscovery(Protocol):
    def collect(self, day=None) -> list[LogSource]: ...


class RecordStore:
    """Query façade over log files and read marks.

    Every call re-reads the files; nothing is cached between calls, so a
    find() may not see the same data as an earlier query().
    """

    def __init__(
        self,
        discovery: LogDiscovery,
        tracker: ReadTracker,
        excisor: Optional[Excisor] = None,
        parser: Optional[RecordParser] = None,
    ) -> None:
        self._discovery = discovery
        self._tracker = tracker
        self._excisor = excisor or Excisor()
        self._parser = parser or RecordParser()

    def query(self, options: QueryOptions = QueryOptions()) -> list[LogRecord]:
        """Return matching records in file order, reversed for DESC."""
        sources = self._discovery.collect(options.date)

        records: list[LogRecord] = []
        for source in sources:
            for entry in self._parser.parse(source.content, options.level):
                record = LogRecord.from_entry(entry, source.path)
                if not options.include_read and self._tracker.is_read(record.identity):
                    continue
                records.append(record)

        if options.order is OrderDirection.DESC:
            records.reverse()

        logger.debug("Query %s matched %d records in %d files", options, len(records), len(sources))
        return records

    def find(self, identity: str) -> Optional[LogRecord]:
        """First record with the given identity, or None."""
        for record in self.query(FIND_OPTIONS):
            if record.identity == identity:
                return record
        return None

    def mark_read(self, identity: str) -> Optional[ReadMark]:
        record = self.find(identity)
        if record is None:
            return None
        return self._tracker.mark_read(record)

    def delete(self, identity: str) -> bool:
        record = self.find(identity)
        if record is None:
            return False
        return self._excisor.excise(record)

    def mark_all_read(self, options: QueryOptions = QueryOptions()) -> int:
        """Mark every queried record read. A store failure aborts the batch."""
        count = 0
        for record in self.query(options):
            self._tracker.mark_read(record)
            count += 1
        logger.info("Marked %d records read", count)
        return count

    def delete_all(self, options: QueryOptions = QueryOptions()) -> int:
        """Excise every queried record. A write failure aborts the batch."""
        count = 0
        for record in self.query(options):
            if self._excisor.excise(record):
                count += 1
        logger.info("Deleted %d records", count)
        return count
