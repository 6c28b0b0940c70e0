"""Segment parser for Laravel-style append logs."""

from __future__ import annotations

import logging
import re

from logreader.ingestion.models import Level, ParsedEntry

logger = logging.getLogger(__name__)

# Header: [YYYY-MM-DD HH:MM:SS] followed by the rest of its line
#   [2024-01-01 00:00:00] local.ERROR: boom
HEADER_PATTERN = re.compile(
    r"(\[\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}\][^\r\n]*)"  # header line
    r"(\r\n|\n|\r)?"  # its terminator, absent at end of content
)


class RecordParser:
    """Splits raw log content into header/body entries classified by level."""

    def parse(self, content: str, level: Level | str | None = None) -> list[ParsedEntry]:
        """Parse content into entries in header order.

        Text before the first header is dropped. A header carrying several
        level markers yields one entry per matching level; a header with no
        marker yields nothing. ``level=None`` or "all" keeps every level.
        """
        level = Level.parse(level)
        matches = list(HEADER_PATTERN.finditer(content))
        entries: list[ParsedEntry] = []

        for i, m in enumerate(matches):
            body_end = matches[i + 1].start() if i + 1 < len(matches) else len(content)
            header = m.group(1)
            newline = m.group(2) or ""
            body = content[m.end():body_end]

            for lvl in self.levels_of(header):
                if level is not None and lvl is not level:
                    continue
                entries.append(ParsedEntry(level=lvl, header=header, body=body, newline=newline))

        logger.debug("Parsed %d headers into %d entries", len(matches), len(entries))
        return entries

    @staticmethod
    def levels_of(header: str) -> list[Level]:
        """Every level whose marker appears in the header, case-insensitively."""
        lowered = header.lower()
        return [lvl for lvl in Level if lvl.marker in lowered]
