"""Data models for the ingestion layer."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from logreader.ingestion.identity import record_identity

# First bracketed token of a header: "[2024-01-01 00:00:00] local.ERROR" -> "2024-01-01 00:00:00"
BRACKET_PATTERN = re.compile(r"\[([^\]]*)\]")


class Level(str, Enum):
    """Severity markers, in the order they are tested against a header."""

    EMERGENCY = "emergency"
    ALERT = "alert"
    CRITICAL = "critical"
    ERROR = "error"
    WARNING = "warning"
    NOTICE = "notice"
    INFO = "info"
    DEBUG = "debug"

    @property
    def marker(self) -> str:
        """Lowercase marker looked for inside a header, e.g. '.error'."""
        return f".{self.value}"

    @classmethod
    def parse(cls, value: str | Level | None) -> Optional[Level]:
        """Parse a level name; None or 'all' means no level filter."""
        if value is None or isinstance(value, Level):
            return value
        name = value.strip().lower()
        if name in ("", "all"):
            return None
        try:
            return cls(name)
        except ValueError:
            valid = ", ".join(lvl.value for lvl in cls)
            raise ValueError(f"Unknown log level '{value}'. Expected all, {valid}") from None


@dataclass(frozen=True)
class LogSource:
    """One discovered log file and its full content."""

    path: str
    content: str


@dataclass(frozen=True)
class ParsedEntry:
    """Header/body segment cut from a log, before it is tied to a file."""

    level: Level
    header: str
    body: str
    newline: str = "\n"  # terminator of the header line, "" at end of file

    @property
    def text(self) -> str:
        """Exact contiguous span of the source content."""
        return self.header + self.newline + self.body


@dataclass(frozen=True)
class LogRecord:
    """Addressable record, rebuilt from the current file content on every query."""

    identity: str
    source_path: str
    level: Level
    header: str
    body: str
    newline: str = "\n"

    @classmethod
    def from_entry(cls, entry: ParsedEntry, source_path: str) -> LogRecord:
        return cls(
            identity=record_identity(entry.header),
            source_path=source_path,
            level=entry.level,
            header=entry.header,
            body=entry.body,
            newline=entry.newline,
        )

    @property
    def timestamp(self) -> str:
        """Raw text of the first bracketed token in the header."""
        m = BRACKET_PATTERN.search(self.header)
        return m.group(1) if m else ""

    @property
    def text(self) -> str:
        return self.header + self.newline + self.body

    def to_dict(self) -> dict:
        return {
            "identity": self.identity,
            "source_path": self.source_path,
            "level": self.level.value,
            "header": self.header,
            "timestamp": self.timestamp,
            "body": self.body,
        }
