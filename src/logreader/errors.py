"""Exception types raised by the log reader."""

from __future__ import annotations


class LogReaderError(Exception):
    """Base class for every error surfaced by the log reader."""


class SourceUnavailable(LogReaderError):
    """Log files could not be enumerated or read."""

    def __init__(self, message: str, path: str = "") -> None:
        super().__init__(message)
        self.path = path


class InvalidDateFilter(LogReaderError, ValueError):
    """A date filter is not a usable point in time."""


class StoreUnavailable(LogReaderError):
    """The read-mark store could not be reached."""


class FileWriteFailed(LogReaderError):
    """A rewritten log file could not be persisted."""

    def __init__(self, message: str, path: str = "") -> None:
        super().__init__(message)
        self.path = path


class ConfigError(LogReaderError, ValueError):
    """Reader configuration is incomplete or invalid."""

    def __init__(self, errors: list[str]) -> None:
        super().__init__("; ".join(errors))
        self.errors = errors
