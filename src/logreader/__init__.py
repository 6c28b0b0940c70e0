"""Laravel-style log reader: record extraction, read tracking and excision."""

__version__ = "0.1.0"
