"""Content-derived record identifiers."""

from __future__ import annotations

import hashlib


def record_identity(header: str) -> str:
    """Return the MD5 hex digest of a header line.

    Only the header is hashed, so identical headers in different files
    share one identity (and one read mark).
    """
    raw = header.encode("utf-8", "surrogateescape")
    return hashlib.md5(raw, usedforsecurity=False).hexdigest()
