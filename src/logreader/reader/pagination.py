"""Page slicing of query results."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Optional, Sequence

from logreader.ingestion.models import LogRecord

DEFAULT_PER_PAGE = 25


@dataclass
class Page:
    """One page of records plus the totals needed to render navigation."""

    items: list[LogRecord] = field(default_factory=list)
    total: int = 0
    per_page: int = DEFAULT_PER_PAGE
    current_page: int = 1

    @property
    def last_page(self) -> int:
        return max(1, math.ceil(self.total / self.per_page))

    @property
    def has_more(self) -> bool:
        return self.current_page < self.last_page


def page_from_input(raw: Optional[object]) -> int:
    """Page number from request input; anything not a positive number is page 1."""
    if raw is None or isinstance(raw, bool):
        return 1
    try:
        page = int(float(str(raw).strip()))
    except (ValueError, OverflowError):
        return 1
    return page if page >= 1 else 1


def paginate(
    records: Sequence[LogRecord],
    per_page: int = DEFAULT_PER_PAGE,
    page: int = 1,
) -> Page:
    if per_page < 1:
        raise ValueError(f"per_page must be positive, got {per_page}")
    offset = (page - 1) * per_page
    return Page(
        items=list(records[offset:offset + per_page]),
        total=len(records),
        per_page=per_page,
        current_page=page,
    )
