"""Query options for the record store."""

from __future__ import annotations

import re
from dataclasses import dataclass, replace
from datetime import date, datetime
from enum import Enum
from typing import Optional, Union

from logreader.errors import InvalidDateFilter
from logreader.ingestion.models import Level

DateLike = Union[date, datetime, int, float, str]

NUMERIC_PATTERN = re.compile(r"^[+-]?(\d+(\.\d*)?|\.\d+)$")


class OrderDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"

    @classmethod
    def parse(cls, value: str | OrderDirection) -> OrderDirection:
        if isinstance(value, OrderDirection):
            return value
        try:
            return cls(value.strip().lower())
        except ValueError:
            raise ValueError(f"Unknown order direction '{value}'. Expected asc or desc") from None


def normalize_date(value: Optional[DateLike]) -> Optional[date]:
    """Turn a date filter into a calendar day.

    Accepts a date/datetime, a Unix timestamp (number or numeric string)
    or an ISO 'YYYY-MM-DD' string.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, bool):
        raise InvalidDateFilter(f"Inserted date: {value} is not a valid timestamp.")
    if isinstance(value, str):
        text = value.strip()
        if NUMERIC_PATTERN.match(text):
            return _from_timestamp(float(text), value)
        try:
            return date.fromisoformat(text)
        except ValueError:
            raise InvalidDateFilter(f"Inserted date: {value} is not a valid timestamp.") from None
    if isinstance(value, (int, float)):
        return _from_timestamp(value, value)
    raise InvalidDateFilter(f"Inserted date: {value!r} is not a valid timestamp.")


def _from_timestamp(ts: float, original: object) -> date:
    try:
        return datetime.fromtimestamp(ts).date()
    except (OverflowError, OSError, ValueError) as e:
        raise InvalidDateFilter(f"Inserted date: {original} is not a valid timestamp.") from e


@dataclass(frozen=True)
class QueryOptions:
    """What a record query returns. ``level=None`` means every level.

    Loosely typed values (level and order names, timestamps, ISO dates)
    are converted on construction, so QueryOptions(order="desc") orders
    descending.
    """

    level: Optional[Level] = None
    date: Optional[date] = None
    include_read: bool = False
    order: OrderDirection = OrderDirection.ASC

    def __post_init__(self) -> None:
        object.__setattr__(self, "level", Level.parse(self.level))
        object.__setattr__(self, "date", normalize_date(self.date))
        object.__setattr__(self, "order", OrderDirection.parse(self.order))

    @classmethod
    def create(
        cls,
        level: str | Level | None = None,
        date: Optional[DateLike] = None,
        include_read: bool = False,
        order: str | OrderDirection = OrderDirection.ASC,
    ) -> QueryOptions:
        """Build options from loosely typed input (CLI strings, timestamps)."""
        return cls(level=level, date=date, include_read=include_read, order=order)


class QueryBuilder:
    """Chained construction of QueryOptions at the call site.

    QueryBuilder().level("error").order_by("desc").build()
    """

    def __init__(self) -> None:
        self._options = QueryOptions()

    def level(self, level: str | Level | None) -> QueryBuilder:
        self._options = replace(self._options, level=Level.parse(level))
        return self

    def date(self, value: DateLike) -> QueryBuilder:
        self._options = replace(self._options, date=normalize_date(value))
        return self

    def include_read(self, include: bool = True) -> QueryBuilder:
        self._options = replace(self._options, include_read=include)
        return self

    def order_by(self, direction: str | OrderDirection) -> QueryBuilder:
        self._options = replace(self._options, order=OrderDirection.parse(direction))
        return self

    def build(self) -> QueryOptions:
        return self._options
