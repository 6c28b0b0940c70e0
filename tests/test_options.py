"""Tests for query options and date filter normalisation."""

from __future__ import annotations

from dataclasses import FrozenInstanceError
from datetime import date, datetime

import pytest

from logreader.errors import InvalidDateFilter
from logreader.ingestion.models import Level
from logreader.reader.options import (
    OrderDirection,
    QueryBuilder,
    QueryOptions,
    normalize_date,
)


class TestNormalizeDate:
    """Test accepted and rejected date filters."""

    def test_none(self):
        assert normalize_date(None) is None

    def test_date_and_datetime(self):
        assert normalize_date(date(2024, 1, 2)) == date(2024, 1, 2)
        assert normalize_date(datetime(2024, 1, 2, 23, 59)) == date(2024, 1, 2)

    def test_iso_string(self):
        assert normalize_date("2024-01-02") == date(2024, 1, 2)

    def test_unix_timestamp(self):
        ts = datetime(2024, 1, 2, 12, 0).timestamp()
        assert normalize_date(ts) == date(2024, 1, 2)
        assert normalize_date(int(ts)) == date(2024, 1, 2)
        assert normalize_date(str(int(ts))) == date(2024, 1, 2)

    @pytest.mark.parametrize("value", ["yesterday", "2024-13-01", "", True, [2024], 1e30])
    def test_invalid(self, value):
        with pytest.raises(InvalidDateFilter):
            normalize_date(value)

    def test_invalid_date_is_value_error(self):
        with pytest.raises(ValueError):
            normalize_date("not a date")


class TestQueryOptions:
    """Test option defaults and construction."""

    def test_defaults(self):
        options = QueryOptions()
        assert options.level is None
        assert options.date is None
        assert options.include_read is False
        assert options.order is OrderDirection.ASC

    def test_immutable(self):
        with pytest.raises(FrozenInstanceError):
            QueryOptions().include_read = True

    def test_constructor_converts_strings(self):
        options = QueryOptions(level="ERROR", date="2024-01-02", order="desc")
        assert options.level is Level.ERROR
        assert options.date == date(2024, 1, 2)
        assert options.order is OrderDirection.DESC
        assert options == QueryOptions.create(level="error", date=date(2024, 1, 2), order="DESC")

    def test_constructor_rejects_unknown_values(self):
        with pytest.raises(ValueError):
            QueryOptions(order="sideways")
        with pytest.raises(ValueError):
            QueryOptions(level="fatal")
        with pytest.raises(InvalidDateFilter):
            QueryOptions(date="someday")

    def test_create_from_strings(self):
        options = QueryOptions.create(level="ERROR", date="2024-01-02", order="DESC")
        assert options.level is Level.ERROR
        assert options.date == date(2024, 1, 2)
        assert options.order is OrderDirection.DESC

    def test_create_all_levels(self):
        assert QueryOptions.create(level="all").level is None

    def test_create_rejects_unknown_order(self):
        with pytest.raises(ValueError):
            QueryOptions.create(order="sideways")

    def test_create_rejects_bad_date_before_anything_else(self):
        with pytest.raises(InvalidDateFilter):
            QueryOptions.create(date="someday")


class TestQueryBuilder:
    """Test call-site chained construction."""

    def test_chain(self):
        options = (
            QueryBuilder()
            .level("warning")
            .date(date(2024, 1, 1))
            .include_read()
            .order_by("desc")
            .build()
        )
        assert options == QueryOptions(
            level=Level.WARNING,
            date=date(2024, 1, 1),
            include_read=True,
            order=OrderDirection.DESC,
        )

    def test_empty_builder_gives_defaults(self):
        assert QueryBuilder().build() == QueryOptions()

    def test_builds_are_independent(self):
        builder = QueryBuilder().level("error")
        first = builder.build()
        second = builder.order_by("desc").build()
        assert first.order is OrderDirection.ASC
        assert second.order is OrderDirection.DESC
