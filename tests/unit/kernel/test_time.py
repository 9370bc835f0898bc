"""Unit tests for kernel time helpers and clocks."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta, timezone

import pytest

from storefront_discovery.kernel.text import normalize_query
from storefront_discovery.kernel.time import (
    FrozenClock,
    SystemClock,
    from_millis,
    parse_timestamp,
    to_millis,
)


class TestMillis:
    def test_epoch(self) -> None:
        assert to_millis(datetime(1970, 1, 1, tzinfo=UTC)) == 0

    def test_naive_is_utc(self) -> None:
        assert to_millis(datetime(2026, 1, 1)) == to_millis(datetime(2026, 1, 1, tzinfo=UTC))

    def test_inverse(self) -> None:
        moment = datetime(2024, 12, 15, 10, 30, tzinfo=UTC)
        assert from_millis(to_millis(moment)) == moment


class TestParseTimestamp:
    def test_zulu_suffix(self) -> None:
        assert parse_timestamp("2024-12-15T10:30:00Z") == datetime(2024, 12, 15, 10, 30, tzinfo=UTC)

    def test_offset_is_kept(self) -> None:
        parsed = parse_timestamp("2024-12-15T19:30:00+09:00")
        assert parsed is not None
        assert parsed.utcoffset() == timedelta(hours=9)
        assert parsed == datetime(2024, 12, 15, 10, 30, tzinfo=timezone.utc)

    def test_naive_becomes_utc(self) -> None:
        parsed = parse_timestamp("2024-12-15")
        assert parsed is not None
        assert parsed.tzinfo is UTC

    @pytest.mark.parametrize("value", [None, "", "yesterday", "2024-13-45"])
    def test_invalid_returns_none(self, value: str | None) -> None:
        assert parse_timestamp(value) is None


class TestClocks:
    def test_system_clock_is_aware(self) -> None:
        assert SystemClock().now().tzinfo is not None

    def test_frozen_clock_advance(self) -> None:
        clock = FrozenClock(datetime(2026, 1, 1, tzinfo=UTC))
        before = clock.millis()
        assert clock.millis() == before
        clock.advance(seconds=2)
        assert clock.millis() - before == 2000


class TestNormalizeQuery:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [("  Milk ", "milk"), ("SHOES", "shoes"), ("", ""), (None, ""), ("   ", "")],
    )
    def test_normalize(self, raw: str | None, expected: str) -> None:
        assert normalize_query(raw) == expected
