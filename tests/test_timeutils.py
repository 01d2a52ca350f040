from __future__ import annotations

from datetime import UTC, datetime, timedelta, timezone

from repomirror.timeutils import days_since, ensure_aware, parse_timestamp, utcnow


def test_parse_timestamp_accepts_zulu_suffix() -> None:
    parsed = parse_timestamp("2024-01-31T12:00:00Z")
    assert parsed == datetime(2024, 1, 31, 12, tzinfo=UTC)
    assert parsed.tzinfo is not None


def test_parse_timestamp_normalises_offsets_to_utc() -> None:
    parsed = parse_timestamp("2024-01-31T14:00:00+02:00")
    assert parsed == datetime(2024, 1, 31, 12, tzinfo=UTC)
    assert parsed.utcoffset() == timedelta(0)


def test_ensure_aware_treats_naive_as_utc() -> None:
    naive = datetime(2024, 5, 1, 8, 30)
    assert ensure_aware(naive) == datetime(2024, 5, 1, 8, 30, tzinfo=UTC)

    eastern = datetime(2024, 5, 1, 8, 30, tzinfo=timezone(timedelta(hours=-5)))
    assert ensure_aware(eastern) is eastern


def test_days_since_rounds_partial_days_up() -> None:
    now = datetime(2025, 1, 10, 12, tzinfo=UTC)

    assert days_since(now - timedelta(days=3), now) == 3
    assert days_since(now - timedelta(days=3, hours=1), now) == 4
    assert days_since(now - timedelta(minutes=1), now) == 1
    assert days_since(now, now) == 0


def test_days_since_ignores_clock_skew_direction() -> None:
    now = datetime(2025, 1, 10, 12, tzinfo=UTC)
    assert days_since(now + timedelta(days=2), now) == 2


def test_days_since_mixes_naive_and_aware() -> None:
    now = datetime(2025, 1, 10, 12, tzinfo=UTC)
    assert days_since(datetime(2025, 1, 9, 12), now) == 1


def test_utcnow_is_aware() -> None:
    assert utcnow().tzinfo is not None
