"""Timestamp helpers used by the scorers and the GitHub client."""

from __future__ import annotations

import math
from datetime import UTC, datetime

_SECONDS_PER_DAY = 24 * 60 * 60


def utcnow() -> datetime:
    """Return the current time as an aware UTC datetime."""
    return datetime.now(UTC)


def ensure_aware(value: datetime) -> datetime:
    """Treat naive datetimes as UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value


def parse_timestamp(text: str) -> datetime:
    """Parse an ISO-8601 timestamp (``2024-01-31T12:00:00Z`` style) into aware UTC."""
    cleaned = text.strip()
    if cleaned.endswith("Z"):
        cleaned = cleaned[:-1] + "+00:00"
    parsed = datetime.fromisoformat(cleaned)
    return ensure_aware(parsed).astimezone(UTC)


def days_since(timestamp: datetime, now: datetime) -> int:
    """Whole days between ``timestamp`` and ``now``, rounded up.

    The absolute difference is used so clock skew never produces a negative age.
    """
    delta = ensure_aware(now) - ensure_aware(timestamp)
    return math.ceil(abs(delta.total_seconds()) / _SECONDS_PER_DAY)


__all__ = ["days_since", "ensure_aware", "parse_timestamp", "utcnow"]
