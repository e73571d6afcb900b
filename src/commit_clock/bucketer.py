"""Classify commit timestamps into six 4-hour time-of-day buckets."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime, tzinfo

from .errors import TimestampError
from .models import BUCKETS, BucketCounts

HOURS_PER_BUCKET = 4


def parse_timestamp(raw: object) -> datetime:
    """Parse an ISO-8601 timestamp such as ``2024-03-01T22:15:00Z``."""
    if not isinstance(raw, str) or not raw:
        raise TimestampError(f"Invalid commit timestamp: {raw!r}")
    text = raw[:-1] + "+00:00" if raw.endswith(("Z", "z")) else raw
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError as e:
        raise TimestampError(f"Invalid commit timestamp: {raw!r}") from e
    if parsed.tzinfo is None:
        raise TimestampError(f"Commit timestamp has no UTC offset: {raw!r}")
    return parsed


def hour_of(raw: object, tz: tzinfo | None = None) -> int:
    """Wall-clock hour of *raw* in *tz* (host local time when ``None``)."""
    return parse_timestamp(raw).astimezone(tz).hour


def classify_hour(hour: int) -> str:
    if not 0 <= hour < 24:
        raise ValueError(f"Hour out of range: {hour}")
    return BUCKETS[hour // HOURS_PER_BUCKET]


def bucket_commits(
    timestamps: Iterable[object],
    tz: tzinfo | None = None,
    counts: BucketCounts | None = None,
) -> BucketCounts:
    counts = counts if counts is not None else BucketCounts()
    for raw in timestamps:
        counts.increment(classify_hour(hour_of(raw, tz)))
    return counts
