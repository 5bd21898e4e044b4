from __future__ import annotations

import math
from datetime import datetime, timedelta, timezone


def now_utc() -> datetime:
    """Return current time as tz-aware UTC datetime."""
    return datetime.now(timezone.utc)


def normalize_dt(dt: datetime) -> datetime:
    """Ensure datetime is tz-aware. Raises if naive."""
    if not isinstance(dt, datetime):
        raise TypeError("dt must be a datetime")
    if dt.tzinfo is None:
        raise ValueError("naive datetime is not allowed; timezone-aware required")
    return dt


def from_unix(value: int | float | str) -> datetime:
    """
    Convert a Slack unix timestamp (seconds) into a tz-aware UTC datetime.

    Slack returns `created` as an int, but some payloads carry it as a string.
    """
    if isinstance(value, bool):
        raise TypeError("unix timestamp must be a number")
    seconds = float(value)  # raises ValueError for junk strings
    return datetime.fromtimestamp(seconds, tz=timezone.utc)


def retention_cutoff(now: datetime, days: int) -> datetime:
    """Return the point in time before which files are eligible for cleanup."""
    if days < 0:
        raise ValueError("days must not be negative")
    return normalize_dt(now).astimezone(timezone.utc) - timedelta(days=days)


def to_slack_ts_to(cutoff: datetime) -> int:
    """
    Return the `ts_to` value selecting files created strictly before cutoff.

    Slack treats `ts_to` as inclusive and only accepts whole seconds.
    """
    return math.ceil(normalize_dt(cutoff).timestamp()) - 1
