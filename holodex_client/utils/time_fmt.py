"""ISO-8601 timestamp helpers (millisecond precision, explicit offset)."""

from __future__ import annotations

from datetime import datetime, timezone


def format_timestamp(value: datetime) -> str:
    """Render an aware datetime as UTC ISO-8601: YYYY-MM-DDTHH:MM:SS.mmmZ"""
    if value.tzinfo is None:
        raise ValueError("timestamp must carry a UTC offset")
    utc = value.astimezone(timezone.utc)
    ms = utc.microsecond // 1000
    return f"{utc:%Y-%m-%dT%H:%M:%S}.{ms:03d}Z"


def parse_timestamp(value: object) -> datetime:
    """Parse an ISO-8601 timestamp that carries an explicit offset.

    Raises ValueError for anything else, including date-only strings and
    offset-less local times.
    """
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, str) and "T" in value:
        parsed = datetime.fromisoformat(value)
    else:
        raise ValueError(f"not an ISO-8601 timestamp: {value!r}")
    if parsed.tzinfo is None:
        raise ValueError(f"timestamp has no UTC offset: {value!r}")
    return parsed
