from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Optional


def now_utc() -> datetime:
    """Return current time as tz-aware UTC datetime."""
    return datetime.now(timezone.utc)


def parse_rfc3339(value: str) -> datetime:
    """
    Parse RFC3339 timestamp string into tz-aware UTC datetime.

    Accepts strings like:
      - 2025-01-01T12:34:56Z
      - 2025-01-01T12:34:56.123Z
      - 2025-01-01T12:34:56+09:00
    """
    if not isinstance(value, str) or not value:
        raise ValueError("RFC3339 value must be a non-empty string")

    s = value.strip()
    # Python's fromisoformat doesn't accept 'Z' in 3.9/3.10, so normalize.
    if s.endswith("Z"):
        s = s[:-1] + "+00:00"

    dt = datetime.fromisoformat(s)  # raises ValueError if invalid
    if dt.tzinfo is None:
        raise ValueError("naive timestamp is not allowed; timezone-aware required")
    return dt.astimezone(timezone.utc)


def to_rfc3339(dt: datetime) -> str:
    """
    Convert tz-aware datetime to RFC3339 (UTC, millisecond precision, 'Z').

    Sidecars are shared with JavaScript clients, whose Date.toISOString()
    emits exactly this shape.
    """
    if dt.tzinfo is None:
        raise ValueError("naive datetime is not allowed; timezone-aware required")
    s = dt.astimezone(timezone.utc).isoformat(timespec="milliseconds")
    return s.replace("+00:00", "Z")


def now_rfc3339() -> str:
    return to_rfc3339(now_utc())


def rfc3339_after(previous: Optional[str]) -> str:
    """
    Return the current time, moved forward if needed so it is strictly later
    than `previous` at millisecond precision.
    """
    current = now_utc()
    now = current.replace(microsecond=current.microsecond // 1000 * 1000)
    if previous:
        try:
            prev = parse_rfc3339(previous)
        except ValueError:
            return to_rfc3339(now)
        if now <= prev:
            now = prev + timedelta(milliseconds=1)
    return to_rfc3339(now)
