"""
Time Utilities

Backend policy:
- Store/query in database as UTC (naive) timestamps.
- Use UTC-aware datetimes at the domain/API boundary.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional

UTC = timezone.utc


def utc_now() -> datetime:
    """Return current UTC time (timezone-aware)."""
    return datetime.now(UTC)


def utc_now_naive() -> datetime:
    """Return current UTC time without tzinfo, as stored in the database."""
    return utc_now().replace(tzinfo=None)


def ensure_utc(dt: Optional[datetime]) -> Optional[datetime]:
    """
    Ensure a datetime is UTC-aware.

    - If `dt` is naive, treat it as UTC.
    - If `dt` is timezone-aware, convert it to UTC.
    """
    if dt is None:
        return None
    if dt.tzinfo is None:
        return dt.replace(tzinfo=UTC)
    return dt.astimezone(UTC)
