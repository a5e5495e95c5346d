"""UTC datetime helpers for session timestamps.

Session expiry values are timezone-aware UTC everywhere in the service.
"""

from datetime import UTC, datetime


def utc_now() -> datetime:
    """Return the current timezone-aware UTC datetime."""
    return datetime.now(UTC)


def from_timestamp_utc(timestamp: float) -> datetime:
    """Return the aware UTC datetime for a Unix timestamp (e.g. a JWT ``exp`` claim)."""
    return datetime.fromtimestamp(timestamp, tz=UTC)
