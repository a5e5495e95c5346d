"""Shared utilities: UTC datetime helpers."""

from app.shared.utils.datetime import from_timestamp_utc, utc_now

__all__ = [
    "from_timestamp_utc",
    "utc_now",
]
