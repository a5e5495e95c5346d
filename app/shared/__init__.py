"""Shared utilities: telemetry and cross-cutting helpers. No business logic."""

from app.shared.telemetry import setup_logging
from app.shared.utils import from_timestamp_utc, utc_now

__all__ = [
    "from_timestamp_utc",
    "setup_logging",
    "utc_now",
]
