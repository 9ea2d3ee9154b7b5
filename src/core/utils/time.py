"""
Time-related utilities for the application.

All timestamps are generated in UTC.
"""

from datetime import datetime, timezone
import time


def utc_now_iso() -> str:
    """Return current UTC time in ISO-8601 format.

    Example:
        2024-01-15T10:42:31.123456+00:00
    """
    return datetime.now(timezone.utc).isoformat()


def epoch_millis() -> int:
    """Return milliseconds since the Unix epoch.

    Used as the uniqueness component of resized image keys.
    """
    return time.time_ns() // 1_000_000
