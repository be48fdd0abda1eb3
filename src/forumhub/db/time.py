# src/forumhub/db/time.py
"""Time utilities for stored records."""

from datetime import UTC, datetime


def utcnow() -> datetime:
    """Return the current UTC time as a naive datetime.

    Stored timestamps carry no zone; presentation attaches UTC and converts.
    """
    return datetime.now(UTC).replace(tzinfo=None)
