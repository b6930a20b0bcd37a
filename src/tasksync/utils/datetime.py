"""Utilities for datetime handling."""

from datetime import UTC, date, datetime


def now_utc() -> datetime:
    """Get current UTC datetime."""
    return datetime.now(UTC)


def now_iso() -> str:
    """Current UTC time as an ISO string with a ``Z`` suffix."""
    return now_utc().isoformat(timespec="milliseconds").replace("+00:00", "Z")


def from_iso(value: str) -> datetime:
    """Parse ISO format string to datetime."""
    # Handle both 'Z' suffix and explicit timezone
    return datetime.fromisoformat(value.replace("Z", "+00:00"))


def timestamp_of(value: str | None) -> float:
    """Seconds since the epoch for an ISO timestamp, for ordering.

    Naive values are read as UTC. Anything unparseable sorts as the oldest
    possible time instead of raising.
    """
    if not value:
        return float("-inf")
    try:
        parsed = from_iso(value)
    except ValueError:
        return float("-inf")
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=UTC)
    return parsed.timestamp()


def coerce_date(value: object) -> date | None:
    """Read a calendar date, returning None for absent or malformed input."""
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        return date.fromisoformat(str(value).strip()[:10])
    except ValueError:
        return None
