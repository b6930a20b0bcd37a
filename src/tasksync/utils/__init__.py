"""Utility functions."""

from .datetime import coerce_date, from_iso, now_iso, now_utc, timestamp_of
from .tags import normalize_tags, split_tags

__all__ = [
    "coerce_date",
    "from_iso",
    "normalize_tags",
    "now_iso",
    "now_utc",
    "split_tags",
    "timestamp_of",
]
