"""Utilities for reading tag lists."""


def split_tags(value: str) -> list[str]:
    """
    Split a comma separated tag string.

    Example: "x, y,, z " -> ["x", "y", "z"]
    """
    return [part.strip() for part in value.split(",") if part.strip()]


def normalize_tags(value: object) -> list[str]:
    """Accept a list or a comma separated string; anything else is no tags."""
    if isinstance(value, str):
        return split_tags(value)
    if isinstance(value, list | tuple):
        return [str(tag) for tag in value if tag is not None and str(tag) != ""]
    return []
