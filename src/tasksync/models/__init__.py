"""Data models."""

from .outcome import (
    ClearResult,
    ImportResult,
    ItemOutcome,
    PersistOutcome,
    Persisted,
    ReorderResult,
)
from .task import (
    FilterMode,
    Priority,
    SortKey,
    Task,
    is_remote_id,
    new_local_id,
)

__all__ = [
    "ClearResult",
    "FilterMode",
    "ImportResult",
    "ItemOutcome",
    "PersistOutcome",
    "Persisted",
    "Priority",
    "ReorderResult",
    "SortKey",
    "Task",
    "is_remote_id",
    "new_local_id",
]
