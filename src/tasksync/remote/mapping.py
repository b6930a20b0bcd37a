"""Conversion between Task and the remote store's record shape.

Every function here is total: missing or malformed fields from the remote
store fall back to defaults instead of raising.
"""

from __future__ import annotations

import math
from typing import Any

from ..models import Priority, Task, is_remote_id, new_local_id
from ..utils import coerce_date, normalize_tags, now_iso

_PRIORITY_VALUES = {p.value for p in Priority}


def coerce_priority(value: Any) -> str:
    """Lower-case priority, defaulting to medium when absent or unrecognised."""
    if value is None:
        return Priority.MEDIUM.value
    normalized = str(value).strip().lower()
    return normalized if normalized in _PRIORITY_VALUES else Priority.MEDIUM.value


def coerce_tags(value: Any) -> list[str]:
    """Tags from a list or a comma separated string."""
    return normalize_tags(value)


def coerce_due_date(value: Any) -> str | None:
    """ISO date string, or None when absent or not a date."""
    parsed = coerce_date(value)
    return parsed.isoformat() if parsed else None


def coerce_order_index(value: Any, default: int | None = None) -> int | None:
    """Integer order index; anything non-integral falls back to ``default``."""
    if isinstance(value, bool):
        return default
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            return default
    return default


def coerce_remote_id(task_id: Any) -> int | float | str:
    """Numeric form of a task id when it has one, otherwise the id unchanged."""
    if not is_remote_id(task_id):
        return task_id
    number = float(str(task_id).strip())
    if number.is_integer():
        return int(number)
    return number


def task_to_remote(task: Task) -> dict[str, Any]:
    """Build the payload the remote store expects for create and update."""
    payload: dict[str, Any] = {}
    if task.is_remote_backed:
        payload["id"] = coerce_remote_id(task.id)
    payload.update(
        {
            "title": task.title,
            "description": task.description or None,
            "dueDate": task.due_date.isoformat() if task.due_date else None,
            "priority": coerce_priority(task.priority).upper(),
            "tags": list(task.tags),
            "completed": task.completed,
            "createdAt": task.created_at,
            "orderIndex": task.order_index if task.order_index is not None else 0,
        }
    )
    return payload


def task_from_remote(record: dict[str, Any], position: int | None = None) -> Task:
    """Build a Task from a remote record.

    Args:
        record: Record as returned by the remote store
        position: Index of the record in the listing, used when it has no orderIndex
    """
    raw_id = record.get("id")
    if raw_id is None or raw_id == "" or isinstance(raw_id, bool):
        task_id = new_local_id()
    elif isinstance(raw_id, float) and math.isfinite(raw_id) and raw_id.is_integer():
        task_id = str(int(raw_id))
    else:
        task_id = str(raw_id)

    return Task(
        id=task_id,
        title=str(record.get("title") or ""),
        description=str(record.get("description") or ""),
        due_date=coerce_date(record.get("dueDate")),
        priority=coerce_priority(record.get("priority")),
        tags=coerce_tags(record.get("tags")),
        completed=bool(record.get("completed")),
        created_at=str(record.get("createdAt") or now_iso()),
        order_index=coerce_order_index(record.get("orderIndex"), default=position),
    )
