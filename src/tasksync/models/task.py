"""Task domain model."""

from __future__ import annotations

import math
import secrets
import string
from datetime import date
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field

from ..utils import coerce_date, normalize_tags, now_iso

LOCAL_ID_LENGTH = 7
_LOCAL_ID_ALPHABET = string.ascii_lowercase + string.digits


class Priority(str, Enum):
    """Recognised task priorities, highest first."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class FilterMode(str, Enum):
    """Completion filter applied by the view."""

    ALL = "all"
    ACTIVE = "active"
    COMPLETED = "completed"


class SortKey(str, Enum):
    """Secondary sort applied within a priority group."""

    MANUAL = "manual"
    CREATED_AT = "createdAt"
    DUE_DATE = "dueDate"
    PRIORITY = "priority"


def is_remote_id(task_id: Any) -> bool:
    """Return True if the id was assigned by the remote store (parses as a finite number)."""
    if task_id is None or isinstance(task_id, bool):
        return False
    try:
        value = float(str(task_id).strip())
    except ValueError:
        return False
    return math.isfinite(value)


def new_local_id() -> str:
    """Generate an opaque client-side id that never parses as a number."""
    while True:
        candidate = "".join(secrets.choice(_LOCAL_ID_ALPHABET) for _ in range(LOCAL_ID_LENGTH))
        if not is_remote_id(candidate):
            return candidate


class Task(BaseModel):
    """A single task in the list."""

    id: str  # "42" once the remote store has it, an opaque local id otherwise
    title: str
    description: str = ""
    due_date: date | None = None
    priority: str = Priority.MEDIUM.value  # String so unknown values from old caches survive
    tags: list[str] = Field(default_factory=list)
    completed: bool = False
    created_at: str = Field(default_factory=now_iso)
    order_index: int | None = None

    @property
    def is_remote_backed(self) -> bool:
        """Whether remote update/delete calls may target this task."""
        return is_remote_id(self.id)

    def is_overdue(self, today: date | None = None) -> bool:
        """True if the task is open and its due date has passed."""
        if self.due_date is None or self.completed:
            return False
        return self.due_date < (today or date.today())

    def to_record(self) -> dict[str, Any]:
        """Convert to the camelCase record used by the cache and exports."""
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "dueDate": self.due_date.isoformat() if self.due_date else None,
            "priority": self.priority,
            "tags": list(self.tags),
            "completed": self.completed,
            "createdAt": self.created_at,
            "orderIndex": self.order_index,
        }

    @classmethod
    def from_record(cls, record: dict[str, Any], position: int | None = None) -> Task:
        """Create a Task from a stored record, filling anything missing.

        Records written by earlier versions may lack ``id``, ``createdAt``
        or ``tags``; those get a fresh local id, the current time and an
        empty list. ``position`` is used when ``orderIndex`` is absent.
        """
        order_index = record.get("orderIndex")
        if not isinstance(order_index, int) or isinstance(order_index, bool):
            order_index = position

        task_id = record.get("id")

        return cls(
            id=str(task_id) if task_id not in (None, "") else new_local_id(),
            title=str(record.get("title") or ""),
            description=str(record.get("description") or ""),
            due_date=coerce_date(record.get("dueDate")),
            priority=str(record.get("priority") or Priority.MEDIUM.value).lower(),
            tags=normalize_tags(record.get("tags")),
            completed=bool(record.get("completed", False)),
            created_at=str(record.get("createdAt") or now_iso()),
            order_index=order_index,
        )
