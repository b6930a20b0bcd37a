"""Result models for operations that may degrade to local-only."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

from .task import Task

if TYPE_CHECKING:
    from ..remote.client import RemoteError


class PersistOutcome(str, Enum):
    """Where a mutation ended up."""

    REMOTE = "remote"  # Remote store accepted it, local cache updated too
    LOCAL_ONLY = "local_only"  # Remote skipped or failed, local cache only


@dataclass(frozen=True)
class Persisted:
    """A task together with how its mutation was persisted."""

    task: Task
    outcome: PersistOutcome
    error: RemoteError | None = None  # Set when the remote call was attempted and failed

    @classmethod
    def remote(cls, task: Task) -> Persisted:
        return cls(task=task, outcome=PersistOutcome.REMOTE)

    @classmethod
    def local_only(cls, task: Task, error: RemoteError | None = None) -> Persisted:
        return cls(task=task, outcome=PersistOutcome.LOCAL_ONLY, error=error)

    @property
    def is_remote(self) -> bool:
        """Whether the remote store holds this change."""
        return self.outcome is PersistOutcome.REMOTE


@dataclass(frozen=True)
class ItemOutcome:
    """Outcome of one remote call inside a fan-out."""

    task_id: str
    error: RemoteError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class ImportResult:
    """Result of a bulk import."""

    items: list[Persisted] = field(default_factory=list)

    @property
    def tasks(self) -> list[Task]:
        """Imported tasks in input order."""
        return [item.task for item in self.items]

    @property
    def remote_count(self) -> int:
        """Number of items the remote store accepted."""
        return sum(1 for item in self.items if item.is_remote)

    @property
    def local_count(self) -> int:
        """Number of items kept locally only."""
        return len(self.items) - self.remote_count


@dataclass
class ClearResult:
    """Result of clearing completed tasks."""

    removed: list[str] = field(default_factory=list)  # Task IDs dropped locally
    outcome: PersistOutcome = PersistOutcome.REMOTE
    error: RemoteError | None = None


@dataclass
class ReorderResult:
    """Result of a drag-and-drop reorder."""

    moved: bool = False
    outcomes: list[ItemOutcome] = field(default_factory=list)  # One per remote-backed task

    @property
    def failed(self) -> list[ItemOutcome]:
        """Remote updates that did not go through."""
        return [outcome for outcome in self.outcomes if not outcome.ok]
