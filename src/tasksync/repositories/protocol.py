"""Repository protocol for the local task collection."""

from typing import Protocol

from ..models import Task


class RepositoryProtocol(Protocol):
    """Interface for the in-memory task collection and its durable cache.

    The repository is a plain data holder: it never talks to the network
    and never validates task fields. Lookups are always by task ID, so
    callers stay correct if the collection changed while they awaited a
    remote call.
    """

    def load(self) -> list[Task]:
        """Read the collection from durable storage into memory.

        Returns:
            The loaded tasks. Missing storage yields an empty list.
        """
        ...

    def replace_all(self, tasks: list[Task]) -> None:
        """Replace the in-memory collection.

        Args:
            tasks: The new collection, in manual order.
        """
        ...

    def persist(self) -> None:
        """Write the full in-memory collection to durable storage."""
        ...

    def all(self) -> list[Task]:
        """Return a copy of the collection in manual order."""
        ...

    def get(self, task_id: str) -> Task | None:
        """Get a single task by ID, or None."""
        ...

    def require(self, task_id: str) -> Task:
        """Get a single task by ID.

        Raises:
            NotFoundError: If no task has this ID.
        """
        ...

    def append(self, task: Task) -> None:
        """Add a task at the end of the collection."""
        ...

    def replace(self, task: Task) -> bool:
        """Swap in a new version of the task with the same ID.

        Returns:
            False if the task is no longer present.
        """
        ...

    def remove(self, task_id: str) -> Task | None:
        """Remove a task by ID.

        Returns:
            The removed task, or None if it was not present.
        """
        ...
