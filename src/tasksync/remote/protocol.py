"""Protocol for the remote task store."""

from typing import Any, Protocol


class RemoteStoreProtocol(Protocol):
    """The five request shapes the services send to the remote store.

    Every method raises RemoteError on failure and never retries.
    """

    async def list_tasks(self) -> list[dict[str, Any]]:
        """Fetch every task record."""
        ...

    async def create_task(self, payload: dict[str, Any]) -> dict[str, Any]:
        """Create one task and return the stored record with its numeric id."""
        ...

    async def update_task(self, remote_id: int, payload: dict[str, Any]) -> None:
        """Replace one task by numeric id."""
        ...

    async def delete_task(self, remote_id: int | str) -> None:
        """Delete one task by id."""
        ...

    async def delete_completed(self) -> None:
        """Delete every completed task."""
        ...
