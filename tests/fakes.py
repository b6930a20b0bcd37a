"""Test doubles for the remote task store."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from tasksync.models import Task
from tasksync.remote import RemoteError


class FakeRemote:
    """
    In-memory remote store with call counters.

    Fails with a transport RemoteError when ``fail`` is set, when an
    update/delete targets an id in ``fail_ids`` or when a create carries a
    title in ``fail_titles``. ``on_call`` runs before each call is answered,
    which lets tests change the repository while a call is in flight.
    """

    def __init__(self, records: list[dict[str, Any]] | None = None, next_id: int = 100) -> None:
        self.records = [dict(r) for r in records or []]
        self.calls: list[tuple[str, Any]] = []
        self.fail = False
        self.fail_ids: set[int | str] = set()
        self.fail_titles: set[str] = set()
        self.on_call: Callable[[str, Any], None] | None = None
        self._next_id = next_id

    def count(self, name: str) -> int:
        """Number of calls made to one endpoint."""
        return sum(1 for call, _ in self.calls if call == name)

    def _record_call(self, name: str, arg: Any) -> None:
        self.calls.append((name, arg))
        if self.on_call is not None:
            self.on_call(name, arg)
        if self.fail:
            raise RemoteError(0, "Request failed: connection refused")

    async def list_tasks(self) -> list[dict[str, Any]]:
        self._record_call("list", None)
        return [dict(r) for r in self.records]

    async def create_task(self, payload: dict[str, Any]) -> dict[str, Any]:
        self._record_call("create", payload)
        if payload.get("title") in self.fail_titles:
            raise RemoteError(500, "Internal Server Error")
        record = {**payload, "id": self._next_id}
        self._next_id += 1
        self.records.append(record)
        return dict(record)

    async def update_task(self, remote_id: int, payload: dict[str, Any]) -> None:
        self._record_call("update", (remote_id, payload))
        if remote_id in self.fail_ids:
            raise RemoteError(404, "Not Found")

    async def delete_task(self, remote_id: int | str) -> None:
        self._record_call("delete", remote_id)
        if remote_id in self.fail_ids:
            raise RemoteError(404, "Not Found")
        self.records = [r for r in self.records if r.get("id") != remote_id]

    async def delete_completed(self) -> None:
        self._record_call("delete_completed", None)
        self.records = [r for r in self.records if not r.get("completed")]


def make_task(task_id: str, title: str | None = None, **fields: Any) -> Task:
    """Build a task with a readable default title."""
    return Task(id=task_id, title=title or f"Task {task_id}", **fields)
