"""Wiring of the tasksync services."""

from __future__ import annotations

from typing import Any

from .config import Settings
from .remote import RemoteClient
from .repositories import LocalCacheRepository
from .services import ReorderService, SyncService, TransferService, ViewService


class TaskListApp:
    """Owns the repository and every service built on it.

    Use as an async context manager so the HTTP client is closed.
    """

    def __init__(self, settings: Settings, remote: RemoteClient | None = None) -> None:
        self.settings = settings
        self.repository = LocalCacheRepository(settings.cache_dir, settings.cache_key)
        self.remote = remote or RemoteClient(settings.remote_url, timeout=settings.timeout)
        self.sync_service = SyncService(self.repository, self.remote)
        self.reorder_service = ReorderService(self.sync_service)
        self.view_service = ViewService()
        self.transfer_service = TransferService(self.sync_service)

    async def __aenter__(self) -> TaskListApp:
        await self.sync_service.load()
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.remote.aclose()
