"""Shared fixtures."""

from pathlib import Path

import pytest

from tasksync.repositories import LocalCacheRepository
from tasksync.services import ReorderService, SyncService

from .fakes import FakeRemote


@pytest.fixture
def anyio_backend() -> str:
    """Run async tests on asyncio only."""
    return "asyncio"


@pytest.fixture
def cache_dir(tmp_path: Path) -> Path:
    """Directory for the local cache."""
    return tmp_path / "cache"


@pytest.fixture
def repo(cache_dir: Path) -> LocalCacheRepository:
    """Create an empty repository backed by a temporary directory."""
    return LocalCacheRepository(cache_dir)


@pytest.fixture
def remote() -> FakeRemote:
    """Create a reachable fake remote store."""
    return FakeRemote()


@pytest.fixture
def sync_service(repo: LocalCacheRepository, remote: FakeRemote) -> SyncService:
    """Create a SyncService over the repository and fake remote."""
    return SyncService(repo, remote)


@pytest.fixture
def reorder_service(sync_service: SyncService) -> ReorderService:
    """Create a ReorderService sharing the sync service's repository."""
    return ReorderService(sync_service)

