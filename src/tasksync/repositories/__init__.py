"""Repository layer for data access."""

from .local_cache import LocalCacheRepository
from .protocol import RepositoryProtocol

__all__ = [
    "LocalCacheRepository",
    "RepositoryProtocol",
]
