"""Remote task store access."""

from .client import RemoteClient, RemoteError
from .mapping import task_from_remote, task_to_remote

__all__ = [
    "RemoteClient",
    "RemoteError",
    "task_from_remote",
    "task_to_remote",
]
