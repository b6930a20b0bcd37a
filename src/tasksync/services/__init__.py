"""Service layer for business logic."""

from .reorder_service import ReorderService, move_in_sequence
from .sync_service import SyncService
from .transfer_service import TransferService
from .view_service import ViewQuery, ViewService, project

__all__ = [
    "ReorderService",
    "SyncService",
    "TransferService",
    "ViewQuery",
    "ViewService",
    "move_in_sequence",
    "project",
]
