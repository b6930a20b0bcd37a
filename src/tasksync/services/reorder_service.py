"""Service for drag-and-drop reordering."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ..models import ReorderResult, Task

if TYPE_CHECKING:
    from .sync_service import SyncService

logger = logging.getLogger(__name__)


def move_in_sequence(tasks: list[Task], src_id: str, dst_id: str) -> list[Task] | None:
    """
    Move the source task to the destination task's position.

    This is an insertion, not a swap: every task between the two positions
    shifts by one. Returns a new list, or None if either ID is missing.
    """
    ids = [task.id for task in tasks]
    if src_id not in ids or dst_id not in ids:
        return None

    src_idx = ids.index(src_id)
    dst_idx = ids.index(dst_id)

    moved = list(tasks)
    item = moved.pop(src_idx)
    moved.insert(dst_idx, item)
    return moved


class ReorderService:
    """Reorders tasks locally and hands the new order to the sync service."""

    def __init__(self, sync_service: SyncService) -> None:
        self.sync_service = sync_service

    async def reorder(self, src_id: str, dst_id: str) -> ReorderResult:
        """
        Drop ``src_id`` onto ``dst_id``.

        Every task's order index is reassigned to its new position and the
        local order is saved before anything goes over the network.
        Remote failures are reported in the result but never undo the
        local reorder.
        """
        src_id, dst_id = str(src_id), str(dst_id)
        if src_id == dst_id:
            return ReorderResult(moved=False)

        repository = self.sync_service.repository
        moved = move_in_sequence(repository.all(), src_id, dst_id)
        if moved is None:
            logger.debug("reorder: task not found: %s or %s", src_id, dst_id)
            return ReorderResult(moved=False)

        reindexed = [task.model_copy(update={"order_index": idx}) for idx, task in enumerate(moved)]
        repository.replace_all(reindexed)
        repository.persist()
        logger.debug("Task reordered: %s -> position of %s", src_id, dst_id)

        outcomes = await self.sync_service.push_order(reindexed)
        return ReorderResult(moved=True, outcomes=outcomes)
