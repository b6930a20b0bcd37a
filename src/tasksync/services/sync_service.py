"""Service that keeps the local task list in step with the remote store."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Mapping, Sequence
from datetime import date
from typing import TYPE_CHECKING, Any

import pydantic

from ..errors import NotFoundError, ValidationError
from ..models import (
    ClearResult,
    ImportResult,
    ItemOutcome,
    Persisted,
    PersistOutcome,
    Task,
    new_local_id,
)
from ..remote import RemoteError, task_from_remote, task_to_remote
from ..remote.mapping import coerce_priority, coerce_remote_id
from ..utils import coerce_date, normalize_tags, now_iso

if TYPE_CHECKING:
    from ..remote.protocol import RemoteStoreProtocol
    from ..repositories import RepositoryProtocol

logger = logging.getLogger(__name__)

# Fields an update patch may not touch
_IMMUTABLE_FIELDS = {"id", "created_at"}


class SyncService:
    """Applies every task mutation to the remote store and the local cache.

    Each operation tries the remote store first. Any RemoteError is caught
    and the change is kept locally instead, so a mutation never fails
    because the network did. The outcome says which path was taken.
    """

    def __init__(self, repository: RepositoryProtocol, remote: RemoteStoreProtocol) -> None:
        self.repository = repository
        self.remote = remote

    async def load(self) -> list[Task]:
        """Load tasks from the remote store, falling back to the local cache."""
        try:
            records = await self.remote.list_tasks()
        except RemoteError as e:
            logger.warning("Remote load failed, falling back to local cache: %s", e)
            return self.repository.load()

        tasks = [task_from_remote(record, position=idx) for idx, record in enumerate(records)]
        self.repository.replace_all(tasks)
        self.repository.persist()
        logger.info("Loaded %d tasks from remote", len(tasks))
        return tasks

    async def create_task(
        self,
        title: str,
        description: str = "",
        due_date: date | str | None = None,
        priority: str | None = None,
        tags: list[str] | str | None = None,
    ) -> Persisted:
        """
        Create a task.

        Raises:
            ValidationError: If the title is empty.
        """
        title = (title or "").strip()
        if not title:
            raise ValidationError("Title is required")

        draft = Task(
            id=new_local_id(),
            title=title,
            description=(description or "").strip(),
            due_date=coerce_date(due_date),
            priority=coerce_priority(priority),
            tags=normalize_tags(tags),
            created_at=now_iso(),
            order_index=len(self.repository.all()),
        )

        try:
            saved = await self.remote.create_task(task_to_remote(draft))
            result = Persisted.remote(task_from_remote(saved, position=draft.order_index))
        except RemoteError as e:
            logger.warning("Remote create failed, keeping task locally: %s", e)
            result = Persisted.local_only(draft, e)

        self.repository.append(result.task)
        self.repository.persist()
        logger.info("Task created: %s (%s)", result.task.id, result.outcome.value)
        return result

    async def update_task(self, task_id: str, patch: Mapping[str, Any]) -> Persisted | None:
        """
        Shallow-merge ``patch`` over an existing task.

        Remote-backed tasks are also sent to the remote store; local-only
        tasks never are. The local write happens either way.

        Returns:
            The outcome, or None if the task does not exist.

        Raises:
            ValidationError: If the patch is invalid.
        """
        try:
            existing = self.repository.require(str(task_id))
        except NotFoundError as e:
            logger.debug("update_task: %s", e)
            return None

        merged = self._merge(existing, patch)

        error: RemoteError | None = None
        sent = False
        if existing.is_remote_backed:
            try:
                await self.remote.update_task(
                    coerce_remote_id(existing.id), task_to_remote(merged)
                )
                sent = True
            except RemoteError as e:
                logger.warning("Remote update of %s failed, updating locally: %s", existing.id, e)
                error = e

        # Re-apply the patch to the task as it is now; a reorder may have run meanwhile
        current = self.repository.get(existing.id)
        if current is None:
            logger.debug("update_task: %s was removed while updating", existing.id)
        else:
            merged = self._merge(current, patch)
            self.repository.replace(merged)

        result = Persisted.remote(merged) if sent else Persisted.local_only(merged, error)
        self.repository.persist()
        logger.info("Task updated: %s (%s)", merged.id, result.outcome.value)
        return result

    async def delete_task(self, task_id: str) -> Persisted | None:
        """Delete a task by ID. Returns None if it does not exist."""
        try:
            existing = self.repository.require(task_id)
        except NotFoundError as e:
            logger.debug("delete_task: %s", e)
            return None

        try:
            await self.remote.delete_task(coerce_remote_id(existing.id))
            result = Persisted.remote(existing)
        except RemoteError as e:
            logger.warning("Remote delete of %s failed, deleting locally: %s", existing.id, e)
            result = Persisted.local_only(existing, e)

        self.repository.remove(existing.id)
        self.repository.persist()
        logger.info("Task deleted: %s (%s)", existing.id, result.outcome.value)
        return result

    async def toggle_complete(self, task_id: str) -> Persisted | None:
        """Flip a task's completed flag."""
        task = self.repository.get(task_id)
        if task is None:
            logger.debug("toggle_complete: task not found: %s", task_id)
            return None
        return await self.update_task(task_id, {"completed": not task.completed})

    async def clear_completed(self) -> ClearResult:
        """Drop every completed task, remotely in one call and locally regardless."""
        result = ClearResult()
        try:
            await self.remote.delete_completed()
        except RemoteError as e:
            logger.warning("Remote clear completed failed, clearing locally: %s", e)
            result.outcome = PersistOutcome.LOCAL_ONLY
            result.error = e

        tasks = self.repository.all()
        result.removed = [t.id for t in tasks if t.completed]
        self.repository.replace_all([t for t in tasks if not t.completed])
        self.repository.persist()
        logger.info("Cleared %d completed tasks (%s)", len(result.removed), result.outcome.value)
        return result

    async def import_tasks(self, records: Sequence[Mapping[str, Any]]) -> ImportResult:
        """
        Create a task for each record.

        Each record is created on the remote store concurrently. A failure
        only affects its own record, which is then kept locally with its
        defaulted fields. Tasks are appended in input order.

        Raises:
            ValidationError: If an element is not a mapping. Nothing is imported.
        """
        for idx, record in enumerate(records):
            if not isinstance(record, Mapping):
                raise ValidationError(f"Import item {idx} is not an object")

        # Records without an orderIndex go after the existing tasks
        base = len(self.repository.all())
        drafts = [self._import_draft(record, base + idx) for idx, record in enumerate(records)]
        items = await asyncio.gather(*(self._import_one(draft) for draft in drafts))

        for item in items:
            self.repository.append(item.task)
        self.repository.persist()

        result = ImportResult(items=list(items))
        logger.info(
            "Imported %d tasks (%d remote, %d local only)",
            len(result.items),
            result.remote_count,
            result.local_count,
        )
        return result

    def _import_draft(self, record: Mapping[str, Any], position: int) -> Task:
        """Fill in id, createdAt, tags and orderIndex the record may lack."""
        draft = Task.from_record(dict(record), position=position)
        return draft.model_copy(update={"priority": coerce_priority(draft.priority)})

    async def push_order(self, tasks: Sequence[Task]) -> list[ItemOutcome]:
        """
        Send every remote-backed task to the remote store, concurrently.

        Best effort: a failed update is logged and reported in its outcome,
        and never stops the others. The repository is not touched.
        """
        outcomes = await asyncio.gather(
            *(self._push_one(task) for task in tasks if task.is_remote_backed)
        )
        failed = [outcome for outcome in outcomes if not outcome.ok]
        if failed:
            logger.warning(
                "Failed to persist new order for %d of %d tasks", len(failed), len(outcomes)
            )
        return list(outcomes)

    async def _push_one(self, task: Task) -> ItemOutcome:
        try:
            await self.remote.update_task(coerce_remote_id(task.id), task_to_remote(task))
        except RemoteError as e:
            logger.warning("Failed to persist order of %s: %s", task.id, e)
            return ItemOutcome(task_id=task.id, error=e)
        return ItemOutcome(task_id=task.id)

    async def _import_one(self, draft: Task) -> Persisted:
        try:
            saved = await self.remote.create_task(task_to_remote(draft))
        except RemoteError as e:
            logger.warning("Remote create failed for imported task %s: %s", draft.id, e)
            return Persisted.local_only(draft, e)
        return Persisted.remote(task_from_remote(saved, position=draft.order_index))

    def _merge(self, existing: Task, patch: Mapping[str, Any]) -> Task:
        """Validate a patch and return the merged task."""
        unknown = set(patch) - set(Task.model_fields)
        if unknown:
            raise ValidationError(f"Unknown task fields: {', '.join(sorted(unknown))}")
        locked = set(patch) & _IMMUTABLE_FIELDS
        if locked:
            raise ValidationError(f"Fields cannot be changed: {', '.join(sorted(locked))}")

        changes = dict(patch)
        if "title" in changes:
            changes["title"] = (changes["title"] or "").strip()
            if not changes["title"]:
                raise ValidationError("Title is required")
        if "tags" in changes:
            changes["tags"] = normalize_tags(changes["tags"])
        if "priority" in changes:
            changes["priority"] = coerce_priority(changes["priority"])
        if "due_date" in changes:
            changes["due_date"] = coerce_date(changes["due_date"])

        try:
            return Task.model_validate({**existing.model_dump(), **changes})
        except pydantic.ValidationError as e:
            raise ValidationError(str(e)) from e
