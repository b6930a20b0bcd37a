"""Task commands for the tasksync CLI."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable
from pathlib import Path
from typing import Any

from ..app import TaskListApp
from ..config import Settings
from ..errors import ValidationError
from ..models import Persisted
from .output import error, format_task, header, info, success

logger = logging.getLogger(__name__)


def _run(settings: Settings, action: Callable[[TaskListApp], Awaitable[int]]) -> int:
    """Load the task list, run one action against it and close the client."""

    async def main() -> int:
        async with TaskListApp(settings) as app:
            return await action(app)

    try:
        return asyncio.run(main())
    except ValidationError as e:
        error(str(e))
        return 1


def _report(result: Persisted | None, verb: str, task_id: str) -> int:
    if result is None:
        error(f"Task not found: {task_id}")
        return 1
    if result.is_remote:
        success(f"{verb} {result.task.id}")
    else:
        success(f"{verb} {result.task.id} (saved locally only)")
    return 0


def run_list(
    settings: Settings,
    filter_mode: str | None = None,
    search: str | None = None,
    sort_key: str | None = None,
) -> int:
    """Print the display projection of the task list."""

    async def action(app: TaskListApp) -> int:
        query = app.view_service.parse(filter_mode, search, sort_key)
        tasks = app.repository.all()
        shown = app.view_service.project(tasks, query)

        for task in shown:
            print(format_task(task))
        active, completed = app.view_service.counts(tasks)
        header(f"{active} active, {completed} completed")
        return 0

    return _run(settings, action)


def run_add(settings: Settings, title: str, **fields: Any) -> int:
    """Create a task."""

    async def action(app: TaskListApp) -> int:
        result = await app.sync_service.create_task(title, **fields)
        return _report(result, "Created", result.task.id)

    return _run(settings, action)


def run_edit(settings: Settings, task_id: str, patch: dict[str, Any]) -> int:
    """Update fields of a task."""
    if not patch:
        info("Nothing to change")
        return 0

    async def action(app: TaskListApp) -> int:
        result = await app.sync_service.update_task(task_id, patch)
        return _report(result, "Updated", task_id)

    return _run(settings, action)


def run_toggle(settings: Settings, task_id: str) -> int:
    """Toggle a task between active and completed."""

    async def action(app: TaskListApp) -> int:
        result = await app.sync_service.toggle_complete(task_id)
        return _report(result, "Toggled", task_id)

    return _run(settings, action)


def run_delete(settings: Settings, task_id: str) -> int:
    """Delete a task."""

    async def action(app: TaskListApp) -> int:
        result = await app.sync_service.delete_task(task_id)
        return _report(result, "Deleted", task_id)

    return _run(settings, action)


def run_clear(settings: Settings) -> int:
    """Remove every completed task."""

    async def action(app: TaskListApp) -> int:
        result = await app.sync_service.clear_completed()
        suffix = "" if result.error is None else " (saved locally only)"
        success(f"Removed {len(result.removed)} completed tasks{suffix}")
        return 0

    return _run(settings, action)


def run_move(settings: Settings, src_id: str, dst_id: str) -> int:
    """Move a task to another task's position."""

    async def action(app: TaskListApp) -> int:
        result = await app.reorder_service.reorder(src_id, dst_id)
        if not result.moved:
            info("Order unchanged")
            return 0
        success(f"Moved {src_id}")
        for outcome in result.failed:
            info(f"Order of {outcome.task_id} saved locally only")
        return 0

    return _run(settings, action)


def run_export(settings: Settings, path: Path) -> int:
    """Write the task list to a file."""

    async def action(app: TaskListApp) -> int:
        count = app.transfer_service.export_tasks(path)
        success(f"Exported {count} tasks to {path}")
        return 0

    return _run(settings, action)


def run_import(settings: Settings, path: Path) -> int:
    """Import tasks from a file."""

    async def action(app: TaskListApp) -> int:
        result = await app.transfer_service.import_file(path)
        success(f"Imported {len(result.items)} tasks")
        if result.local_count:
            info(f"{result.local_count} saved locally only")
        return 0

    return _run(settings, action)
