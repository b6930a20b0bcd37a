"""Local cache repository: in-memory task list backed by a YAML file."""

from __future__ import annotations

import logging
from pathlib import Path

import yaml

from ..errors import NotFoundError
from ..models import Task

logger = logging.getLogger(__name__)


class LocalCacheRepository:
    """
    In-memory task collection with durable persistence.

    The whole collection is stored as one YAML document under a fixed
    namespace key (``<cache_dir>/<key>.yaml``). The in-memory list order
    is the manual order.
    """

    DEFAULT_KEY = "tasks_v1"

    def __init__(self, cache_dir: Path, key: str = DEFAULT_KEY) -> None:
        """
        Initialize repository.

        Args:
            cache_dir: Directory holding the cache file
            key: Namespace key naming the cache record
        """
        self.cache_dir = cache_dir
        self.key = key
        self._tasks: list[Task] = []

    @property
    def cache_path(self) -> Path:
        """Path of the durable record."""
        return self.cache_dir / f"{self.key}.yaml"

    def ensure_directory(self) -> None:
        """Create the cache directory if it doesn't exist."""
        self.cache_dir.mkdir(parents=True, exist_ok=True)

    # --- Durable Storage ---

    def load(self) -> list[Task]:
        """Load the cached collection, defaulting anything earlier versions left out."""
        records = self._read_records()
        self._tasks = [
            Task.from_record(record, position=idx)
            for idx, record in enumerate(records)
            if isinstance(record, dict)
        ]
        logger.debug("Loaded %d tasks from %s", len(self._tasks), self.cache_path)
        return self.all()

    def replace_all(self, tasks: list[Task]) -> None:
        """Replace the in-memory collection."""
        self._tasks = list(tasks)

    def persist(self) -> None:
        """Write the collection to the cache file."""
        self.ensure_directory()
        data = [task.to_record() for task in self._tasks]
        with self.cache_path.open("w") as f:
            f.write("# Auto-generated - do not edit manually\n")
            yaml.safe_dump(data, f, default_flow_style=False, sort_keys=False, allow_unicode=True)
        logger.debug("Persisted %d tasks to %s", len(self._tasks), self.cache_path)

    # --- Task Operations ---

    def all(self) -> list[Task]:
        """Return all tasks in manual order."""
        return list(self._tasks)

    def get(self, task_id: str) -> Task | None:
        """Get a task by ID."""
        for task in self._tasks:
            if task.id == str(task_id):
                return task
        return None

    def require(self, task_id: str) -> Task:
        """Get a task by ID or raise NotFoundError."""
        task = self.get(task_id)
        if task is None:
            raise NotFoundError(str(task_id))
        return task

    def index_of(self, task_id: str) -> int | None:
        """Position of a task in manual order."""
        for idx, task in enumerate(self._tasks):
            if task.id == str(task_id):
                return idx
        return None

    def append(self, task: Task) -> None:
        """Add a task at the end."""
        self._tasks.append(task)

    def replace(self, task: Task) -> bool:
        """Replace the task with the same ID."""
        idx = self.index_of(task.id)
        if idx is None:
            return False
        self._tasks[idx] = task
        return True

    def remove(self, task_id: str) -> Task | None:
        """Remove a task by ID."""
        idx = self.index_of(task_id)
        if idx is None:
            return None
        return self._tasks.pop(idx)

    def __len__(self) -> int:
        return len(self._tasks)

    # --- Private Methods ---

    def _read_records(self) -> list:
        """Read raw records; missing or unreadable storage is an empty list."""
        if not self.cache_path.exists():
            return []

        try:
            with self.cache_path.open() as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            logger.warning("Ignoring unreadable cache %s: %s", self.cache_path, e)
            return []

        if data is None:
            return []
        if not isinstance(data, list):
            logger.warning("Ignoring cache %s: expected a list of tasks", self.cache_path)
            return []
        return data
