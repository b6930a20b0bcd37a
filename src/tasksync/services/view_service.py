"""Service for projecting the task collection into display order."""

from collections.abc import Callable, Sequence
from dataclasses import dataclass

from ..models import FilterMode, Priority, SortKey, Task
from ..utils import timestamp_of

PRIORITY_RANK = {Priority.HIGH.value: 0, Priority.MEDIUM.value: 1, Priority.LOW.value: 2}
UNRECOGNIZED_RANK = len(PRIORITY_RANK)


def priority_rank(priority: str | None) -> int:
    """Rank used for grouping: high, medium, low, then anything else."""
    return PRIORITY_RANK.get((priority or Priority.MEDIUM.value).lower(), UNRECOGNIZED_RANK)


@dataclass(frozen=True)
class ViewQuery:
    """Criteria for one display projection."""

    filter_mode: FilterMode = FilterMode.ALL
    search: str = ""
    sort_key: SortKey = SortKey.MANUAL


def project(
    tasks: Sequence[Task],
    filter_mode: FilterMode = FilterMode.ALL,
    search: str = "",
    sort_key: SortKey = SortKey.MANUAL,
) -> list[Task]:
    """
    Compute the display order for a set of tasks.

    Tasks are filtered by completion state and search text, then grouped
    by priority (high, medium, low, unrecognised). The sort key only
    orders tasks within a priority group:
    - createdAt: newest first
    - dueDate: ascending, tasks without a due date first
    - priority: input order
    - manual: by order index, falling back to input position

    The input is never modified.
    """
    needle = (search or "").strip().lower()
    secondary = _SECONDARY_KEYS.get(sort_key, _manual_key)

    # Keep input position alongside each task for the manual fallback
    indexed = [
        (position, task)
        for position, task in enumerate(tasks)
        if _matches_mode(task, filter_mode) and _matches_search(task, needle)
    ]
    indexed.sort(key=lambda item: (priority_rank(item[1].priority), secondary(item[1], item[0])))
    return [task for _, task in indexed]


def _matches_mode(task: Task, filter_mode: FilterMode) -> bool:
    if filter_mode == FilterMode.ACTIVE:
        return not task.completed
    if filter_mode == FilterMode.COMPLETED:
        return task.completed
    return True


def _matches_search(task: Task, needle: str) -> bool:
    if not needle:
        return True
    haystack = " ".join([task.title, task.description or "", " ".join(task.tags)])
    return needle in haystack.lower()


def _created_key(task: Task, _position: int) -> float:
    return -timestamp_of(task.created_at)


def _due_key(task: Task, _position: int) -> str:
    return task.due_date.isoformat() if task.due_date else ""


def _priority_key(_task: Task, _position: int) -> int:
    return 0


def _manual_key(task: Task, position: int) -> int:
    return task.order_index if task.order_index is not None else position


_SECONDARY_KEYS: dict[SortKey, Callable[[Task, int], float | str | int]] = {
    SortKey.CREATED_AT: _created_key,
    SortKey.DUE_DATE: _due_key,
    SortKey.PRIORITY: _priority_key,
    SortKey.MANUAL: _manual_key,
}


class ViewService:
    """Service for building display projections."""

    def parse(
        self,
        filter_mode: str | None = None,
        search: str | None = None,
        sort_key: str | None = None,
    ) -> ViewQuery:
        """
        Build a query from raw control values.

        Unknown filter values show all tasks and unknown sort values fall
        back to manual order.
        """
        try:
            mode = FilterMode(filter_mode) if filter_mode else FilterMode.ALL
        except ValueError:
            mode = FilterMode.ALL
        try:
            key = SortKey(sort_key) if sort_key else SortKey.MANUAL
        except ValueError:
            key = SortKey.MANUAL
        return ViewQuery(filter_mode=mode, search=search or "", sort_key=key)

    def project(self, tasks: Sequence[Task], query: ViewQuery) -> list[Task]:
        """Apply a query to the tasks."""
        return project(tasks, query.filter_mode, query.search, query.sort_key)

    def counts(self, tasks: Sequence[Task]) -> tuple[int, int]:
        """Return (active, completed) counts over the whole collection."""
        completed = sum(1 for task in tasks if task.completed)
        return len(tasks) - completed, completed
