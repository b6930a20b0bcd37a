"""Exceptions shared across tasksync."""


class TasksyncError(Exception):
    """Base exception for tasksync errors."""

    pass


class ValidationError(TasksyncError):
    """Input rejected before any mutation (empty title, malformed import file)."""

    pass


class NotFoundError(TasksyncError):
    """Referenced task id is not in the repository."""

    def __init__(self, task_id: str):
        super().__init__(f"Task not found: {task_id}")
        self.task_id = task_id
