"""tasksync - task list kept in sync with a remote store, with a local fallback cache."""

__version__ = "0.1.0"
