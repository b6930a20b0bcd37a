"""Application settings."""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings."""

    remote_url: str = Field(
        default="http://localhost:8080/api",
        description="Base URL of the remote task store API",
    )

    timeout: float = Field(
        default=10.0,
        description="Per-request timeout for the remote store, in seconds",
    )

    cache_dir: Path = Field(
        default_factory=lambda: Path.home() / ".tasksync",
        description="Directory holding the local task cache",
    )

    cache_key: str = Field(
        default="tasks_v1",
        description="Namespace key of the local cache record",
    )

    verbose: int = Field(
        default=0,
        description="Verbosity level (0=off, 1=INFO, 2+=DEBUG)",
    )

    log_file: Path | None = Field(
        default=None,
        description="Optional path to write logs to file",
    )

    model_config = {
        "env_prefix": "TASKSYNC_",
    }
