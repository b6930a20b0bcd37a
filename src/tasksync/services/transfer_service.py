"""Service for exporting and importing task files."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

import yaml

from ..errors import ValidationError
from ..models import ImportResult

if TYPE_CHECKING:
    from .sync_service import SyncService

logger = logging.getLogger(__name__)

YAML_SUFFIXES = {".yaml", ".yml"}


class TransferService:
    """Reads and writes task collections as JSON or YAML files.

    The format follows the file suffix; anything that is not .yaml/.yml
    is JSON.
    """

    def __init__(self, sync_service: SyncService) -> None:
        self.sync_service = sync_service

    def export_tasks(self, path: Path) -> int:
        """
        Write the in-memory collection to a file, verbatim.

        Returns:
            Number of tasks written.
        """
        records = [task.to_record() for task in self.sync_service.repository.all()]
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w") as f:
            if path.suffix.lower() in YAML_SUFFIXES:
                yaml.safe_dump(records, f, default_flow_style=False, sort_keys=False)
            else:
                json.dump(records, f, indent=2, ensure_ascii=False)
        logger.info("Exported %d tasks to %s", len(records), path)
        return len(records)

    def read_import_file(self, path: Path) -> list[dict[str, Any]]:
        """
        Read task records from a file.

        Raises:
            ValidationError: If the file can't be read, can't be parsed, or
                is not a list of objects.
        """
        try:
            text = path.read_text()
        except OSError as e:
            raise ValidationError(f"Cannot read {path}: {e}") from e

        try:
            if path.suffix.lower() in YAML_SUFFIXES:
                data = yaml.safe_load(text)
            else:
                data = json.loads(text)
        except (json.JSONDecodeError, yaml.YAMLError) as e:
            raise ValidationError(f"Invalid file format: {e}") from e

        if not isinstance(data, list):
            raise ValidationError("Invalid file format: expected a list of tasks")
        for idx, item in enumerate(data):
            if not isinstance(item, dict):
                raise ValidationError(f"Invalid file format: item {idx} is not an object")
        return data

    async def import_file(self, path: Path) -> ImportResult:
        """Read a file and import every record in it."""
        records = self.read_import_file(path)
        logger.info("Importing %d tasks from %s", len(records), path)
        return await self.sync_service.import_tasks(records)
