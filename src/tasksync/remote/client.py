"""HTTP client for the remote task store."""

from __future__ import annotations

import logging
import time
from typing import Any

import httpx

from ..errors import TasksyncError

logger = logging.getLogger(__name__)

TASKS_PATH = "/tasks"


class RemoteError(TasksyncError):
    """The remote store could not complete a request.

    ``status`` is the HTTP status code, or 0 when the request never got a
    usable response (unreachable, timeout, malformed body).
    """

    def __init__(self, status: int, message: str):
        super().__init__(f"{status} {message}" if status else message)
        self.status = status
        self.message = message

    @property
    def is_transport(self) -> bool:
        """Whether the failure happened before an HTTP status was received."""
        return self.status == 0


class RemoteClient:
    """Thin async wrapper around the remote store's CRUD endpoints.

    Reports success or raises RemoteError; never retries and never
    touches caller state.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """Initialize the remote client.

        Args:
            base_url: Root of the API, e.g. http://localhost:8080/api
            timeout: Per-request timeout in seconds
            transport: Optional transport override (tests use httpx.MockTransport)
        """
        self.base_url = base_url.rstrip("/")
        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            headers={"Content-Type": "application/json"},
            timeout=timeout,
            transport=transport,
        )

    async def aclose(self) -> None:
        """Close the HTTP client."""
        await self._client.aclose()

    async def __aenter__(self) -> RemoteClient:
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.aclose()

    async def request(self, path: str, method: str = "GET", body: Any = None) -> httpx.Response:
        """Send one request.

        Args:
            path: Path relative to the base URL
            method: HTTP method
            body: Optional JSON body

        Returns:
            The successful response

        Raises:
            RemoteError: status 0 on transport failure, the HTTP status otherwise
        """
        start_time = time.monotonic()
        try:
            response = await self._client.request(method, path, json=body)
        except httpx.RequestError as e:
            elapsed_ms = (time.monotonic() - start_time) * 1000
            logger.debug("%s %s failed after %.0fms: %s", method, path, elapsed_ms, e)
            raise RemoteError(0, f"Request failed: {e}") from e

        elapsed_ms = (time.monotonic() - start_time) * 1000

        if response.status_code >= 400:
            logger.debug(
                "%s %s: HTTP %d (%.0fms)", method, path, response.status_code, elapsed_ms
            )
            reason = response.reason_phrase or "Error"
            text = response.text
            raise RemoteError(response.status_code, f"{reason}: {text}" if text else reason)

        logger.info("%s %s: %d (%.0fms)", method, path, response.status_code, elapsed_ms)
        return response

    # --- Task Endpoints ---

    async def list_tasks(self) -> list[dict[str, Any]]:
        """GET /tasks. A body that is not a list reads as no tasks."""
        response = await self.request(TASKS_PATH)
        data = self._json(response)
        if not isinstance(data, list):
            logger.warning("GET %s returned %s, expected a list", TASKS_PATH, type(data).__name__)
            return []
        return [item for item in data if isinstance(item, dict)]

    async def create_task(self, payload: dict[str, Any]) -> dict[str, Any]:
        """POST /tasks and return the created record."""
        response = await self.request(TASKS_PATH, "POST", payload)
        data = self._json(response)
        if not isinstance(data, dict):
            raise RemoteError(0, "Invalid create response: expected an object")
        return data

    async def update_task(self, remote_id: int, payload: dict[str, Any]) -> None:
        """PUT /tasks/{id}."""
        await self.request(f"{TASKS_PATH}/{remote_id}", "PUT", payload)

    async def delete_task(self, remote_id: int | str) -> None:
        """DELETE /tasks/{id}."""
        await self.request(f"{TASKS_PATH}/{remote_id}", "DELETE")

    async def delete_completed(self) -> None:
        """DELETE /tasks, which drops every completed task server side."""
        await self.request(TASKS_PATH, "DELETE")

    @staticmethod
    def _json(response: httpx.Response) -> Any:
        try:
            return response.json()
        except ValueError as e:
            raise RemoteError(0, f"Invalid JSON response: {e}") from e
