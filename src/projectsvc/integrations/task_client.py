"""HTTP client for the task service."""

from __future__ import annotations

import logging
from urllib.parse import quote

import httpx
from pydantic import ValidationError

from projectsvc.models.task import TaskResponse

logger = logging.getLogger(__name__)


def _segment(project_code: str) -> str:
    """Percent-encode a code for use as one path segment.

    Dot segments are encoded too, otherwise URL normalization would drop them.
    """
    segment = quote(project_code, safe="")
    if segment in (".", ".."):
        segment = segment.replace(".", "%2E")
    return segment


class TaskServiceClient:
    """Calls the task service endpoints that act on all tasks of a project.

    The underlying ``httpx.AsyncClient`` is shared by the application and must
    carry the task service base URL. The caller's bearer token, when given, is
    forwarded so the task service applies its own access rules.

    Every method returns a ``TaskResponse``. Transport errors, timeouts,
    non-2xx statuses and unparseable bodies all come back as
    ``success=False``; nothing is retried.
    """

    def __init__(self, http_client: httpx.AsyncClient, token: str | None = None) -> None:
        self._http = http_client
        self._token = token

    async def get_counts_by_project(self, project_code: str) -> TaskResponse:
        return await self._send("GET", f"/tasks/count/project/{_segment(project_code)}")

    async def complete_by_project(self, project_code: str) -> TaskResponse:
        return await self._send("PUT", f"/tasks/complete/project/{_segment(project_code)}")

    async def delete_by_project(self, project_code: str) -> TaskResponse:
        return await self._send("DELETE", f"/tasks/delete/project/{_segment(project_code)}")

    def _headers(self) -> dict[str, str]:
        headers = {"Accept": "application/json"}
        if self._token:
            headers["Authorization"] = f"Bearer {self._token}"
        return headers

    async def _send(self, method: str, path: str) -> TaskResponse:
        try:
            response = await self._http.request(method, path, headers=self._headers())
        except httpx.HTTPError as exc:
            logger.error("Task service %s %s failed: %s", method, path, exc)
            return TaskResponse.failure(f"Task service unreachable: {exc}")

        if not response.is_success:
            logger.warning("Task service %s %s returned %s", method, path, response.status_code)
            return TaskResponse.failure(
                f"Task service returned {response.status_code}",
                code=response.status_code,
            )

        try:
            return TaskResponse.model_validate(response.json())
        except (ValueError, ValidationError) as exc:
            logger.error("Task service %s %s returned an unreadable body: %s", method, path, exc)
            return TaskResponse.failure("Task service response could not be parsed", code=response.status_code)
