"""Keeps remote tasks in step with project lifecycle transitions."""

import logging

from pydantic import ValidationError

from projectsvc.errors.exceptions import (
    ProjectDetailsNotRetrievedError,
    TasksCanNotBeCompletedError,
    TasksCanNotBeDeletedError,
)
from projectsvc.integrations.task_client import TaskServiceClient
from projectsvc.models.task import TaskCounts

logger = logging.getLogger(__name__)


class TaskCascade:
    """Turns task service outcomes into project-level errors.

    Each method makes exactly one call. A reported failure raises an error
    specific to the operation so callers can tell a failed cascade apart
    from a failed project operation.
    """

    def __init__(self, client: TaskServiceClient) -> None:
        self.client = client

    async def fetch_counts(self, project_code: str) -> TaskCounts:
        response = await self.client.get_counts_by_project(project_code)
        if not response.success or not isinstance(response.data, dict):
            logger.warning("Task counts for project %s not retrieved: %s", project_code, response.message)
            raise ProjectDetailsNotRetrievedError(project_code)
        try:
            return TaskCounts.model_validate(response.data)
        except ValidationError as exc:
            logger.warning("Task counts for project %s malformed: %s", project_code, exc)
            raise ProjectDetailsNotRetrievedError(project_code) from exc

    async def complete_all(self, project_code: str) -> None:
        response = await self.client.complete_by_project(project_code)
        if not response.success:
            logger.error("Completing tasks of project %s failed: %s", project_code, response.message)
            raise TasksCanNotBeCompletedError(project_code)
        logger.info("Tasks of project %s completed", project_code)

    async def delete_all(self, project_code: str) -> None:
        response = await self.client.delete_by_project(project_code)
        if not response.success:
            logger.error("Deleting tasks of project %s failed: %s", project_code, response.message)
            raise TasksCanNotBeDeletedError(project_code)
        logger.info("Tasks of project %s deleted", project_code)
