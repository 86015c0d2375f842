"""Project lifecycle: creation, reads, updates, completion and soft-deletion.

Every caller-specific operation looks the project up by code, runs the access
policy, and only then reads or mutates it. Completion and deletion cascade to
the task service *before* the local change is made, so a failed cascade
leaves the project exactly as it was and the request transaction is never
committed.
"""

import logging

from projectsvc.db.models.project import ProjectRow
from projectsvc.errors.exceptions import (
    ProjectAlreadyCompletedError,
    ProjectAlreadyExistsError,
    ProjectNotFoundError,
)
from projectsvc.models.caller import CallerContext
from projectsvc.models.enums import ProjectStatus
from projectsvc.models.project import Project, ProjectInput
from projectsvc.repositories.project_repo import ProjectRepository
from projectsvc.services.access_policy import check_project_access
from projectsvc.services.task_cascade import TaskCascade

logger = logging.getLogger(__name__)

# Input fields copied onto the row by update; identity, code, status and
# ownership are never taken from the request body.
_MUTABLE_FIELDS = ("project_name", "project_detail", "start_date", "end_date")


def to_project(row: ProjectRow) -> Project:
    return Project.model_validate(row)


class ProjectService:
    def __init__(self, repo: ProjectRepository, tasks: TaskCascade) -> None:
        self.repo = repo
        self.tasks = tasks

    async def _get_active(self, project_code: str) -> ProjectRow:
        row = await self.repo.find_by_code(project_code)
        if row is None or row.is_deleted:
            raise ProjectNotFoundError(project_code)
        return row

    async def _get_accessible(self, caller: CallerContext, project_code: str) -> ProjectRow:
        row = await self._get_active(project_code)
        check_project_access(caller, row)
        return row

    async def create(self, caller: CallerContext, data: ProjectInput) -> Project:
        """Create a project managed by the caller.

        The collision check matches any stored code, including rows that were
        soft-deleted; those carry a renamed code, so the original is free.
        """
        if await self.repo.find_by_code(data.project_code) is not None:
            raise ProjectAlreadyExistsError(data.project_code)

        row = ProjectRow(
            project_code=data.project_code,
            assigned_manager=caller.username,
            project_status=ProjectStatus.OPEN.value,
            is_deleted=False,
            **{field: getattr(data, field) for field in _MUTABLE_FIELDS},
        )
        await self.repo.save(row)
        logger.info("Project %s created by %s", row.project_code, caller.username)
        return to_project(row)

    async def read_by_code(self, caller: CallerContext, project_code: str) -> Project:
        return to_project(await self._get_accessible(caller, project_code))

    async def read_manager_by_code(self, caller: CallerContext, project_code: str) -> str:
        row = await self._get_accessible(caller, project_code)
        return row.assigned_manager

    async def list_for_caller(self, caller: CallerContext) -> list[Project]:
        """Caller's projects with task counts.

        Counts are fetched one project at a time; the first failure aborts the
        whole listing rather than returning partial results.
        """
        rows = await self.repo.find_all_by_manager(caller.username)
        projects = []
        for row in rows:
            counts = await self.tasks.fetch_counts(row.project_code)
            projects.append(
                to_project(row).model_copy(
                    update={
                        "completed_task_count": counts.completed,
                        "non_completed_task_count": counts.non_completed,
                    }
                )
            )
        return projects

    async def list_all_admin(self) -> list[Project]:
        return [to_project(row) for row in await self.repo.find_all()]

    async def list_all_manager(self, caller: CallerContext) -> list[Project]:
        return [to_project(row) for row in await self.repo.find_all_by_manager(caller.username)]

    async def count_non_completed_by_manager(self, assigned_manager: str) -> int:
        return await self.repo.count_non_completed_by_manager(assigned_manager)

    async def check_exists(self, caller: CallerContext, project_code: str) -> bool:
        """Precondition probe used before other services act on a project.

        Completed projects are rejected before the access policy runs.
        """
        row = await self.repo.find_by_code(project_code)
        if row is None or row.is_deleted:
            return False
        if row.project_status == ProjectStatus.COMPLETED:
            raise ProjectAlreadyCompletedError(project_code)
        check_project_access(caller, row)
        return True

    async def update(self, caller: CallerContext, project_code: str, data: ProjectInput) -> Project:
        row = await self._get_accessible(caller, project_code)
        for field in _MUTABLE_FIELDS:
            setattr(row, field, getattr(data, field))
        await self.repo.save(row)
        logger.info("Project %s updated by %s", project_code, caller.username)
        return to_project(row)

    async def complete(self, caller: CallerContext, project_code: str) -> Project:
        row = await self._get_accessible(caller, project_code)
        if row.project_status == ProjectStatus.COMPLETED:
            raise ProjectAlreadyCompletedError(project_code)

        await self.tasks.complete_all(project_code)

        row.project_status = ProjectStatus.COMPLETED.value
        await self.repo.save(row)
        logger.info("Project %s completed by %s", project_code, caller.username)
        return to_project(row)

    async def delete(self, caller: CallerContext, project_code: str) -> None:
        """Soft-delete the project and free its code.

        Tasks are looked up remotely by the original code, so they are deleted
        before the row is renamed to ``{code}-{id}``. The renamed code must be
        free before any task is touched.
        """
        row = await self._get_accessible(caller, project_code)
        deleted_code = f"{project_code}-{row.id}"
        if await self.repo.find_by_code(deleted_code) is not None:
            raise ProjectAlreadyExistsError(deleted_code)

        await self.tasks.delete_all(project_code)

        row.is_deleted = True
        row.project_code = deleted_code
        await self.repo.save(row)
        logger.info("Project %s deleted by %s (stored as %s)", project_code, caller.username, row.project_code)
