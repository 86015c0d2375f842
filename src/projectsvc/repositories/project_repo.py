"""Project repository."""

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from projectsvc.db.models.project import ProjectRow
from projectsvc.models.enums import ProjectStatus
from projectsvc.repositories.base import BaseRepository


class ProjectRepository(BaseRepository):
    def __init__(self, session: AsyncSession):
        super().__init__(session, ProjectRow)

    async def find_by_code(self, project_code: str) -> ProjectRow | None:
        """Look up a row by exact code, soft-deleted rows included."""
        return await self.get_by_field("project_code", project_code)

    async def find_all(self) -> list[ProjectRow]:
        stmt = (
            select(ProjectRow)
            .where(ProjectRow.is_deleted.is_(False))
            .order_by(ProjectRow.id)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def find_all_by_manager(self, assigned_manager: str) -> list[ProjectRow]:
        stmt = (
            select(ProjectRow)
            .where(
                ProjectRow.assigned_manager == assigned_manager,
                ProjectRow.is_deleted.is_(False),
            )
            .order_by(ProjectRow.id)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def count_non_completed_by_manager(self, assigned_manager: str) -> int:
        stmt = select(func.count(ProjectRow.id)).where(
            ProjectRow.assigned_manager == assigned_manager,
            ProjectRow.project_status != ProjectStatus.COMPLETED.value,
            ProjectRow.is_deleted.is_(False),
        )
        result = await self.session.execute(stmt)
        return result.scalar_one()
