"""Project lifecycle API routes."""

from fastapi import APIRouter, Response

from projectsvc.dependencies import Caller, DBSession, Projects, RequireAdmin
from projectsvc.models.project import ProjectExistence, ProjectInput

router = APIRouter(tags=["Projects"])


@router.post("/projects", status_code=201)
async def create_project(project: ProjectInput, caller: Caller, service: Projects, db: DBSession) -> dict:
    created = await service.create(caller, project)
    await db.commit()
    return created.model_dump(mode="json", exclude_none=True)


@router.get("/projects")
async def list_my_projects_with_details(caller: Caller, service: Projects) -> list[dict]:
    """Caller's projects enriched with completed / non-completed task counts."""
    projects = await service.list_for_caller(caller)
    return [p.model_dump(mode="json", exclude_none=True) for p in projects]


@router.get("/projects/admin", dependencies=[RequireAdmin])
async def admin_list_projects(service: Projects) -> list[dict]:
    projects = await service.list_all_admin()
    return [p.model_dump(mode="json", exclude_none=True) for p in projects]


@router.get("/projects/manager")
async def manager_list_projects(caller: Caller, service: Projects) -> list[dict]:
    projects = await service.list_all_manager(caller)
    return [p.model_dump(mode="json", exclude_none=True) for p in projects]


@router.get("/projects/count/manager/{assigned_manager}")
async def count_non_completed_projects(assigned_manager: str, caller: Caller, service: Projects) -> dict:
    count = await service.count_non_completed_by_manager(assigned_manager)
    return {"assigned_manager": assigned_manager, "non_completed_count": count}


@router.get("/projects/check/{project_code}")
async def check_project(project_code: str, caller: Caller, service: Projects) -> dict:
    exists = await service.check_exists(caller, project_code)
    return ProjectExistence(project_code=project_code, exists=exists).model_dump()


@router.get("/projects/{project_code}")
async def get_project(project_code: str, caller: Caller, service: Projects) -> dict:
    project = await service.read_by_code(caller, project_code)
    return project.model_dump(mode="json", exclude_none=True)


@router.get("/projects/{project_code}/manager")
async def get_project_manager(project_code: str, caller: Caller, service: Projects) -> dict:
    manager = await service.read_manager_by_code(caller, project_code)
    return {"project_code": project_code, "assigned_manager": manager}


@router.put("/projects/{project_code}")
async def update_project(
    project_code: str,
    project: ProjectInput,
    caller: Caller,
    service: Projects,
    db: DBSession,
) -> dict:
    updated = await service.update(caller, project_code, project)
    await db.commit()
    return updated.model_dump(mode="json", exclude_none=True)


@router.put("/projects/{project_code}/complete")
async def complete_project(project_code: str, caller: Caller, service: Projects, db: DBSession) -> dict:
    completed = await service.complete(caller, project_code)
    await db.commit()
    return completed.model_dump(mode="json", exclude_none=True)


@router.delete("/projects/{project_code}", status_code=204)
async def delete_project(project_code: str, caller: Caller, service: Projects, db: DBSession) -> Response:
    await service.delete(caller, project_code)
    await db.commit()
    return Response(status_code=204)
