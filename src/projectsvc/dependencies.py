"""FastAPI dependency injection providers."""

from collections.abc import AsyncGenerator
from typing import Annotated

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from projectsvc.errors.exceptions import AuthenticationError, AuthorizationError
from projectsvc.integrations.task_client import TaskServiceClient
from projectsvc.models.caller import CallerContext
from projectsvc.models.enums import Role
from projectsvc.repositories.project_repo import ProjectRepository
from projectsvc.services.project_service import ProjectService
from projectsvc.services.task_cascade import TaskCascade


async def get_db(request: Request) -> AsyncGenerator:
    """Yield a database session from the app's session factory."""
    session_factory = request.app.state.db_session_factory
    async with session_factory() as session:
        yield session


async def get_current_caller(request: Request) -> CallerContext:
    """Return the authenticated caller or raise 401."""
    user = getattr(request.state, "user", {})
    if "_auth_error" in user:
        raise AuthenticationError(user["_auth_error"])
    if not user or user.get("username") in ("anonymous", "", None):
        raise AuthenticationError("Authentication required")
    return CallerContext(
        username=user["username"],
        roles=frozenset(user.get("roles", [])),
        token=user.get("token"),
    )


def require_role(*roles: str):
    """Return a dependency that enforces one of the given roles."""

    async def _check(caller: CallerContext = Depends(get_current_caller)) -> CallerContext:
        if not caller.roles.intersection(str(role) for role in roles):
            raise AuthorizationError(f"Requires one of: {', '.join(roles)}")
        return caller

    return _check


def get_task_client(
    request: Request,
    caller: CallerContext = Depends(get_current_caller),
) -> TaskServiceClient:
    """Task service client forwarding the caller's bearer token."""
    return TaskServiceClient(request.app.state.task_http_client, token=caller.token)


def get_project_service(
    db: AsyncSession = Depends(get_db),
    task_client: TaskServiceClient = Depends(get_task_client),
) -> ProjectService:
    return ProjectService(ProjectRepository(db), TaskCascade(task_client))


# Type aliases for dependency injection
DBSession = Annotated[AsyncSession, Depends(get_db)]
Caller = Annotated[CallerContext, Depends(get_current_caller)]
Projects = Annotated[ProjectService, Depends(get_project_service)]
RequireAdmin = Depends(require_role(Role.ADMIN))
