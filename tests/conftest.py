"""Shared test fixtures."""

import pytest
from httpx import ASGITransport, AsyncClient
from jose import jwt
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from projectsvc.config import settings
from projectsvc.db.base import Base
# Import all models to register with Base.metadata
import projectsvc.db.models  # noqa: F401
from projectsvc.models.caller import CallerContext
from projectsvc.models.task import TaskResponse


class FakeTaskClient:
    """Stands in for TaskServiceClient and records every call."""

    def __init__(self):
        self.calls: list[tuple[str, str]] = []
        self.counts: dict[str, dict] = {}
        self.fail_counts_for: set[str] = set()
        self.complete_succeeds = True
        self.delete_succeeds = True

    async def get_counts_by_project(self, project_code: str) -> TaskResponse:
        self.calls.append(("count", project_code))
        if project_code in self.fail_counts_for:
            return TaskResponse.failure("counts unavailable")
        data = self.counts.get(project_code, {"completedTaskCount": 0, "nonCompletedTaskCount": 0})
        return TaskResponse(success=True, message="ok", code=200, data=data)

    async def complete_by_project(self, project_code: str) -> TaskResponse:
        self.calls.append(("complete", project_code))
        if not self.complete_succeeds:
            return TaskResponse.failure("tasks not completed", code=500)
        return TaskResponse(success=True, message="ok", code=200)

    async def delete_by_project(self, project_code: str) -> TaskResponse:
        self.calls.append(("delete", project_code))
        if not self.delete_succeeds:
            return TaskResponse.failure("tasks not deleted", code=500)
        return TaskResponse(success=True, message="ok", code=200)

    def calls_of(self, kind: str) -> list[str]:
        return [code for k, code in self.calls if k == kind]


def make_token(username: str, *roles: str) -> str:
    """Mint an access token shaped like the identity provider's."""
    claims = {
        "sub": f"id-{username}",
        "preferred_username": username,
        "resource_access": {settings.jwt_client_id: {"roles": list(roles)}},
    }
    return jwt.encode(claims, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def auth(username: str, *roles: str) -> dict:
    return {"Authorization": f"Bearer {make_token(username, *roles)}"}


def caller(username: str, *roles: str) -> CallerContext:
    return CallerContext(username=username, roles=frozenset(roles))


@pytest.fixture
async def db_engine():
    """Create an in-memory SQLite async engine for testing."""
    engine = create_async_engine("sqlite+aiosqlite:///", echo=False)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
async def db_session(db_engine):
    """Create a test database session."""
    session_factory = async_sessionmaker(db_engine, class_=AsyncSession, expire_on_commit=False)
    async with session_factory() as session:
        yield session


@pytest.fixture
def fake_tasks():
    return FakeTaskClient()


@pytest.fixture
def app(db_engine, fake_tasks):
    """Create a test application instance with in-memory DB and a fake task service."""
    from projectsvc.dependencies import get_task_client
    from projectsvc.main import create_app

    _app = create_app()
    _app.state.db_engine = db_engine
    _app.state.db_session_factory = async_sessionmaker(db_engine, class_=AsyncSession, expire_on_commit=False)
    _app.state.task_http_client = None
    _app.dependency_overrides[get_task_client] = lambda: fake_tasks
    return _app


@pytest.fixture
async def client(app):
    """Async HTTP test client."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
