"""FastAPI application factory and lifespan management."""

import logging
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from projectsvc import __version__
from projectsvc.config import settings
from projectsvc.db.engine import create_db_engine, create_session_factory
from projectsvc.logging_config import configure_logging

# Configure logging at import time
configure_logging(log_level=settings.log_level, json_output=not settings.local_mode)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage application startup and shutdown resources."""
    db_url = settings.effective_database_url
    engine = create_db_engine(db_url)

    # Auto-create tables for SQLite (local dev, no Alembic migrations)
    if "sqlite" in db_url:
        from projectsvc.db.base import Base
        import projectsvc.db.models  # noqa: F401  register all ORM models

        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("SQLite tables created (local mode)")

    app.state.db_engine = engine
    app.state.db_session_factory = create_session_factory(engine)
    app.state.task_http_client = httpx.AsyncClient(
        base_url=settings.task_service_url,
        timeout=settings.task_service_timeout,
    )

    logger.info(
        "Project service started (db=%s, tasks=%s)",
        "sqlite" if "sqlite" in db_url else "postgresql",
        settings.task_service_url,
    )
    yield

    await app.state.task_http_client.aclose()
    await engine.dispose()
    logger.info("Project service shutdown complete")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title="Project Service",
        version=__version__,
        description="Project lifecycle with role-scoped access, cascading to the task service.",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Order matters: last added = first executed
    from projectsvc.api.middleware.auth import AuthMiddleware
    from projectsvc.api.middleware.trace_id import TraceIdMiddleware
    app.add_middleware(AuthMiddleware)
    app.add_middleware(TraceIdMiddleware)

    from projectsvc.errors.handlers import register_exception_handlers
    register_exception_handlers(app)

    from projectsvc.api.router import api_router
    app.include_router(api_router)

    return app


app = create_app()
