"""FastAPI exception handlers producing the ErrorResponse envelope."""

import logging
from datetime import datetime, timezone

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from projectsvc.errors.exceptions import (
    AuthorizationError,
    ProjectAccessDeniedError,
    ProjectServiceError,
)
from projectsvc.models.common import ErrorDetail, ErrorResponse

logger = logging.getLogger(__name__)


def register_exception_handlers(app: FastAPI) -> None:
    """Register all custom exception handlers on the FastAPI app."""

    @app.exception_handler(ProjectServiceError)
    async def project_service_error_handler(request: Request, exc: ProjectServiceError):
        trace_id = getattr(request.state, "trace_id", "unknown")
        if isinstance(exc, (AuthorizationError, ProjectAccessDeniedError)):
            user = getattr(request.state, "user", {}) or {}
            logger.warning(
                "project_access_denied",
                extra={
                    "path": request.url.path,
                    "method": request.method,
                    "trace_id": trace_id,
                    "username": user.get("username", "anonymous"),
                    "roles": user.get("roles", []),
                    "reason": str(exc),
                },
            )
        elif exc.status_code >= 500:
            logger.error("%s on %s %s: %s", exc.code, request.method, request.url.path, exc.message)
        error_response = ErrorResponse(
            error=ErrorDetail(
                code=exc.code,
                message=exc.message,
                details=exc.details,
                trace_id=trace_id,
                timestamp=datetime.now(timezone.utc),
            ),
        )
        return JSONResponse(
            status_code=exc.status_code,
            content=error_response.model_dump(mode="json", exclude_none=True),
        )
