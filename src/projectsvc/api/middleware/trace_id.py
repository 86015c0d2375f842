"""Trace ID middleware for request/response propagation."""

import re
import uuid

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from projectsvc.logging_config import bind_request_context, clear_request_context

# Matches ErrorDetail.trace_id; anything else is replaced by a generated id
_VALID_TRACE_ID = re.compile(r"^[\x21-\x7e]{1,128}$")


class TraceIdMiddleware(BaseHTTPMiddleware):
    """Extract X-Trace-Id from request or generate one, attach to response and log context."""

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        trace_id = request.headers.get("x-trace-id", "")
        if not _VALID_TRACE_ID.match(trace_id):
            trace_id = f"trc_{uuid.uuid4().hex[:16]}"
        request.state.trace_id = trace_id
        clear_request_context()
        bind_request_context(trace_id=trace_id)

        response = await call_next(request)
        response.headers["X-Trace-Id"] = trace_id
        return response
