"""JWT Bearer authentication middleware."""

import logging

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from projectsvc.config import settings
from projectsvc.logging_config import bind_request_context

logger = logging.getLogger(__name__)

# Paths that do not require authentication
_PUBLIC_PATHS = {
    "/api/v1/health",
    "/api/v1/health/live",
    "/api/v1/health/ready",
    "/docs",
    "/openapi.json",
    "/redoc",
}

_ANONYMOUS = {"username": "anonymous", "roles": []}


def _decode_jwt(token: str) -> dict:
    from jose import JWTError, jwt

    try:
        return jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            audience=settings.jwt_audience,
            issuer=settings.jwt_issuer,
            options={"verify_aud": settings.jwt_audience is not None},
        )
    except JWTError as exc:
        logger.debug("JWT decode failed: %s", exc)
        raise ValueError(f"Invalid token: {exc}") from exc


def extract_roles(payload: dict) -> list[str]:
    """Collect roles from a flat ``roles`` claim and the identity provider's client roles."""
    roles = set(payload.get("roles", []))
    client_access = payload.get("resource_access", {}).get(settings.jwt_client_id, {})
    roles.update(client_access.get("roles", []))
    return sorted(roles)


class AuthMiddleware(BaseHTTPMiddleware):
    """Validate the Bearer token and attach the caller to ``request.state.user``."""

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        path = request.url.path

        if path in _PUBLIC_PATHS or path.startswith("/docs") or path.startswith("/redoc"):
            request.state.user = dict(_ANONYMOUS)
            return await call_next(request)

        auth_header = request.headers.get("authorization", "")
        if auth_header.startswith("Bearer "):
            user_info = self._validate_jwt(auth_header[7:])
        else:
            # Routes decide whether an anonymous caller is acceptable
            user_info = dict(_ANONYMOUS)

        request.state.user = user_info
        if "_auth_error" not in user_info:
            bind_request_context(caller=user_info["username"])
        return await call_next(request)

    def _validate_jwt(self, token: str) -> dict:
        try:
            payload = _decode_jwt(token)
        except ValueError:
            return {**_ANONYMOUS, "_auth_error": "invalid_token"}

        username = payload.get("preferred_username") or payload.get("sub", "")
        if not username:
            return {**_ANONYMOUS, "_auth_error": "missing_subject"}

        return {
            "username": username,
            "roles": extract_roles(payload),
            "email": payload.get("email", ""),
            "token": token,
        }
