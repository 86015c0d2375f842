"""Error kinds raised by the project service.

Every kind derives directly from ``ProjectServiceError`` so callers can branch
on the concrete class; the base only carries the code and HTTP status used by
the exception handlers.
"""


class ProjectServiceError(Exception):
    """Base exception carrying a stable error code and HTTP status."""

    def __init__(self, code: str, message: str, details=None, status_code: int = 500):
        self.code = code
        self.message = message
        self.details = details
        self.status_code = status_code
        super().__init__(message)


class ProjectAlreadyExistsError(ProjectServiceError):
    def __init__(self, project_code: str):
        super().__init__(
            "PROJECT_ALREADY_EXISTS",
            "Project already exists.",
            details={"project_code": project_code},
            status_code=409,
        )


class ProjectNotFoundError(ProjectServiceError):
    def __init__(self, project_code: str):
        super().__init__(
            "PROJECT_NOT_FOUND",
            "Project does not exist.",
            details={"project_code": project_code},
            status_code=404,
        )


class ProjectAlreadyCompletedError(ProjectServiceError):
    def __init__(self, project_code: str):
        super().__init__(
            "PROJECT_ALREADY_COMPLETED",
            "Project is already completed.",
            details={"project_code": project_code},
            status_code=409,
        )


class ProjectAccessDeniedError(ProjectServiceError):
    """The caller may not act on this project."""

    def __init__(self, project_code: str, reason: str):
        super().__init__(
            "PROJECT_ACCESS_DENIED",
            "Access denied, make sure that you are working on your own project.",
            details={"project_code": project_code, "reason": reason},
            status_code=403,
        )


class ProjectDetailsNotRetrievedError(ProjectServiceError):
    """Task counts could not be fetched from the task service."""

    def __init__(self, project_code: str):
        super().__init__(
            "PROJECT_DETAILS_NOT_RETRIEVED",
            "Project details cannot be retrieved.",
            details={"project_code": project_code},
            status_code=502,
        )


class TasksCanNotBeCompletedError(ProjectServiceError):
    def __init__(self, project_code: str):
        super().__init__(
            "TASKS_CANNOT_BE_COMPLETED",
            f"Tasks of project {project_code} cannot be completed.",
            details={"project_code": project_code},
            status_code=502,
        )


class TasksCanNotBeDeletedError(ProjectServiceError):
    def __init__(self, project_code: str):
        super().__init__(
            "TASKS_CANNOT_BE_DELETED",
            f"Tasks of project {project_code} cannot be deleted.",
            details={"project_code": project_code},
            status_code=502,
        )


class AuthenticationError(ProjectServiceError):
    """Authentication required or token invalid."""

    def __init__(self, message: str = "Authentication required"):
        super().__init__("AUTHENTICATION_ERROR", message, status_code=401)


class AuthorizationError(ProjectServiceError):
    """Caller lacks a role required by the endpoint."""

    def __init__(self, message: str = "Insufficient role"):
        super().__init__("AUTHORIZATION_ERROR", message, status_code=403)
