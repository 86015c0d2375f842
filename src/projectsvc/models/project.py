"""Pydantic models for the Project resource."""

from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from projectsvc.models.enums import ProjectStatus

# Path segments of static routes under /projects
RESERVED_PROJECT_CODES = frozenset({"admin", "manager", "check", "count"})


class ProjectInput(BaseModel):
    """Body of create and update requests.

    ``project_code`` is required so create and update share one body; update
    ignores it along with anything else that identifies the project.
    """

    model_config = ConfigDict(extra="forbid")

    project_code: str = Field(..., min_length=1, max_length=100, pattern=r"^[A-Za-z0-9][A-Za-z0-9_.-]*$")
    project_name: str = Field(..., min_length=1, max_length=200)
    project_detail: str | None = Field(None, max_length=5000)
    start_date: date | None = None
    end_date: date | None = None

    @field_validator("project_code")
    @classmethod
    def _check_not_reserved(cls, value: str) -> str:
        if value.lower() in RESERVED_PROJECT_CODES:
            raise ValueError(f"'{value}' is reserved and cannot be used as a project code")
        return value

    @model_validator(mode="after")
    def _check_dates(self) -> "ProjectInput":
        if self.start_date and self.end_date and self.end_date < self.start_date:
            raise ValueError("end_date must not be before start_date")
        return self


class Project(BaseModel):
    """Project representation returned by the API."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    project_code: str
    project_name: str
    project_detail: str | None = None
    start_date: date | None = None
    end_date: date | None = None
    assigned_manager: str
    project_status: ProjectStatus
    completed_task_count: int | None = None
    non_completed_task_count: int | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class ProjectExistence(BaseModel):
    project_code: str
    exists: bool
