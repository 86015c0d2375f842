"""Models for responses of the remote task service."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class TaskResponse(BaseModel):
    """Envelope returned by every task service endpoint."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    success: bool
    message: str | None = None
    code: int | None = None
    data: Any = None

    @classmethod
    def failure(cls, message: str, code: int | None = None) -> "TaskResponse":
        return cls(success=False, message=message, code=code)


class TaskCounts(BaseModel):
    """Completed / non-completed task counts of one project."""

    model_config = ConfigDict(populate_by_name=True)

    completed: int = Field(..., ge=0, alias="completedTaskCount")
    non_completed: int = Field(..., ge=0, alias="nonCompletedTaskCount")
