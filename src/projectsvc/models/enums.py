"""String enums shared by the API models and ORM rows."""

from enum import StrEnum


class ProjectStatus(StrEnum):
    OPEN = "Open"
    COMPLETED = "Completed"


class Role(StrEnum):
    ADMIN = "Admin"
    MANAGER = "Manager"
    EMPLOYEE = "Employee"
