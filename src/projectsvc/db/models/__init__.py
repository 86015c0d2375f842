"""SQLAlchemy ORM models - import all to register with Base.metadata."""

from projectsvc.db.models.project import ProjectRow

__all__ = [
    "ProjectRow",
]
