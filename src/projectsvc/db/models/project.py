"""Project table."""

from datetime import date

from sqlalchemy import Boolean, Date, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from projectsvc.db.base import Base, TimestampMixin
from projectsvc.models.enums import ProjectStatus


class ProjectRow(Base, TimestampMixin):
    __tablename__ = "projects"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    project_code: Mapped[str] = mapped_column(String(150), nullable=False, unique=True, index=True)
    project_name: Mapped[str] = mapped_column(String(200), nullable=False)
    project_detail: Mapped[str | None] = mapped_column(Text, nullable=True)
    start_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    end_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    assigned_manager: Mapped[str] = mapped_column(String(200), nullable=False, index=True)
    project_status: Mapped[str] = mapped_column(
        String(20), nullable=False, default=ProjectStatus.OPEN.value
    )
    is_deleted: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
