"""create projects table

Revision ID: 0001
Revises:
Create Date: 2026-10-18
"""

from alembic import op
import sqlalchemy as sa

revision = "0001"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "projects",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("project_code", sa.String(150), nullable=False),
        sa.Column("project_name", sa.String(200), nullable=False),
        sa.Column("project_detail", sa.Text(), nullable=True),
        sa.Column("start_date", sa.Date(), nullable=True),
        sa.Column("end_date", sa.Date(), nullable=True),
        sa.Column("assigned_manager", sa.String(200), nullable=False),
        sa.Column("project_status", sa.String(20), nullable=False),
        sa.Column("is_deleted", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
    )
    op.create_index("ix_projects_project_code", "projects", ["project_code"], unique=True)
    op.create_index("ix_projects_assigned_manager", "projects", ["assigned_manager"])


def downgrade() -> None:
    op.drop_index("ix_projects_assigned_manager", table_name="projects")
    op.drop_index("ix_projects_project_code", table_name="projects")
    op.drop_table("projects")
