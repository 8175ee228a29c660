"""Create task view tables: task_statuses, tasks, task_views, task_view_statuses, task_view_task_positions

Revision ID: create_task_view_tables
Revises:
Create Date: 2026-10-19 00:00:00.000000+00:00

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision: str = "create_task_view_tables"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # Global status registry
    op.create_table(
        "task_statuses",
        sa.Column("id", sa.Uuid(as_uuid=True), nullable=False),
        sa.Column("name", sa.String(length=100), nullable=False),
        sa.Column("name_key", sa.String(length=100), nullable=False),
        sa.Column("color", sa.String(length=7), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("name_key", name="uq_task_statuses_name_key"),
    )

    # Tasks
    op.create_table(
        "tasks",
        sa.Column("id", sa.Uuid(as_uuid=True), nullable=False),
        sa.Column("taskable_type", sa.String(length=20), nullable=False),
        sa.Column("taskable_id", sa.Uuid(as_uuid=True), nullable=False),
        sa.Column("title", sa.String(length=255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("type", sa.String(length=20), nullable=False),
        sa.Column("priority", sa.String(length=20), nullable=False),
        sa.Column("status_id", sa.Uuid(as_uuid=True), nullable=False),
        sa.Column("created_by_id", sa.Uuid(as_uuid=True), nullable=True),
        sa.Column("assigned_to_id", sa.Uuid(as_uuid=True), nullable=True),
        sa.Column("due_date", sa.DateTime(timezone=True), nullable=True),
        sa.Column("completed_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.ForeignKeyConstraint(["status_id"], ["task_statuses.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_tasks_priority", "tasks", ["priority"], unique=False)
    op.create_index("ix_tasks_status_id", "tasks", ["status_id"], unique=False)
    op.create_index("ix_tasks_created_by_id", "tasks", ["created_by_id"], unique=False)
    op.create_index("ix_tasks_assigned_to_id", "tasks", ["assigned_to_id"], unique=False)
    op.create_index("ix_tasks_due_date", "tasks", ["due_date"], unique=False)
    op.create_index(
        "idx_tasks_taskable_status", "tasks", ["taskable_type", "taskable_id", "status_id"], unique=False
    )

    # Task views
    op.create_table(
        "task_views",
        sa.Column("id", sa.Uuid(as_uuid=True), nullable=False),
        sa.Column("taskable_type", sa.String(length=20), nullable=False),
        sa.Column("taskable_id", sa.Uuid(as_uuid=True), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("slug", sa.String(length=255), nullable=False),
        sa.Column("type", sa.String(length=20), nullable=False),
        sa.Column(
            "metadata",
            sa.JSON().with_variant(postgresql.JSONB(astext_type=sa.Text()), "postgresql"),
            nullable=True,
        ),
        sa.Column("is_default", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("deleted_at", sa.DateTime(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("slug", name="uq_task_views_slug"),
    )
    op.create_index("idx_task_views_taskable", "task_views", ["taskable_type", "taskable_id"], unique=False)

    # Enabled statuses per view
    op.create_table(
        "task_view_statuses",
        sa.Column("task_view_id", sa.Uuid(as_uuid=True), nullable=False),
        sa.Column("task_status_id", sa.Uuid(as_uuid=True), nullable=False),
        sa.Column("position", sa.Integer(), nullable=False, server_default="0"),
        sa.ForeignKeyConstraint(["task_view_id"], ["task_views.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["task_status_id"], ["task_statuses.id"], ondelete="CASCADE"),
        sa.UniqueConstraint("task_view_id", "task_status_id", name="uq_task_view_statuses_view_status"),
    )

    # Position ledger
    op.create_table(
        "task_view_task_positions",
        sa.Column("task_view_id", sa.Uuid(as_uuid=True), nullable=False),
        sa.Column("task_id", sa.Uuid(as_uuid=True), nullable=False),
        sa.Column("task_status_id", sa.Uuid(as_uuid=True), nullable=False),
        sa.Column("position", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.ForeignKeyConstraint(["task_view_id"], ["task_views.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["task_id"], ["tasks.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["task_status_id"], ["task_statuses.id"]),
        sa.PrimaryKeyConstraint("task_view_id", "task_id"),
    )
    op.create_index(
        "idx_task_view_task_positions_view_status_position",
        "task_view_task_positions",
        ["task_view_id", "task_status_id", "position"],
        unique=False,
    )


def downgrade() -> None:
    op.drop_index(
        "idx_task_view_task_positions_view_status_position", table_name="task_view_task_positions"
    )
    op.drop_table("task_view_task_positions")

    op.drop_table("task_view_statuses")

    op.drop_index("idx_task_views_taskable", table_name="task_views")
    op.drop_table("task_views")

    op.drop_index("idx_tasks_taskable_status", table_name="tasks")
    op.drop_index("ix_tasks_due_date", table_name="tasks")
    op.drop_index("ix_tasks_assigned_to_id", table_name="tasks")
    op.drop_index("ix_tasks_created_by_id", table_name="tasks")
    op.drop_index("ix_tasks_status_id", table_name="tasks")
    op.drop_index("ix_tasks_priority", table_name="tasks")
    op.drop_table("tasks")

    op.drop_table("task_statuses")
