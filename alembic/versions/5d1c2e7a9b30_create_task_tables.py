"""create users, tasks and histories tables

Revision ID: 5d1c2e7a9b30
Revises:
Create Date: 2026-10-19 18:02:11.417201

"""

from collections.abc import Sequence

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "5d1c2e7a9b30"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=True),
        sa.Column("photo_url", sa.String(length=1000), nullable=True),
        sa.Column("profile", sa.JSON(), nullable=True),
        sa.Column(
            "created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False
        ),
        sa.Column(
            "updated_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_users_id"), "users", ["id"], unique=False)
    op.create_index(op.f("ix_users_email"), "users", ["email"], unique=True)

    op.create_table(
        "tasks",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("title", sa.String(length=500), nullable=False),
        sa.Column("description", sa.String(), nullable=False),
        sa.Column("category", sa.String(length=100), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("position", sa.Integer(), nullable=False),
        sa.Column("deadline", sa.DateTime(timezone=True), nullable=True),
        sa.Column("added_time", sa.DateTime(timezone=True), nullable=False),
        sa.Column("modified_time", sa.DateTime(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_tasks_id"), "tasks", ["id"], unique=False)
    op.create_index(op.f("ix_tasks_email"), "tasks", ["email"], unique=False)
    op.create_index(
        "ix_tasks_email_category_position", "tasks", ["email", "category", "position"]
    )

    history_action = sa.Enum("add", "update", "edit", "reorder", "delete", name="historyaction")
    op.create_table(
        "histories",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("action", history_action, nullable=False),
        # Not a foreign key: entries outlive their tasks
        sa.Column("task_id", sa.Integer(), nullable=True),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("timestamp", sa.DateTime(timezone=True), nullable=False),
        sa.Column("details", sa.JSON(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_histories_id"), "histories", ["id"], unique=False)
    op.create_index(op.f("ix_histories_email"), "histories", ["email"], unique=False)
    op.create_index(op.f("ix_histories_timestamp"), "histories", ["timestamp"], unique=False)


def downgrade() -> None:
    op.drop_index(op.f("ix_histories_timestamp"), table_name="histories")
    op.drop_index(op.f("ix_histories_email"), table_name="histories")
    op.drop_index(op.f("ix_histories_id"), table_name="histories")
    op.drop_table("histories")
    sa.Enum(name="historyaction").drop(op.get_bind(), checkfirst=True)

    op.drop_index("ix_tasks_email_category_position", table_name="tasks")
    op.drop_index(op.f("ix_tasks_email"), table_name="tasks")
    op.drop_index(op.f("ix_tasks_id"), table_name="tasks")
    op.drop_table("tasks")

    op.drop_index(op.f("ix_users_email"), table_name="users")
    op.drop_index(op.f("ix_users_id"), table_name="users")
    op.drop_table("users")
