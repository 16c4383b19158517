"""Create tasks table.

Revision ID: 001_create_tasks
Revises: None
Create Date: 2026-10-18

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_create_tasks"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "tasks",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("descripcion", sa.Text, nullable=False),
        sa.Column("observacion", sa.Text, nullable=True),
        sa.Column("is_finalizada", sa.Boolean, nullable=False, server_default=sa.false()),
        sa.Column(
            "registration_date", sa.DateTime(timezone=True),
            nullable=False, server_default=sa.func.now(),
        ),
    )


def downgrade() -> None:
    op.drop_table("tasks")
