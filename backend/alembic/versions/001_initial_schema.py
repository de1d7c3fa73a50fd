"""Initial schema — cubes, cylinders.

Revision ID: 001_initial
Revises: None
Create Date: 2026-10-17

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "cubes",
        sa.Column("id", sa.Uuid(as_uuid=True), primary_key=True),
        sa.Column("side_length", sa.Integer, nullable=False),
    )

    op.create_table(
        "cylinders",
        sa.Column("id", sa.Uuid(as_uuid=True), primary_key=True),
        sa.Column("radius", sa.Float, nullable=False),
        sa.Column("height", sa.Float, nullable=False),
    )


def downgrade() -> None:
    op.drop_table("cylinders")
    op.drop_table("cubes")
