"""station table

Revision ID: 0001_stations
Revises:
Create Date: 2026-10-19

"""
from __future__ import annotations

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = "0001_stations"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "station",
        sa.Column("id", sa.String(length=24), primary_key=True),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("freq", sa.Float(), nullable=False),
        sa.Column("actual", sa.Boolean(), nullable=False, server_default=sa.false()),
    )


def downgrade() -> None:
    op.drop_table("station")
