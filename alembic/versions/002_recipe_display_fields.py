"""Add difficulty and emoji to recipes

Revision ID: 002
Revises: 001
Create Date: 2026-09-15

Shown on the production dashboard's "What can I make" cards.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "002"
down_revision: Union[str, None] = "001"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.add_column(
        "recipes",
        sa.Column("difficulty", sa.String(10), server_default="MEDIUM"),
    )
    op.add_column(
        "recipes",
        sa.Column("emoji", sa.String(16)),
    )


def downgrade() -> None:
    op.drop_column("recipes", "emoji")
    op.drop_column("recipes", "difficulty")
