"""create leaderboard view (efficiency + rank over quiz_results)

Revision ID: 002
Revises: 001
Create Date: 2026-10-19

"""
from typing import Sequence, Union
from alembic import op

from codequest.repositories.leaderboard_view import create_view_sql, drop_view_sql

revision: str = "002"
down_revision: Union[str, None] = "001"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # SQLite uses MAX(); PostgreSQL uses GREATEST and NUMERIC rounding
    op.execute(create_view_sql(op.get_bind().dialect.name))


def downgrade() -> None:
    op.execute(drop_view_sql())
