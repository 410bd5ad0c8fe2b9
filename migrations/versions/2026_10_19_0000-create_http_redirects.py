"""Create http_redirects table

Revision ID: 001_http_redirects
Revises:
Create Date: 2026-10-19 00:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy import inspect

# revision identifiers, used by Alembic.
revision: str = '001_http_redirects'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """
    Create the http_redirects table:
    - path: exact-match lookup key (primary key)
    - target_url: absolute URL the path redirects to
    """
    bind = op.get_bind()
    existing_tables = inspect(bind).get_table_names()

    if 'http_redirects' not in existing_tables:
        op.create_table(
            'http_redirects',
            sa.Column('path', sa.Text(), nullable=False),
            sa.Column('target_url', sa.Text(), nullable=False),
            sa.PrimaryKeyConstraint('path')
        )


def downgrade() -> None:
    op.drop_table('http_redirects')
