"""Create users and saved_filters tables

Revision ID: 3f1a9c2d7e45
Revises:
Create Date: 2026-10-19 12:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3f1a9c2d7e45'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table('users',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('code', sa.Text(), nullable=False),
        sa.Column('name', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('(CURRENT_TIMESTAMP)'), nullable=True),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('code'),
    )

    op.create_table('saved_filters',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('name', sa.Text(), nullable=False),
        sa.Column('title', sa.Text(), nullable=True),
        sa.Column('filter_view', sa.Text(), nullable=False),
        sa.Column('filter_expression', sa.JSON(), nullable=True),
        sa.Column('filter_custom_expression', sa.Text(), nullable=True),
        sa.Column('shared', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('(CURRENT_TIMESTAMP)'), nullable=True),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.text('(CURRENT_TIMESTAMP)'), nullable=True),
        sa.ForeignKeyConstraint(['user_id'], ['users.id']),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('name', 'filter_view', 'user_id', name='uq_saved_filter_name_view_owner'),
    )
    op.create_index('ix_saved_filters_filter_view', 'saved_filters', ['filter_view'])
    op.create_index('ix_saved_filters_user_id', 'saved_filters', ['user_id'])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index('ix_saved_filters_user_id', 'saved_filters')
    op.drop_index('ix_saved_filters_filter_view', 'saved_filters')
    op.drop_table('saved_filters')
    op.drop_table('users')
