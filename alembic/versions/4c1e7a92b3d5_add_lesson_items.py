"""add_lesson_items

Revision ID: 4c1e7a92b3d5
Revises:
Create Date: 2026-10-18 12:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '4c1e7a92b3d5'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table('lesson_items',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('lesson_id', sa.Integer(), nullable=False),
        sa.Column('item_type', sa.String(20), nullable=False),
        sa.Column('type_id', sa.String(64), nullable=False),
        sa.Column('order_index', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('is_active', sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column('title', sa.String(200), nullable=True),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('hsk_level', sa.Integer(), nullable=True),
        sa.Column('data', sa.Text(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_lesson_items_id', 'lesson_items', ['id'])
    op.create_index('ix_lesson_items_lesson_id', 'lesson_items', ['lesson_id'])
    op.create_index('ix_lesson_items_type_id', 'lesson_items', ['type_id'])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index('ix_lesson_items_type_id', table_name='lesson_items')
    op.drop_index('ix_lesson_items_lesson_id', table_name='lesson_items')
    op.drop_index('ix_lesson_items_id', table_name='lesson_items')
    op.drop_table('lesson_items')
